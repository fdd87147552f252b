"""Immutable lookup tables keyed by category enumeration members."""
from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Callable, Dict, Generic, Iterator, List, Type, TypeVar

from ..classes.enums import OrderedCategory
from .validation import MissingCategoryMemberError

K = TypeVar("K", bound=OrderedCategory)
V = TypeVar("V")


class CategoryTable(Mapping, Generic[K, V]):
    """
    Total, read-only mapping from every member of a category to a value.

    Construction fails if any member of the category has no value, so a
    table that exists is always complete. Iteration follows ordinal order.
    """

    __slots__ = ("_category", "_values")

    def __init__(self, category: Type[K], values: Dict[K, V]):
        for key in values:
            if not isinstance(key, category):
                raise TypeError(f"{key!r} is not a member of {category.__name__}")

        missing = [member.key for member in category if member not in values]
        if missing:
            raise MissingCategoryMemberError(
                f"No value for {category.__name__} member(s): {', '.join(missing)}"
            )

        self._category = category
        self._values = MappingProxyType({member: values[member] for member in category})

    @classmethod
    def build(cls, category: Type[K], read: Callable[[K], V]) -> "CategoryTable[K, V]":
        """Build a table by calling read(member) for every member in ordinal order."""
        return cls(category, {member: read(member) for member in category})

    @property
    def category(self) -> Type[K]:
        return self._category

    def __getitem__(self, key: K) -> V:
        return self._values[key]

    def __iter__(self) -> Iterator[K]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def values_list(self) -> List[V]:
        """Values in ordinal order, usable as an ordinal-indexed list."""
        return list(self._values.values())

    def __repr__(self) -> str:
        body = ", ".join(f"{k.key}={v!r}" for k, v in self._values.items())
        return f"CategoryTable[{self._category.__name__}]({body})"
