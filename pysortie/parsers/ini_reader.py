"""
Reader for the sectioned key/value settings documents of the database.

Documents are INI files::

    [EnemyCombatAirPatrols]
    DistanceFromObjectives = 10,20
    RelativePower.Low = 50

Keys keep their case, values are never interpolated ('$' and '%' are
literal) and sequences are comma-separated. The reader only converts text to
Python values; domain rules (ranges, templates, cross references) belong to
the database loader.
"""
from __future__ import annotations

import configparser
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Dict, Iterator, List, Optional, Type, TypeVar, Union

from ..classes.intervals import MinMaxD, MinMaxI, split_interval_text
from ..database.validation import (
    InvalidIntervalError,
    MalformedValueError,
    MissingDocumentError,
    MissingKeyError,
)

T = TypeVar("T")

SEQUENCE_SEPARATOR = ","

_BOOLEAN_STATES = configparser.ConfigParser.BOOLEAN_STATES


def _to_bool(text: str) -> bool:
    try:
        return _BOOLEAN_STATES[text.lower()]
    except KeyError:
        raise ValueError(f"'{text}' is not a boolean") from None


def _to_str(text: str) -> str:
    return text


_SCALAR_CONVERTERS: Dict[type, Callable[[str], object]] = {
    int: int,
    float: float,
    str: _to_str,
    bool: _to_bool,
}

_INTERVAL_TYPES: Dict[type, type] = {
    MinMaxI: int,
    MinMaxD: float,
}


class SettingsDocument:
    """
    Parsed view over one settings document.

    Use :meth:`open` to get a scoped handle; the file is read once when the
    block is entered and the parsed content is dropped when it exits.

    Usage:
        with SettingsDocument.open("Database/Names.ini") as ini:
            template = ini.get_value("Mission", "Template", str)
            parts = ini.get_value_array("Mission", "Part1")
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self.name = self.path.name
        self._parser: Optional[configparser.ConfigParser] = None

    @classmethod
    @contextmanager
    def open(cls, path: Union[str, Path]) -> Iterator["SettingsDocument"]:
        document = cls(path)
        document.load()
        try:
            yield document
        finally:
            document.release()

    def load(self):
        """Read and parse the document from disk."""
        if not self.path.is_file():
            raise MissingDocumentError(
                f"Settings document not found: {self.path}", document=self.name
            )

        parser = configparser.ConfigParser(
            interpolation=None,
            comment_prefixes=(";", "#"),
            inline_comment_prefixes=None,
            default_section="__defaults__",
        )
        parser.optionxform = str  # keys are case-sensitive

        try:
            with open(self.path, "r", encoding="utf-8-sig") as f:
                parser.read_file(f, source=str(self.path))
        except configparser.Error as e:
            raise MalformedValueError(
                f"Settings document could not be parsed: {e}", document=self.name
            ) from e
        except UnicodeDecodeError as e:
            raise MalformedValueError(
                f"Settings document is not valid UTF-8: {e}", document=self.name
            ) from e
        except OSError as e:
            raise MissingDocumentError(
                f"Settings document could not be read: {e}", document=self.name
            ) from e

        self._parser = parser

    def release(self):
        self._parser = None

    @property
    def is_loaded(self) -> bool:
        return self._parser is not None

    def _require_parser(self) -> configparser.ConfigParser:
        if self._parser is None:
            raise RuntimeError(f"Settings document '{self.name}' is not open")
        return self._parser

    def sections(self) -> List[str]:
        return self._require_parser().sections()

    def keys(self, section: str) -> List[str]:
        parser = self._require_parser()
        if not parser.has_section(section):
            return []
        return list(parser[section].keys())

    def has_key(self, section: str, key: str) -> bool:
        parser = self._require_parser()
        return parser.has_section(section) and parser.has_option(section, key)

    def _raw(self, section: str, key: str) -> str:
        parser = self._require_parser()
        if not parser.has_section(section):
            raise MissingKeyError(
                "Missing section", document=self.name, section=section, key=key
            )
        if not parser.has_option(section, key):
            raise MissingKeyError(
                "Missing key", document=self.name, section=section, key=key
            )
        return parser.get(section, key).strip()

    def _convert(self, text: str, value_type: Type[T], section: str, key: str) -> T:
        if value_type in _INTERVAL_TYPES:
            try:
                low, high = split_interval_text(text, _INTERVAL_TYPES[value_type])
            except ValueError as e:
                raise MalformedValueError(
                    f"Cannot read '{text}' as {value_type.__name__}: {e}",
                    document=self.name, section=section, key=key,
                ) from e
            if low > high:
                raise InvalidIntervalError(
                    f"Interval minimum {low} exceeds maximum {high}",
                    document=self.name, section=section, key=key,
                )
            return value_type(low, high)

        converter = _SCALAR_CONVERTERS.get(value_type)
        if converter is None:
            raise TypeError(f"Unsupported settings value type: {value_type!r}")
        try:
            return converter(text)
        except ValueError as e:
            raise MalformedValueError(
                f"Cannot read '{text}' as {value_type.__name__}",
                document=self.name, section=section, key=key,
            ) from e

    def get_value(self, section: str, key: str, value_type: Type[T] = str) -> T:
        """
        Read a single value.

        Args:
            section: Section name (without brackets)
            key: Key name, case-sensitive
            value_type: int, float, str, bool, MinMaxI or MinMaxD

        Raises:
            MissingKeyError: If the section or key is absent
            MalformedValueError: If the text cannot be converted
            InvalidIntervalError: If an interval's minimum exceeds its maximum
        """
        return self._convert(self._raw(section, key), value_type, section, key)

    def get_value_array(self, section: str, key: str, value_type: Type[T] = str) -> List[T]:
        """
        Read a comma-separated sequence.

        Items are stripped and empty items dropped, so an empty value gives
        an empty list. An absent key is an error, not an empty list.
        """
        text = self._raw(section, key)
        items = [item.strip() for item in text.split(SEQUENCE_SEPARATOR)]
        return [self._convert(item, value_type, section, key) for item in items if item]

    def __repr__(self) -> str:
        state = "open" if self.is_loaded else "closed"
        return f"SettingsDocument('{self.path}', {state})"
