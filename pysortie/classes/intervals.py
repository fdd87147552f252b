"""Min/max interval values read from the settings documents."""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional, Tuple


def split_interval_text(text: str, number_type: type = float) -> Tuple[float, float]:
    """
    Split interval text written as two numbers ("10,20") into its bounds.

    Bound ordering is not checked here.

    Raises:
        ValueError: If the text does not hold exactly two numbers of number_type
    """
    parts = [p.strip() for p in text.split(",")]
    if len(parts) != 2 or not all(parts):
        raise ValueError(f"expected two comma-separated numbers, got '{text}'")
    return number_type(parts[0]), number_type(parts[1])


@dataclass(frozen=True)
class MinMaxD:
    """Real interval, bounds inclusive. ``min == max`` is a valid degenerate interval."""
    min: float
    max: float

    def __post_init__(self):
        if self.min > self.max:
            raise ValueError(f"interval minimum {self.min} exceeds maximum {self.max}")

    @classmethod
    def parse(cls, text: str) -> "MinMaxD":
        low, high = split_interval_text(text, float)
        return cls(low, high)

    @property
    def span(self) -> float:
        return self.max - self.min

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max

    def get_random(self, rng: Optional[random.Random] = None) -> float:
        rng = rng or random
        return rng.uniform(self.min, self.max)

    def __str__(self) -> str:
        return f"{self.min:g},{self.max:g}"


@dataclass(frozen=True)
class MinMaxI:
    """Integer interval, bounds inclusive."""
    min: int
    max: int

    def __post_init__(self):
        if self.min > self.max:
            raise ValueError(f"interval minimum {self.min} exceeds maximum {self.max}")

    @classmethod
    def parse(cls, text: str) -> "MinMaxI":
        low, high = split_interval_text(text, int)
        return cls(low, high)

    @property
    def span(self) -> int:
        return self.max - self.min

    def contains(self, value: int) -> bool:
        return self.min <= value <= self.max

    def get_random(self, rng: Optional[random.Random] = None) -> int:
        rng = rng or random
        return rng.randint(self.min, self.max)

    def __str__(self) -> str:
        return f"{self.min},{self.max}"
