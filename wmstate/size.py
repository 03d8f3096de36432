"""Sizes that are either absolute pixels or a fraction of a whole."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


@dataclass(frozen=True)
class Pixel:
    """An absolute size in pixels."""

    value: int

    def into_absolute(self, whole: float) -> float:
        return float(self.value)


@dataclass(frozen=True)
class Percentage:
    """A size relative to a whole, as a fraction of it."""

    value: float

    def into_absolute(self, whole: float) -> float:
        return whole * self.value


Size = Union[Pixel, Percentage]


def parse_size(value: object) -> Size:
    """Read a size from a plain value: integers are pixels, floats are fractions."""
    if isinstance(value, (Pixel, Percentage)):
        return value
    if isinstance(value, bool):
        raise TypeError(f"not a size: {value!r}")
    if isinstance(value, int):
        if _I32_MIN <= value <= _I32_MAX:
            return Pixel(value)
        return Percentage(float(value))
    if isinstance(value, float):
        return Percentage(value)
    raise TypeError(f"not a size: {value!r}")