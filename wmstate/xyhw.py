"""Rectangles with size limits, and partial updates applied to them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

MIN_LIMIT = -999_999_999
MAX_LIMIT = 999_999_999

_FIELDS = ("x", "y", "h", "w", "minw", "maxw", "minh", "maxh")
_U64_MASK = (1 << 64) - 1


def _tdiv(a: int, b: int) -> int:
    """Integer division that truncates toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


class Xyhw:
    """Position and size of a rectangle, with min/max width and height.

    The origin is the top-left corner. Assigning any field keeps the height
    and width inside their limits.
    """

    __slots__ = _FIELDS
    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        x: int = 0,
        y: int = 0,
        h: int = 0,
        w: int = 0,
        minw: int = MIN_LIMIT,
        maxw: int = MAX_LIMIT,
        minh: int = MIN_LIMIT,
        maxh: int = MAX_LIMIT,
    ) -> None:
        for name, value in zip(_FIELDS, (x, y, h, w, minw, maxw, minh, maxh)):
            object.__setattr__(self, name, value)
        self._update_limits()

    @classmethod
    def _raw(cls, **values: int) -> "Xyhw":
        """Build an instance without applying the limits."""
        obj = cls.__new__(cls)
        for name in _FIELDS:
            object.__setattr__(obj, name, values[name])
        return obj

    def __setattr__(self, name: str, value: Any) -> None:
        object.__setattr__(self, name, value)
        self._update_limits()

    def _update_limits(self) -> None:
        if self.h > self.maxh:
            object.__setattr__(self, "h", self.maxh)
        if self.w > self.maxw:
            object.__setattr__(self, "w", self.maxw)
        if self.h < self.minh:
            object.__setattr__(self, "h", self.minh)
        if self.w < self.minw:
            object.__setattr__(self, "w", self.minw)

    def as_dict(self) -> dict:
        return {name: getattr(self, name) for name in _FIELDS}

    def copy(self) -> "Xyhw":
        return Xyhw._raw(**self.as_dict())

    def __copy__(self) -> "Xyhw":
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Xyhw):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __repr__(self) -> str:
        inner = ", ".join(f"{name}={getattr(self, name)}" for name in _FIELDS)
        return f"Xyhw({inner})"

    def _combine(self, other: "Xyhw", sign: int) -> "Xyhw":
        return Xyhw._raw(
            x=self.x + sign * other.x,
            y=self.y + sign * other.y,
            w=self.w + sign * other.w,
            h=self.h + sign * other.h,
            minw=max(self.minw, other.minw),
            maxw=min(self.maxw, other.maxw),
            minh=max(self.minh, other.minh),
            maxh=min(self.maxh, other.maxh),
        )

    def __add__(self, other: "Xyhw") -> "Xyhw":
        if not isinstance(other, Xyhw):
            return NotImplemented
        return self._combine(other, 1)

    def __sub__(self, other: "Xyhw") -> "Xyhw":
        if not isinstance(other, Xyhw):
            return NotImplemented
        return self._combine(other, -1)

    def clear_minmax(self) -> None:
        """Reset the size limits to their widest values."""
        object.__setattr__(self, "minw", MIN_LIMIT)
        object.__setattr__(self, "maxw", MAX_LIMIT)
        object.__setattr__(self, "minh", MIN_LIMIT)
        object.__setattr__(self, "maxh", MAX_LIMIT)
        self._update_limits()

    def contains_point(self, x: int, y: int) -> bool:
        max_x = self.x + self.w
        max_y = self.y + self.h
        return self.x <= x <= max_x and self.y <= y <= max_y

    def volume(self) -> int:
        """Area as an unsigned 64-bit product."""
        return ((self.h & _U64_MASK) * (self.w & _U64_MASK)) & _U64_MASK

    def without(self, other: "Xyhw") -> "Xyhw":
        """Trim ``other`` out of this rectangle so that they don't overlap."""
        x, y, h, w = self.x, self.y, self.h, self.w
        if other.w > other.h:
            if other.y > self.y + _tdiv(self.h, 2):
                bottom_over = (y + h) - other.y
                if bottom_over > 0:
                    h -= bottom_over
            else:
                top_over = (other.y + other.h) - y
                if top_over > 0:
                    y += top_over
                    h -= top_over
        else:
            left_over = (other.x + other.w) - x
            if other.x > self.x + _tdiv(self.w, 2):
                right_over = (x + w) - other.x
                if right_over > 0:
                    w -= right_over
            elif left_over > 0:
                x += left_over
                w -= left_over
        values = self.as_dict()
        values.update(x=x, y=y, h=h, w=w)
        return Xyhw._raw(**values)

    def center_halfed(self) -> "Xyhw":
        """A rectangle of half the size, centred inside this one."""
        half_w = _tdiv(self.w, 2)
        half_h = _tdiv(self.h, 2)
        return Xyhw(
            x=self.x + half_w - _tdiv(self.w, 4),
            y=self.y + half_h - _tdiv(self.h, 4),
            h=half_h,
            w=half_w,
        )

    def center_relative(self, outer: "Xyhw", border: int) -> None:
        """Move this rectangle so that it is centred within ``outer``."""
        object.__setattr__(
            self, "x", outer.x + _tdiv(outer.w, 2) - _tdiv(self.w, 2) - border
        )
        object.__setattr__(
            self, "y", outer.y + _tdiv(outer.h, 2) - _tdiv(self.h, 2) - border
        )

    def center(self) -> tuple[int, int]:
        return (self.x + _tdiv(self.w, 2), self.y + _tdiv(self.h, 2))


_CHANGE_ORDER = ("x", "y", "w", "h", "minw", "maxw", "minh", "maxh")


@dataclass
class XyhwChange:
    """A partial update of an :class:`Xyhw`; ``None`` fields are left alone."""

    x: Optional[int] = None
    y: Optional[int] = None
    h: Optional[int] = None
    w: Optional[int] = None
    minw: Optional[int] = None
    maxw: Optional[int] = None
    minh: Optional[int] = None
    maxh: Optional[int] = None

    @classmethod
    def from_xyhw(cls, xyhw: Xyhw) -> "XyhwChange":
        return cls(**xyhw.as_dict())

    def update(self, xyhw: Xyhw) -> bool:
        """Apply the change in place; return whether anything differed."""
        changed = False
        for name in _CHANGE_ORDER:
            value = getattr(self, name)
            if value is not None and getattr(xyhw, name) != value:
                setattr(xyhw, name, value)
                changed = True
        return changed

    def update_window_floating(self, window: Any) -> bool:
        """Apply the change to a floating window's exact position."""
        if not window.floating:
            return False
        current = window.calculated_xyhw()
        changed = self.update(current)
        window.set_floating_exact(current)
        return changed

    def update_window_strut(self, window: Any) -> bool:
        """Apply the change to a window's strut, creating one if missing."""
        changed = False
        if window.strut is None:
            window.strut = Xyhw()
            changed = True
        strut = window.strut.copy()
        changed = self.update(strut) or changed
        window.strut = strut
        return changed