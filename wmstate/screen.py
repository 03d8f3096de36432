"""Screens, their bounding boxes, and the areas docks reserve on them."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Iterable, Optional, Tuple

from wmstate.kinds import WindowHandle
from wmstate.size import Size
from wmstate.xyhw import Xyhw

_DOCK_VALUE_ORDER = (
    "left",
    "right",
    "top",
    "bottom",
    "left_start_y",
    "left_end_y",
    "right_start_y",
    "right_end_y",
    "top_start_x",
    "top_end_x",
    "bottom_start_x",
    "bottom_end_x",
)


def _to_i32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    return ((int(value) + 2**31) % 2**32) - 2**31


@dataclass(frozen=True)
class BBox:
    """Bounding box of a screen."""

    x: int
    y: int
    width: int
    height: int


def _default_bbox() -> BBox:
    return BBox(x=0, y=0, width=800, height=600)


@dataclass
class Screen:
    """A physical or configured screen."""

    bbox: BBox = field(default_factory=_default_bbox)
    root: WindowHandle = field(default_factory=lambda: WindowHandle.mock(0))
    wsid: Optional[int] = None
    max_window_width: Optional[Size] = None

    def contains_point(self, x: int, y: int) -> bool:
        bbox = self.bbox
        max_x = bbox.x + bbox.width
        max_y = bbox.y + bbox.height
        return bbox.x <= x <= max_x and bbox.y <= y <= max_y

    def contains_dock_area(
        self, dock_area: "DockArea", screens_area: Tuple[int, int]
    ) -> bool:
        """Whether the dock's reserved area starts on this screen.

        ``screens_area`` is the (height, width) of all screens together.
        """
        screens_height, screens_width = screens_area
        if dock_area.top > 0:
            return self.contains_point(dock_area.top_start_x, dock_area.top)
        if dock_area.bottom > 0:
            return self.contains_point(
                dock_area.bottom_start_x, screens_height - dock_area.bottom
            )
        if dock_area.left > 0:
            return self.contains_point(dock_area.left, dock_area.left_start_y)
        if dock_area.right > 0:
            return self.contains_point(
                screens_width - dock_area.right, dock_area.right_start_y
            )
        return False


@dataclass
class DockArea:
    """Space a dock reserves at the edges of the combined screen area."""

    top: int = 0
    top_start_x: int = 0
    top_end_x: int = 0

    bottom: int = 0
    bottom_start_x: int = 0
    bottom_end_x: int = 0

    right: int = 0
    right_start_y: int = 0
    right_end_y: int = 0

    left: int = 0
    left_start_y: int = 0
    left_end_y: int = 0

    @classmethod
    def from_values(cls, values: Iterable[int]) -> "DockArea":
        """Build from the twelve strut values, in the order the display server reports them."""
        items = list(values)
        if len(items) < len(_DOCK_VALUE_ORDER):
            raise ValueError(
                f"a dock area needs {len(_DOCK_VALUE_ORDER)} values, got {len(items)}"
            )
        return cls(
            **{name: _to_i32(value) for name, value in zip(_DOCK_VALUE_ORDER, items)}
        )

    def as_xyhw(
        self, screens_height: int, screens_width: int, screen: Screen
    ) -> Optional[Xyhw]:
        """The reserved rectangle on ``screen``, or None if nothing is reserved."""
        bbox = screen.bbox
        if self.top > 0:
            return self.xyhw_from_top(bbox.y)
        if self.bottom > 0:
            return self.xyhw_from_bottom(screens_height, bbox.y + bbox.height)
        if self.left > 0:
            return self.xyhw_from_left(bbox.x)
        if self.right > 0:
            return self.xyhw_from_right(screens_width, bbox.x + bbox.width)
        return None

    def xyhw_from_top(self, screen_y: int) -> Xyhw:
        return Xyhw(
            x=self.top_start_x,
            y=screen_y,
            h=self.top - screen_y,
            w=self.top_end_x - self.top_start_x,
        )

    def xyhw_from_bottom(self, screens_height: int, screen_bottom: int) -> Xyhw:
        return Xyhw(
            x=self.bottom_start_x,
            y=screens_height - self.bottom,
            h=self.bottom - (screens_height - screen_bottom),
            w=self.bottom_end_x - self.bottom_start_x,
        )

    def xyhw_from_left(self, screen_x: int) -> Xyhw:
        return Xyhw(
            x=screen_x,
            y=self.left_start_y,
            h=self.left_end_y - self.left_start_y,
            w=self.left - screen_x,
        )

    def xyhw_from_right(self, screens_width: int, screen_right: int) -> Xyhw:
        return Xyhw(
            x=screens_width - self.right,
            y=self.right_start_y,
            h=self.right_end_y - self.right_start_y,
            w=self.right - (screens_width - screen_right),
        )


__all__ = ["BBox", "DockArea", "Screen"] + [f.name for f in fields(BBox)][:0]