"""Workspaces: the part of a screen in which tags are displayed."""

from __future__ import annotations

import math
from typing import Any, List, Optional

from wmstate.gutter import Gutter, Side
from wmstate.margins import Margins
from wmstate.screen import BBox
from wmstate.size import Size
from wmstate.window import Window
from wmstate.xyhw import Xyhw

_I8_MIN = -128
_I8_MAX = 127


def _half(value: int) -> int:
    """Halve, truncating toward zero."""
    return int(value / 2) if abs(value) < 2**52 else (abs(value) // 2) * (1 if value >= 0 else -1)


class Workspace:
    """A screen division displaying one tag, with margins, gutters and avoided areas."""

    def __init__(
        self,
        id: Optional[int],
        bbox: BBox,
        layout: Any,
        max_window_width: Optional[Size] = None,
        main_width_percentage: int = 50,
    ) -> None:
        self.id = id
        self.layout = layout
        self.main_width_percentage = main_width_percentage
        self.tags: List[int] = []
        self.margin = Margins.uniform(10)
        self.margin_multiplier = 1.0
        self.gutters: List[Gutter] = []
        self.avoid: List[Xyhw] = []
        self.xyhw = Xyhw(x=bbox.x, y=bbox.y, h=bbox.height, w=bbox.width)
        self._xyhw_avoided = Xyhw(x=bbox.x, y=bbox.y, h=bbox.height, w=bbox.width)
        self.max_window_width = max_window_width

    def __repr__(self) -> str:
        return (
            f"Workspace {{ id: {self.id!r}, tags: {self.tags!r}, "
            f"x: {self.xyhw.x}, y: {self.xyhw.y} }}"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Workspace):
            return NotImplemented
        return self.id is not None and self.id == other.id

    __hash__ = None  # type: ignore[assignment]

    def load_config(self, config: Any) -> None:
        """Take the workspace margin and gutters from the configuration."""
        margin = config.workspace_margin
        self.margin = margin if margin is not None else Margins.uniform(0)
        self.gutters = self.get_gutters_for_theme(config)

    def get_gutters_for_theme(self, config: Any) -> List[Gutter]:
        """Gutters that apply here, one per side; a workspace-specific one wins over a general one."""
        result: List[Gutter] = []
        for gutter in config.gutters:
            if gutter.wsid != self.id and gutter.wsid is not None:
                continue
            position = next(
                (i for i, g in enumerate(result) if g.side == gutter.side), None
            )
            if position is None:
                result.append(gutter)
            elif result[position].wsid is None:
                result[position] = gutter
        return result

    def show_tag(self, tag: int) -> None:
        self.tags = [tag]

    def contains_point(self, x: int, y: int) -> bool:
        return self.xyhw.contains_point(x, y)

    def has_tag(self, tag: int) -> bool:
        return tag in self.tags

    def is_displaying(self, window: Window) -> bool:
        """Whether the window carries a tag shown here."""
        return any(self.has_tag(tag) for tag in window.tags)

    def is_managed(self, window: Window) -> bool:
        """Whether this workspace positions the window."""
        return self.is_displaying(window) and not window.is_unmanaged()

    def _gutter(self, side: Side) -> int:
        return next((g.value for g in self.gutters if g.side == side), 0)

    def x(self) -> int:
        """Left edge, ignoring any maximum window width."""
        left = int(self.margin_multiplier * self.margin.left)
        return self._xyhw_avoided.x + left + self._gutter(Side.LEFT)

    def x_limited(self, column_count: int) -> int:
        """Left edge, centring the area when a maximum window width applies."""
        remainder = self.width() - self.width_limited(column_count)
        if remainder == 0:
            return self.x()
        return self.x() + _half(remainder)

    def y(self) -> int:
        top = int(self.margin_multiplier * self.margin.top)
        return self._xyhw_avoided.y + top + self._gutter(Side.TOP)

    def height(self) -> int:
        vertical = int(self.margin_multiplier * (self.margin.top + self.margin.bottom))
        gutter = self._gutter(Side.TOP) + self._gutter(Side.BOTTOM)
        return self._xyhw_avoided.h - vertical - gutter

    def width(self) -> int:
        """Usable width, ignoring any maximum window width."""
        horizontal = int(
            self.margin_multiplier * (self.margin.left + self.margin.right)
        )
        gutter = self._gutter(Side.LEFT) + self._gutter(Side.RIGHT)
        return self._xyhw_avoided.w - horizontal - gutter

    def width_limited(self, column_count: int) -> int:
        """Usable width, capped by the maximum window width per column."""
        width = self.width()
        if self.max_window_width is None:
            return width
        limit = math.floor(self.max_window_width.into_absolute(float(width)) * column_count)
        return min(limit, width)

    def center_halfed(self) -> Xyhw:
        return self._xyhw_avoided.center_halfed()

    def update_avoided_areas(self) -> None:
        """Recompute the usable area with every avoided rectangle trimmed out."""
        xyhw = self.xyhw.copy()
        for area in self.avoid:
            xyhw = xyhw.without(area)
        self._xyhw_avoided = xyhw

    def change_main_width(self, delta: int) -> None:
        """Change the main width percentage by ``delta``, keeping it within 0..100."""
        if not _I8_MIN < delta <= _I8_MAX:
            raise ValueError(f"delta out of range: {delta}")
        current = self.main_width_percentage
        signed = current if current < 128 else current - 256
        if signed < -delta:
            self.main_width_percentage = 0
            return
        if delta < 0:
            self.main_width_percentage = current + delta
            return
        self.main_width_percentage = min(current + delta, 100)