"""Gutters: extra space reserved at one side of a workspace."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from enum import Enum
from typing import Optional


@functools.total_ordering
class Side(Enum):
    TOP = "Top"
    BOTTOM = "Bottom"
    LEFT = "Left"
    RIGHT = "Right"

    @property
    def _rank(self) -> int:
        return list(Side).index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Side):
            return NotImplemented
        return self._rank < other._rank


@functools.total_ordering
@dataclass(frozen=True)
class Gutter:
    """Space of ``value`` pixels on ``side``, for one workspace or all when ``wsid`` is None."""

    side: Side = Side.TOP
    value: int = 0
    wsid: Optional[int] = None

    def _key(self) -> tuple:
        return (self.side, self.value, self.wsid is not None, self.wsid or 0)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Gutter):
            return NotImplemented
        return self._key() < other._key()