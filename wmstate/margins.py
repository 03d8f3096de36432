"""Margins around windows and workspaces."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Margins:
    """Spacing on each side, in pixels."""

    top: int
    right: int
    bottom: int
    left: int

    @classmethod
    def uniform(cls, size: int) -> "Margins":
        return cls(top=size, right=size, bottom=size, left=size)

    @classmethod
    def from_pair(cls, top_and_bottom: int, left_and_right: int) -> "Margins":
        return cls(
            top=top_and_bottom,
            right=left_and_right,
            bottom=top_and_bottom,
            left=left_and_right,
        )

    @classmethod
    def from_triple(cls, top: int, left_and_right: int, bottom: int) -> "Margins":
        return cls(top=top, right=left_and_right, bottom=bottom, left=left_and_right)