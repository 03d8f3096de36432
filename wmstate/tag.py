"""Tags, the desktops that workspaces display, and the list that numbers them."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Optional

log = logging.getLogger(__name__)

# Hidden tags count down from the largest 64-bit unsigned id so that they
# never collide with normal tags, which count up from 1.
HIDDEN_ID_BASE = 2**64 - 1

DEFAULT_MAIN_WIDTH = 50

_I8_MIN = -128
_I8_MAX = 127
_U8_MAX = 255


@dataclass
class Tag:
    """A desktop-like group of windows, shown on at most one workspace at a time.

    Tags are identified by ``id``; the ``label`` is only for display.
    """

    id: int = 0
    label: str = ""
    hidden: bool = False
    layout: Any = None
    main_width_percentage: int = 0
    flipped_horizontal: bool = False
    flipped_vertical: bool = False
    layout_rotation: int = 0

    def change_main_width(self, delta: int) -> None:
        """Change the main width percentage by ``delta``, keeping it within 0..100."""
        if not _I8_MIN <= delta <= _I8_MAX:
            raise ValueError(f"delta out of range: {delta}")
        current = self.main_width_percentage
        signed = current if current <= _I8_MAX else current - 256
        total = signed + delta
        if not _I8_MIN <= total <= _I8_MAX:
            raise OverflowError(
                f"main width {current} changed by {delta} leaves the supported range"
            )
        self.main_width_percentage = min(max(total, 0), 100)

    def set_main_width(self, val: int) -> None:
        """Set the main width percentage, capped at 100."""
        if not 0 <= val <= _U8_MAX:
            raise ValueError(f"main width out of range: {val}")
        self.main_width_percentage = min(val, 100)

    def set_layout(self, layout: Any, main_width_percentage: int) -> None:
        """Switch to ``layout`` with the given main width, resetting the rotation."""
        self.layout = layout
        self.set_main_width(main_width_percentage)
        self.layout_rotation = 0


class Tags:
    """All tags: normal ones numbered from 1 upward, hidden ones from the top down."""

    def __init__(self) -> None:
        self._normal: List[Tag] = []
        self._hidden: List[Tag] = []

    def __repr__(self) -> str:
        return f"Tags(normal={self._normal!r}, hidden={self._hidden!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tags):
            return NotImplemented
        return self._normal == other._normal and self._hidden == other._hidden

    __hash__ = None  # type: ignore[assignment]

    def add_new(
        self,
        label: str,
        layout: Any = None,
        main_width_percentage: int = DEFAULT_MAIN_WIDTH,
    ) -> int:
        """Append a normal tag and return its id."""
        tag = Tag(
            id=len(self._normal) + 1,
            label=label,
            layout=layout,
            main_width_percentage=main_width_percentage,
        )
        self._normal.append(tag)
        return tag.id

    def add_new_unlabeled(
        self, layout: Any = None, main_width_percentage: int = DEFAULT_MAIN_WIDTH
    ) -> int:
        """Append a normal tag labelled with its own id and return the id."""
        next_id = len(self._normal) + 1
        return self.add_new(str(next_id), layout, main_width_percentage)

    def add_new_hidden(self, label: str) -> Optional[int]:
        """Append a hidden tag and return its id, or None if the label is taken."""
        if self.get_hidden_by_label(label) is not None:
            log.error(
                "tried creating a hidden tag with label %s, "
                "but a hidden tag with the same label already exists",
                label,
            )
            return None
        tag = Tag(id=HIDDEN_ID_BASE - len(self._hidden), label=label, hidden=True)
        self._hidden.append(tag)
        return tag.id

    def normal(self) -> List[Tag]:
        """The normal tags, in id order."""
        return list(self._normal)

    def all(self) -> List[Tag]:
        """Every tag, normal ones first, hidden ones at the end."""
        return [*self._normal, *self._hidden]

    def get(self, tag_id: int) -> Optional[Tag]:
        """The tag with ``tag_id``, normal or hidden, or None."""
        if 1 <= tag_id <= len(self._normal):
            return self._normal[tag_id - 1]
        return next((tag for tag in self._hidden if tag.id == tag_id), None)

    def get_hidden_by_label(self, label: str) -> Optional[Tag]:
        return next((tag for tag in self._hidden if tag.label == label), None)

    def len_normal(self) -> int:
        return len(self._normal)