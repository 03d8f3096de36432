"""Which workspace, window and tag currently hold the focus."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Deque, Dict, Optional, Sequence

from wmstate.kinds import WindowHandle
from wmstate.window import Window
from wmstate.workspace import Workspace


class FocusBehaviour(Enum):
    """How focus follows the pointer."""

    SLOPPY = "Sloppy"
    CLICK_TO = "ClickTo"
    DRIVEN = "Driven"


@dataclass
class FocusManager:
    """Focus history; the front of each history is what is focused now."""

    behaviour: FocusBehaviour = FocusBehaviour.SLOPPY
    focus_new_windows: bool = True
    workspace_history: Deque[int] = field(default_factory=deque)
    window_history: Deque[Optional[WindowHandle]] = field(default_factory=deque)
    tag_history: Deque[int] = field(default_factory=deque)
    tags_last_window: Dict[int, WindowHandle] = field(default_factory=dict)

    @classmethod
    def from_config(cls, config: Any) -> "FocusManager":
        """Read ``focus_behaviour`` and ``focus_new_windows`` from the configuration."""
        return cls(
            behaviour=config.focus_behaviour,
            focus_new_windows=config.focus_new_windows,
        )

    def workspace(self, workspaces: Sequence[Workspace]) -> Optional[Workspace]:
        """The focused workspace, or None."""
        if not self.workspace_history:
            return None
        index = self.workspace_history[0]
        if 0 <= index < len(workspaces):
            return workspaces[index]
        return None

    def tag(self, offset: int) -> Optional[int]:
        """The focused tag for offset 0; larger offsets reach further back."""
        if 0 <= offset < len(self.tag_history):
            return self.tag_history[offset]
        return None

    def window(self, windows: Sequence[Window]) -> Optional[Window]:
        """The focused window, or None."""
        if not self.window_history:
            return None
        handle = self.window_history[0]
        if handle is None:
            return None
        return next((w for w in windows if w.handle == handle), None)