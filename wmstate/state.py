"""The whole state of the window manager, and restoring it after a reload."""

from __future__ import annotations

import copy
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Deque, Dict, List, Optional

from wmstate.focus import FocusManager
from wmstate.kinds import Mode, WindowHandle, WindowType
from wmstate.layout_manager import LayoutManager
from wmstate.size import Size
from wmstate.tag import Tags
from wmstate.window import Window
from wmstate.workspace import Workspace

_FIRST_LEVEL = frozenset(
    {WindowType.DIALOG, WindowType.SPLASH, WindowType.UTILITY, WindowType.MENU}
)


@dataclass
class SetWindowOrder:
    """Request to the display server to stack windows in this order."""

    windows: List[Window] = field(default_factory=list)


class State:
    """Screens, windows, workspaces, tags and focus of a running manager.

    The configuration is read through the attributes ``tag_labels``,
    ``scratchpads``, ``layouts``, ``layout_mode``, ``focus_behaviour``,
    ``focus_new_windows``, ``disable_current_tag_swap``, ``max_window_width``,
    ``mousekey``, ``default_width`` and ``default_height``.
    """

    def __init__(self, config: Any) -> None:
        self.layout_manager = LayoutManager(
            mode=config.layout_mode, layouts=list(config.layouts)
        )
        self.tags = Tags()
        for label in config.tag_labels:
            self.tags.add_new(label, self.layout_manager.new_layout())
        self.tags.add_new_hidden("NSP")

        self.focus_manager = FocusManager.from_config(config)
        self.scratchpads: List[Any] = list(config.scratchpads)
        self.layouts: List[Any] = list(config.layouts)
        self.screens: List[Any] = []
        self.windows: List[Window] = []
        self.workspaces: List[Workspace] = []
        self.mode = Mode.normal()
        self.active_scratchpads: Dict[str, Optional[int]] = {}
        self.actions: Deque[Any] = deque()
        # Limits the frame rate while windows are moved or resized.
        self.frame_rate_limitor = 0
        self.disable_current_tag_swap: bool = config.disable_current_tag_swap
        self.max_window_width: Optional[Size] = config.max_window_width
        self.mousekey: str = config.mousekey
        self.default_width: int = config.default_width
        self.default_height: int = config.default_height

    def sort_windows(self) -> None:
        """Order windows by importance, keeping the order within each level.

        Dialogs, splashes, utilities and menus come first, then floating
        normal windows, then the other normal windows, then everything else.
        """
        first: List[Window] = []
        floating: List[Window] = []
        normal: List[Window] = []
        rest: List[Window] = []
        for window in self.windows:
            if window.window_type in _FIRST_LEVEL:
                first.append(window)
            elif window.window_type is WindowType.NORMAL and window.floating:
                floating.append(window)
            elif window.window_type is WindowType.NORMAL:
                normal.append(window)
            else:
                rest.append(window)
        self.windows = first + floating + normal + rest
        self.actions.append(SetWindowOrder([copy.copy(w) for w in self.windows]))

    def move_to_top(self, handle: WindowHandle) -> bool:
        """Raise a window to the front of its level; False if it is unknown."""
        index = next(
            (i for i, w in enumerate(self.windows) if w.handle == handle), None
        )
        if index is None:
            return False
        self.windows.insert(0, self.windows.pop(index))
        self.sort_windows()
        return True

    def update_static(self) -> None:
        """Give windows with a strut, and sticky windows, the tags of the workspace they sit on."""
        workspaces = list(self.workspaces)
        for window in self.windows:
            if window.strut is None and not window.is_sticky():
                continue
            if window.strut is not None:
                x, y = window.strut.center()
            else:
                x, y = window.calculated_xyhw().center()
            ws = next((ws for ws in workspaces if ws.contains_point(x, y)), None)
            if ws is not None:
                window.tags = list(ws.tags)

    def load_config(self, config: Any) -> None:
        """Apply a reloaded configuration to the state and everything in it."""
        self.mousekey = config.mousekey
        self.max_window_width = config.max_window_width
        for window in self.windows:
            window.load_config(config)
        for workspace in self.workspaces:
            workspace.load_config(config)

    def restore_state(self, state: "State") -> None:
        """Apply a saved state to this running one."""
        for workspace in self.workspaces:
            old = next((w for w in state.workspaces if w.id == workspace.id), None)
            if old is not None:
                workspace.layout = old.layout
                workspace.main_width_percentage = old.main_width_percentage
                workspace.margin_multiplier = old.margin_multiplier

        for old_tag in state.tags.all():
            tag = self.tags.get(old_tag.id)
            if tag is not None:
                tag.hidden = old_tag.hidden
                tag.layout = old_tag.layout
                tag.layout_rotation = old_tag.layout_rotation
                tag.flipped_vertical = old_tag.flipped_vertical
                tag.flipped_horizontal = old_tag.flipped_horizontal
                tag.main_width_percentage = old_tag.main_width_percentage

        same_tags = self.tags.all() == state.tags.all()
        ordered: List[Window] = []
        had_strut = False
        for old_window in state.windows:
            index = next(
                (i for i, w in enumerate(self.windows) if w.handle == old_window.handle),
                None,
            )
            if index is None:
                continue
            window = self.windows.pop(index)
            had_strut = had_strut or old_window.strut is not None

            window.set_floating(old_window.floating)
            window.set_floating_offsets(old_window.get_floating_offsets())
            window.apply_margin_multiplier(old_window.margin_multiplier)
            window.pid = old_window.pid
            window.normal = old_window.normal.copy()
            if same_tags:
                window.tags = list(old_window.tags)
            else:
                kept = [t for t in old_window.tags if self.tags.get(t) is not None]
                # Keep the window reachable when none of its tags survive.
                if not kept:
                    kept = [1]
                window.clear_tags()
                for tag_id in kept:
                    window.tag(tag_id)
            window.strut = None if old_window.strut is None else old_window.strut.copy()
            window.set_states(old_window.states())
            ordered.append(window)

        if had_strut:
            self.update_static()
        self.windows.extend(ordered)

        self.active_scratchpads.update(state.active_scratchpads)