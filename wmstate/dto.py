"""Summaries of the manager state for status bars and other clients."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, List, Optional

from wmstate.state import State

_U32_MASK = (1 << 32) - 1


def _to_u32(value: int) -> int:
    return value & _U32_MASK


def _tag_label(state: State, tag_id: int) -> str:
    tag = state.tags.get(tag_id)
    if tag is None:
        raise KeyError(f"unknown tag id: {tag_id}")
    return tag.label


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


@dataclass
class Viewport:
    """A workspace's area and the labels of the tags it shows."""

    tags: List[str]
    h: int
    w: int
    x: int
    y: int
    layout: Any


@dataclass
class ManagerState:
    """What the manager reports about itself."""

    window_title: Optional[str] = None
    desktop_names: List[str] = field(default_factory=list)
    viewports: List[Viewport] = field(default_factory=list)
    active_desktop: List[str] = field(default_factory=list)
    working_tags: List[str] = field(default_factory=list)

    @classmethod
    def from_state(cls, state: State) -> "ManagerState":
        """Summarise ``state``; raises KeyError if a workspace shows an unknown tag."""
        working_tags = [
            tag.label
            for tag in state.tags.all()
            if any(w.has_tag(tag.id) for w in state.windows)
        ]
        viewports = [
            Viewport(
                tags=[_tag_label(state, tag_id) for tag_id in ws.tags],
                x=ws.xyhw.x,
                y=ws.xyhw.y,
                h=_to_u32(ws.xyhw.h),
                w=_to_u32(ws.xyhw.w),
                layout=ws.layout,
            )
            for ws in state.workspaces
        ]
        focused_ws = state.focus_manager.workspace(state.workspaces)
        active_desktop = (
            [_tag_label(state, tag_id) for tag_id in focused_ws.tags]
            if focused_ws is not None
            else []
        )
        focused_window = state.focus_manager.window(state.windows)
        return cls(
            window_title=focused_window.name if focused_window is not None else None,
            desktop_names=[tag.label for tag in state.tags.normal()],
            viewports=viewports,
            active_desktop=active_desktop,
            working_tags=working_tags,
        )


@dataclass
class TagsForWorkspace:
    """One tag as seen from one workspace."""

    name: str
    index: int
    mine: bool
    visible: bool
    focused: bool
    busy: bool


@dataclass
class DisplayWorkspace:
    h: int
    w: int
    x: int
    y: int
    layout: Any
    index: int
    tags: List[TagsForWorkspace]


@dataclass
class DisplayState:
    """Per-workspace tag status, ready for a status bar."""

    window_title: str
    workspaces: List[DisplayWorkspace]

    @classmethod
    def from_manager_state(cls, manager_state: ManagerState) -> "DisplayState":
        visible = [label for vp in manager_state.viewports for label in vp.tags]
        workspaces = [
            DisplayWorkspace(
                tags=[
                    TagsForWorkspace(
                        name=name,
                        index=index,
                        mine=name in viewport.tags,
                        visible=name in visible,
                        focused=name in manager_state.active_desktop,
                        busy=name in manager_state.working_tags,
                    )
                    for index, name in enumerate(manager_state.desktop_names)
                ],
                h=viewport.h,
                w=viewport.w,
                x=viewport.x,
                y=viewport.y,
                layout=viewport.layout,
                index=ws_index,
            )
            for ws_index, viewport in enumerate(manager_state.viewports)
        ]
        return cls(
            window_title=manager_state.window_title or "",
            workspaces=workspaces,
        )

    def to_dict(self) -> dict:
        """Plain data suitable for JSON."""
        return _plain(asdict(self))