from dataclasses import dataclass, field
from typing import List

from wmstate.focus import FocusBehaviour
from wmstate.kinds import Mode, WindowHandle, WindowState, WindowType
from wmstate.layout_manager import LayoutMode
from wmstate.margins import Margins
from wmstate.screen import BBox
from wmstate.state import SetWindowOrder, State
from wmstate.tag import HIDDEN_ID_BASE
from wmstate.window import Window
from wmstate.workspace import Workspace
from wmstate.xyhw import Xyhw


@dataclass
class FakeConfig:
    tag_labels: List[str] = field(default_factory=lambda: ["web", "chat", "code"])
    layouts: List[str] = field(default_factory=lambda: ["main", "stack"])
    layout_mode: LayoutMode = LayoutMode.WORKSPACE
    focus_behaviour: FocusBehaviour = FocusBehaviour.SLOPPY
    focus_new_windows: bool = True
    scratchpads: list = field(default_factory=list)
    disable_current_tag_swap: bool = False
    max_window_width: object = None
    mousekey: str = "Mod4"
    default_width: int = 1000
    default_height: int = 800
    margin: Margins = Margins.uniform(5)
    border_width: int = 2
    always_float: bool = False
    workspace_margin: object = None
    gutters: list = field(default_factory=list)


def _window(n, window_type=WindowType.NORMAL):
    w = Window(WindowHandle.mock(n))
    w.window_type = window_type
    return w


def _handles(windows):
    return [w.handle.value for w in windows]


def test_new_state_builds_tags_from_config():
    state = State(FakeConfig())
    assert [t.label for t in state.tags.normal()] == ["web", "chat", "code"]
    assert state.tags.get_hidden_by_label("NSP").id == HIDDEN_ID_BASE
    assert all(t.layout == "main" for t in state.tags.normal())
    assert state.mode == Mode.normal()
    assert state.mousekey == "Mod4"
    assert state.layouts == ["main", "stack"]


def test_sort_windows_orders_by_importance():
    state = State(FakeConfig())
    floating = _window(4)
    floating.set_floating(True)
    state.windows = [
        _window(1),
        _window(2, WindowType.DOCK),
        _window(3, WindowType.DIALOG),
        floating,
        _window(5),
    ]
    state.sort_windows()
    assert _handles(state.windows) == [3, 4, 1, 5, 2]
    action = state.actions[-1]
    assert isinstance(action, SetWindowOrder)
    assert _handles(action.windows) == _handles(state.windows)


def test_move_to_top_reorders_within_level():
    state = State(FakeConfig())
    state.windows = [_window(1), _window(2), _window(3, WindowType.MENU)]
    assert state.move_to_top(WindowHandle.mock(2)) is True
    assert _handles(state.windows) == [3, 2, 1]


def test_move_to_top_unknown_handle():
    state = State(FakeConfig())
    state.windows = [_window(1)]
    assert state.move_to_top(WindowHandle.mock(9)) is False
    assert len(state.actions) == 0


def test_update_static_retags_sticky_windows():
    state = State(FakeConfig())
    ws = Workspace(0, BBox(x=0, y=0, width=800, height=600), "main")
    ws.show_tag(2)
    state.workspaces = [ws]
    sticky = _window(1)
    sticky.tag(1)
    sticky.set_states([WindowState.STICKY])
    plain = _window(2)
    plain.tag(1)
    state.windows = [sticky, plain]
    state.update_static()
    assert sticky.tags == [2]
    assert plain.tags == [1]


def test_update_static_uses_strut_center():
    state = State(FakeConfig())
    left = Workspace(0, BBox(x=0, y=0, width=800, height=600), "main")
    left.show_tag(1)
    right = Workspace(1, BBox(x=1000, y=0, width=800, height=600), "main")
    right.show_tag(3)
    state.workspaces = [left, right]
    dock = _window(1, WindowType.DOCK)
    dock.strut = Xyhw(x=1200, y=0, h=20, w=400)
    state.windows = [dock]
    state.update_static()
    assert dock.tags == [3]


def test_load_config_applies_to_windows_and_workspaces():
    state = State(FakeConfig())
    state.windows = [_window(1)]
    state.workspaces = [Workspace(0, BBox(x=0, y=0, width=800, height=600), "main")]
    state.load_config(FakeConfig(mousekey="Mod1", border_width=4))
    assert state.mousekey == "Mod1"
    assert state.windows[0].border == 4
    assert state.windows[0].margin == Margins.uniform(5)
    assert state.workspaces[0].margin == Margins.uniform(0)


def test_restore_state_copies_workspaces_and_tags():
    bbox = BBox(x=0, y=0, width=800, height=600)
    new = State(FakeConfig())
    new.workspaces = [Workspace(1, bbox, "main")]
    old = State(FakeConfig())
    saved_ws = Workspace(1, bbox, "stack", main_width_percentage=70)
    saved_ws.margin_multiplier = 1.5
    old.workspaces = [saved_ws]
    old.tags.get(2).layout = "stack"
    old.tags.get(2).flipped_horizontal = True
    new.restore_state(old)
    assert new.workspaces[0].layout == "stack"
    assert new.workspaces[0].main_width_percentage == 70
    assert new.workspaces[0].margin_multiplier == 1.5
    assert new.tags.get(2).layout == "stack"
    assert new.tags.get(2).flipped_horizontal is True


def test_restore_state_restores_windows_after_others():
    new = State(FakeConfig())
    new.windows = [_window(1), _window(2), _window(3)]
    old = State(FakeConfig())
    saved = _window(2)
    saved.tag(2)
    saved.pid = 42
    saved.set_floating(True)
    saved.set_states([WindowState.FULLSCREEN])
    saved.apply_margin_multiplier(-2.0)
    saved.normal = Xyhw(x=5, y=6, h=300, w=400)
    old.windows = [saved]
    new.restore_state(old)
    assert _handles(new.windows) == [1, 3, 2]
    restored = new.windows[-1]
    assert restored.tags == [2]
    assert restored.pid == 42
    assert restored.floating is True
    assert restored.is_fullscreen()
    assert restored.margin_multiplier == 2.0
    assert restored.normal == saved.normal
    assert restored.normal is not saved.normal


def test_restore_state_drops_vanished_tags():
    new = State(FakeConfig(tag_labels=["a"]))
    new.windows = [_window(1), _window(2)]
    old = State(FakeConfig(tag_labels=["a", "b", "c"]))
    lost = _window(1)
    lost.tag(3)
    hidden = _window(2)
    hidden.tag(3)
    hidden.tag(HIDDEN_ID_BASE)
    old.windows = [lost, hidden]
    new.restore_state(old)
    by_handle = {w.handle.value: w for w in new.windows}
    assert by_handle[1].tags == [1]
    assert by_handle[2].tags == [HIDDEN_ID_BASE]


def test_restore_state_with_strut_retags_remaining_sticky_windows():
    new = State(FakeConfig())
    ws = Workspace(0, BBox(x=0, y=0, width=800, height=600), "main")
    ws.show_tag(3)
    new.workspaces = [ws]
    sticky = _window(9)
    sticky.set_states([WindowState.STICKY])
    new.windows = [sticky, _window(1, WindowType.DOCK)]
    old = State(FakeConfig())
    dock = _window(1, WindowType.DOCK)
    dock.tag(1)
    dock.strut = Xyhw(x=0, y=0, h=20, w=800)
    old.windows = [dock]
    new.restore_state(old)
    assert new.windows[0].tags == [3]
    assert new.windows[-1].tags == [1]
    assert new.windows[-1].strut == dock.strut


def test_restore_state_merges_scratchpads():
    new = State(FakeConfig())
    new.active_scratchpads = {"term": None}
    old = State(FakeConfig())
    old.active_scratchpads = {"term": 12, "notes": None}
    new.restore_state(old)
    assert new.active_scratchpads == {"term": 12, "notes": None}