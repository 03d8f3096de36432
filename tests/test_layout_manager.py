import pytest

from wmstate.layout_manager import LayoutManager, LayoutMode
from wmstate.screen import BBox
from wmstate.tag import Tag
from wmstate.workspace import Workspace


def _manager(mode=LayoutMode.WORKSPACE):
    return LayoutManager(mode=mode, layouts=["a", "b", "c"], default_layout="fallback")


def _workspace(tag_id, layout="a", width=50):
    ws = Workspace(1, BBox(x=0, y=0, width=800, height=600), layout,
                   main_width_percentage=width)
    ws.show_tag(tag_id)
    return ws


def test_default_mode_is_workspace():
    assert LayoutManager().mode is LayoutMode.WORKSPACE


def test_new_layout_is_first_or_default():
    assert _manager().new_layout() == "a"
    assert LayoutManager(default_layout="fallback").new_layout() == "fallback"


@pytest.mark.parametrize("current,expected", [("a", "b"), ("b", "c"), ("c", "a")])
def test_next_layout_cycles(current, expected):
    assert _manager().next_layout(current) == expected


@pytest.mark.parametrize("current,expected", [("a", "c"), ("b", "a"), ("c", "b")])
def test_previous_layout_cycles(current, expected):
    assert _manager().previous_layout(current) == expected


def test_unknown_layout_gives_default():
    manager = _manager()
    assert manager.next_layout("zzz") == "fallback"
    assert manager.previous_layout("zzz") == "fallback"


def test_next_and_previous_are_inverse():
    manager = _manager()
    for layout in manager.layouts:
        assert manager.previous_layout(manager.next_layout(layout)) == layout


def test_workspace_mode_pushes_layout_into_tag():
    tag = Tag(id=1, label="one", layout="a", main_width_percentage=50, layout_rotation=2)
    ws = _workspace(1, layout="c", width=70)
    assert _manager().update_layouts([ws], [tag]) is True
    assert tag.layout == "c"
    assert tag.main_width_percentage == 70
    assert tag.layout_rotation == 0


def test_tag_mode_pulls_layout_from_tag():
    tag = Tag(id=2, label="two", layout="b", main_width_percentage=30)
    ws = _workspace(2, layout="a", width=50)
    assert _manager(LayoutMode.TAG).update_layouts([ws], [tag]) is True
    assert ws.layout == "b"
    assert ws.main_width_percentage == 30


def test_missing_tag_gives_none():
    tag = Tag(id=1, label="one", layout="a")
    ws = _workspace(9)
    assert _manager().update_layouts([ws], [tag]) is None


def test_workspace_without_tags_raises():
    ws = Workspace(1, BBox(x=0, y=0, width=800, height=600), "a")
    with pytest.raises(IndexError):
        _manager().update_layouts([ws], [])