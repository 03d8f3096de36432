import pytest

from wmstate.kinds import Mode, ModeKind, WindowHandle, WindowState, WindowType


def test_handles_compare_by_kind_and_value():
    assert WindowHandle.mock(3) == WindowHandle.mock(3)
    assert not WindowHandle.mock(3) == WindowHandle.xlib(3)
    assert WindowHandle.xlib(3).value == 3


def test_handles_are_hashable():
    handles = {WindowHandle.mock(1), WindowHandle.mock(1), WindowHandle.xlib(1)}
    assert len(handles) == 2


def test_unknown_handle_kind_is_rejected():
    with pytest.raises(ValueError):
        WindowHandle("Other", 1)


def test_default_mode_is_normal():
    assert Mode() == Mode.normal()
    assert Mode().kind is ModeKind.NORMAL
    assert Mode().handle is None


def test_resizing_and_moving_carry_handle():
    handle = WindowHandle.mock(9)
    assert Mode.resizing(handle).handle == handle
    assert Mode.resizing(handle).kind is ModeKind.RESIZING_WINDOW
    assert Mode.moving(handle).kind is ModeKind.MOVING_WINDOW
    assert not Mode.moving(handle) == Mode.resizing(handle)


def test_mode_handle_consistency_is_enforced():
    with pytest.raises(ValueError):
        Mode(ModeKind.NORMAL, WindowHandle.mock(1))
    with pytest.raises(ValueError):
        Mode(ModeKind.MOVING_WINDOW)


def test_enum_values_round_trip_by_name():
    for state in WindowState:
        assert WindowState(state.value) is state
    for kind in WindowType:
        assert WindowType(kind.value) is kind
    assert WindowType("Normal") is WindowType.NORMAL
    assert WindowState("Fullscreen") is WindowState.FULLSCREEN