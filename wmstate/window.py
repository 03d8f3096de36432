"""Managed windows and the partial updates reported for them."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Union

from wmstate.kinds import WindowHandle, WindowState, WindowType
from wmstate.margins import Margins
from wmstate.xyhw import Xyhw, XyhwChange

log = logging.getLogger(__name__)

_MIN_SIZE = 100

_ALWAYS_VISIBLE = frozenset(
    {WindowType.MENU, WindowType.SPLASH, WindowType.DIALOG, WindowType.TOOLBAR}
)
_UNMANAGED = frozenset({WindowType.DESKTOP, WindowType.DOCK})


class Window:
    """A window known to the manager, with its placement and tags."""

    def __init__(
        self,
        handle: WindowHandle,
        name: Optional[str] = None,
        pid: Optional[int] = None,
    ) -> None:
        self.handle = handle
        self.transient: Optional[WindowHandle] = None
        self._visible = False
        self.can_resize = True
        self._is_floating = False
        self._must_float = False
        self._floating: Optional[Xyhw] = None
        self.never_focus = False
        self.debugging = False
        self.name = name
        self.pid = pid
        self.window_type = WindowType.NORMAL
        self.tags: List[int] = []
        self.border = 1
        self.margin = Margins.uniform(10)
        self.margin_multiplier = 1.0
        self._states: List[WindowState] = []
        self.requested: Optional[Xyhw] = None
        self.normal = Xyhw()
        self.start_loc: Optional[Xyhw] = None
        self.container_size: Optional[Xyhw] = None
        self.strut: Optional[Xyhw] = None

    def __repr__(self) -> str:
        return (
            f"Window(handle={self.handle!r}, name={self.name!r}, "
            f"type={self.window_type.value}, tags={self.tags!r})"
        )

    def __copy__(self) -> "Window":
        clone = Window.__new__(Window)
        for key, value in vars(self).items():
            if isinstance(value, Xyhw):
                value = value.copy()
            elif isinstance(value, list):
                value = list(value)
            setattr(clone, key, value)
        return clone

    def load_config(self, config: Any) -> None:
        """Take margin, border and float settings from the configuration."""
        if self.window_type is WindowType.NORMAL:
            self.margin = config.margin
            self.border = config.border_width
            self._must_float = config.always_float
        else:
            self.margin = Margins.uniform(0)
            self.border = 0

    @property
    def visible(self) -> bool:
        """Whether the window is shown; some window types always are."""
        return self._visible or self.window_type in _ALWAYS_VISIBLE

    @visible.setter
    def visible(self, value: bool) -> None:
        self._visible = value

    def set_floating(self, value: bool) -> None:
        if not self._is_floating and value and self._floating is None:
            # Floating is relative to the normal position.
            self.reset_float_offset()
        self._is_floating = value

    @property
    def floating(self) -> bool:
        return self._is_floating or self.must_float()

    def get_floating_offsets(self) -> Optional[Xyhw]:
        return None if self._floating is None else self._floating.copy()

    def reset_float_offset(self) -> None:
        offset = Xyhw()
        offset.clear_minmax()
        self._floating = offset

    def set_floating_offsets(self, value: Optional[Xyhw]) -> None:
        if value is None:
            self._floating = None
            return
        offset = value.copy()
        offset.clear_minmax()
        self._floating = offset

    def set_floating_exact(self, value: Xyhw) -> None:
        """Float the window at exactly ``value``."""
        offset = value - self.normal
        offset.clear_minmax()
        self._floating = offset

    def is_fullscreen(self) -> bool:
        return WindowState.FULLSCREEN in self._states

    def is_sticky(self) -> bool:
        return WindowState.STICKY in self._states

    def must_float(self) -> bool:
        return (
            self._must_float
            or self.transient is not None
            or self.is_unmanaged()
            or self.window_type is WindowType.SPLASH
        )

    def can_move(self) -> bool:
        return not self.is_unmanaged()

    def is_resizable(self) -> bool:
        return self.can_resize and not self.is_unmanaged()

    def can_focus(self) -> bool:
        return not self.never_focus and not self.is_unmanaged() and self.visible

    def set_states(self, states: Iterable[WindowState]) -> None:
        self._states = list(states)

    def has_state(self, state: WindowState) -> bool:
        return state in self._states

    def states(self) -> List[WindowState]:
        return list(self._states)

    def apply_margin_multiplier(self, value: float) -> None:
        self.margin_multiplier = abs(value)
        if value < 0:
            log.warning(
                "Negative margin multiplier detected. Will be applied as absolute: %r",
                self.margin_multiplier,
            )

    def _floating_relative(self) -> Optional[Xyhw]:
        if self.floating and self._floating is not None:
            return self.normal + self._floating
        return None

    def _limited(self, value: int, requested_min: Optional[int]) -> int:
        limit = _MIN_SIZE
        if requested_min is not None and requested_min > 0 and self.floating:
            limit = requested_min
        if value < limit and not self.is_unmanaged():
            return limit
        return value

    def width(self) -> int:
        relative = self._floating_relative()
        if self.is_fullscreen():
            value = self.normal.w
        elif relative is not None:
            value = relative.w - self.border * 2
        else:
            horizontal = (self.margin.left + self.margin.right) * self.margin_multiplier
            value = self.normal.w - int(horizontal) - self.border * 2
        requested = None if self.requested is None else self.requested.minw
        return self._limited(value, requested)

    def height(self) -> int:
        relative = self._floating_relative()
        if self.is_fullscreen():
            value = self.normal.h
        elif relative is not None:
            value = relative.h - self.border * 2
        else:
            vertical = (self.margin.top + self.margin.bottom) * self.margin_multiplier
            value = self.normal.h - int(vertical) - self.border * 2
        requested = None if self.requested is None else self.requested.minh
        return self._limited(value, requested)

    def x(self) -> int:
        relative = self._floating_relative()
        if self.is_fullscreen():
            return self.normal.x
        if relative is not None:
            return relative.x
        return self.normal.x + int(self.margin.left * self.margin_multiplier)

    def y(self) -> int:
        relative = self._floating_relative()
        if self.is_fullscreen():
            return self.normal.y
        if relative is not None:
            return relative.y
        return self.normal.y + int(self.margin.top * self.margin_multiplier)

    def effective_border(self) -> int:
        """The border drawn around the window; none while fullscreen."""
        return 0 if self.is_fullscreen() else self.border

    def calculated_xyhw(self) -> Xyhw:
        return Xyhw(x=self.x(), y=self.y(), h=self.height(), w=self.width())

    def exact_xyhw(self) -> Xyhw:
        relative = self._floating_relative()
        return relative if relative is not None else self.normal.copy()

    def contains_point(self, x: int, y: int) -> bool:
        return self.calculated_xyhw().contains_point(x, y)

    def tag(self, tag: int) -> None:
        if tag not in self.tags:
            self.tags.append(tag)

    def clear_tags(self) -> None:
        self.tags = []

    def has_tag(self, tag: int) -> bool:
        return tag in self.tags

    def untag(self, tag: int) -> None:
        self.tags = [t for t in self.tags if t != tag]

    def is_unmanaged(self) -> bool:
        return self.window_type in _UNMANAGED


class _Unchanged:
    """Marks a field of a change that carries no new value."""

    _instance: Optional["_Unchanged"] = None

    def __new__(cls) -> "_Unchanged":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNCHANGED"

    def __bool__(self) -> bool:
        return False


UNCHANGED = _Unchanged()


@dataclass
class WindowChange:
    """Properties of a window reported by the display server.

    ``transient`` and ``name`` may be set to ``None``; leave them as
    ``UNCHANGED`` to keep the window's value. Other fields left as ``None``
    are not applied.
    """

    handle: WindowHandle
    transient: Union[Optional[WindowHandle], _Unchanged] = UNCHANGED
    never_focus: Optional[bool] = None
    name: Union[Optional[str], _Unchanged] = UNCHANGED
    window_type: Optional[WindowType] = None
    floating: Optional[XyhwChange] = None
    strut: Optional[XyhwChange] = None
    requested: Optional[Xyhw] = None
    states: Optional[List[WindowState]] = None

    def update(self, window: Window) -> bool:
        """Apply the change to ``window``; return whether anything changed."""
        changed = False
        if self.transient is not UNCHANGED:
            changed = changed or (
                window.transient is None or window.transient != self.transient
            )
            window.transient = self.transient  # type: ignore[assignment]
        if self.name is not UNCHANGED:
            changed = changed or window.name is None or window.name != self.name
            window.name = self.name  # type: ignore[assignment]
        if self.never_focus is not None:
            changed = changed or window.never_focus != self.never_focus
            window.never_focus = self.never_focus
        if self.floating is not None:
            changed_floating = self.floating.update_window_floating(window)
            changed = changed or changed_floating
        if self.strut is not None:
            changed_strut = self.strut.update_window_strut(window)
            changed = changed or changed_strut
        if self.requested is not None:
            window.requested = self.requested.copy()
        if self.window_type is not None:
            changed = changed or window.window_type is not self.window_type
            window.window_type = self.window_type
            if window.is_unmanaged():
                window.border = 0
                window.margin = Margins.uniform(0)
        if self.states is not None:
            changed = True
            window.set_states(self.states)
        return changed