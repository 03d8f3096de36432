"""Window handles, window kinds and states, and the manager's input mode."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class WindowState(Enum):
    MODAL = "Modal"
    STICKY = "Sticky"
    MAXIMIZED_VERT = "MaximizedVert"
    MAXIMIZED_HORZ = "MaximizedHorz"
    SHADED = "Shaded"
    SKIP_TASKBAR = "SkipTaskbar"
    SKIP_PAGER = "SkipPager"
    HIDDEN = "Hidden"
    FULLSCREEN = "Fullscreen"
    ABOVE = "Above"
    BELOW = "Below"


class WindowType(Enum):
    DESKTOP = "Desktop"
    DOCK = "Dock"
    TOOLBAR = "Toolbar"
    MENU = "Menu"
    UTILITY = "Utility"
    SPLASH = "Splash"
    DIALOG = "Dialog"
    NORMAL = "Normal"


_HANDLE_KINDS = ("MockHandle", "XlibHandle")


@dataclass(frozen=True)
class WindowHandle:
    """Identifies a window: either a test handle or a display-server window id."""

    kind: str
    value: int

    def __post_init__(self) -> None:
        if self.kind not in _HANDLE_KINDS:
            raise ValueError(f"unknown window handle kind: {self.kind!r}")

    @classmethod
    def mock(cls, value: int) -> "WindowHandle":
        return cls("MockHandle", value)

    @classmethod
    def xlib(cls, value: int) -> "WindowHandle":
        return cls("XlibHandle", value)


class ModeKind(Enum):
    RESIZING_WINDOW = "ResizingWindow"
    MOVING_WINDOW = "MovingWindow"
    NORMAL = "Normal"


@dataclass(frozen=True)
class Mode:
    """What the pointer is doing; moving and resizing carry the window's handle."""

    kind: ModeKind = ModeKind.NORMAL
    handle: Optional[WindowHandle] = None

    def __post_init__(self) -> None:
        if self.kind is ModeKind.NORMAL:
            if self.handle is not None:
                raise ValueError("normal mode takes no window handle")
        elif self.handle is None:
            raise ValueError(f"{self.kind.value} mode needs a window handle")

    @classmethod
    def normal(cls) -> "Mode":
        return cls()

    @classmethod
    def resizing(cls, handle: WindowHandle) -> "Mode":
        return cls(ModeKind.RESIZING_WINDOW, handle)

    @classmethod
    def moving(cls, handle: WindowHandle) -> "Mode":
        return cls(ModeKind.MOVING_WINDOW, handle)