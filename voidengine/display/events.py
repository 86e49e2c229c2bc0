"""Window events and the event manager that carries them."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from voidengine.display.enums import Button, ButtonAction, Key, KeyAction, KeyMod
from voidengine.utility.bit_mask import BitMask
from voidengine.utility.event import EventManager


@dataclass(frozen=True)
class DropEvent:
    """Paths dropped onto the window."""

    paths: tuple[Path, ...] = ()


@dataclass(frozen=True)
class FramebufferSizeEvent:
    """The framebuffer was resized."""

    size: tuple[float, float] = (0.0, 0.0)


@dataclass(frozen=True)
class KeyboardCharEvent:
    """A Unicode character was typed."""

    codepoint: int = 0


@dataclass(frozen=True)
class KeyboardCharModsEvent:
    """A Unicode character was typed with the given modifiers."""

    codepoint: int = 0
    mods: int = 0


@dataclass(frozen=True)
class KeyboardKeyEvent:
    """A key was pressed, released or repeated."""

    key: Key = Key.NONE
    scancode: int = 0
    action: KeyAction = KeyAction.RELEASE
    mods: BitMask[KeyMod] = field(default_factory=BitMask)


@dataclass(frozen=True)
class MouseButtonEvent:
    """A mouse button was pressed or released."""

    button: Button = Button.LEFT
    action: ButtonAction = ButtonAction.RELEASE
    mods: BitMask[KeyMod] = field(default_factory=BitMask)


@dataclass(frozen=True)
class MouseEnterEvent:
    """The cursor entered or left the window."""

    entered: bool = False


@dataclass(frozen=True)
class MousePositionEvent:
    """The cursor moved."""

    position: tuple[float, float] = (0.0, 0.0)


@dataclass(frozen=True)
class MouseScrollEvent:
    """The mouse wheel or touchpad scrolled."""

    offset: tuple[float, float] = (0.0, 0.0)


@dataclass(frozen=True)
class WindowCloseEvent:
    """The user asked to close the window."""


@dataclass(frozen=True)
class WindowContentScaleEvent:
    """The window's content scale changed."""

    scale: tuple[float, float] = (0.0, 0.0)


@dataclass(frozen=True)
class WindowFocusEvent:
    """The window gained or lost input focus."""

    focused: bool = False


@dataclass(frozen=True)
class WindowIconifyEvent:
    """The window was iconified or restored."""

    iconified: bool = False


@dataclass(frozen=True)
class WindowMaximizeEvent:
    """The window was maximized or restored."""

    maximized: bool = False


@dataclass(frozen=True)
class WindowPositionEvent:
    """The window moved."""

    position: tuple[float, float] = (0.0, 0.0)


@dataclass(frozen=True)
class WindowRefreshEvent:
    """The window's content needs to be redrawn."""


@dataclass(frozen=True)
class WindowSizeEvent:
    """The window was resized."""

    size: tuple[float, float] = (0.0, 0.0)


class WindowEvents(EventManager):
    """An event manager that accepts exactly the window event types."""

    event_types: tuple[type, ...] = (
        DropEvent,
        FramebufferSizeEvent,
        KeyboardCharEvent,
        KeyboardCharModsEvent,
        KeyboardKeyEvent,
        MouseButtonEvent,
        MouseEnterEvent,
        MousePositionEvent,
        MouseScrollEvent,
        WindowCloseEvent,
        WindowContentScaleEvent,
        WindowFocusEvent,
        WindowIconifyEvent,
        WindowMaximizeEvent,
        WindowPositionEvent,
        WindowRefreshEvent,
        WindowSizeEvent,
    )

    def __init__(self) -> None:
        super().__init__(*self.event_types)