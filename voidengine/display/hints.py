"""Window creation hints and monitor video modes."""

from __future__ import annotations

from dataclasses import dataclass, field

from voidengine.display.enums import (
    ContextClientAPI,
    ContextCreationAPI,
    ContextOpenGLProfile,
    ContextReleaseBehavior,
    ContextRobustness,
)

_INT_MIN = -(2**31)


@dataclass
class WindowHints:
    """Hints about the window itself."""

    resizable: bool = True
    visible: bool = True
    decorated: bool = True
    focused: bool = True
    auto_minimize: bool = True
    floating: bool = False
    maximized: bool = False
    center_cursor: bool = True
    transparent_framebuffer: bool = False
    focus_on_show: bool = True
    scale_to_monitor: bool = False
    scale_framebuffer: bool = True
    mouse_passthrough: bool = False
    # The smallest int means "let the system place the window".
    position: tuple[int, int] = (_INT_MIN, _INT_MIN)


@dataclass
class FramebufferHints:
    """Hints about the default framebuffer."""

    color_bits: tuple[int, int, int, int] = (8, 8, 8, 8)
    depth_bits: int = 24
    stencil_bits: int = 8
    accumulation_color_bits: tuple[int, int, int, int] = (0, 0, 0, 0)
    auxiliary_buffers: int = 0
    stereo: bool = False
    samples: int = 0
    srgb_capable: bool = False
    doublebuffer: bool = True


@dataclass
class MonitorHints:
    """Hints for full screen windows; -1 means no preference."""

    refresh_rate: int = -1


@dataclass
class ContextHints:
    """Hints about the rendering context."""

    client_api: ContextClientAPI = ContextClientAPI.OPENGL
    creation_api: ContextCreationAPI = ContextCreationAPI.NATIVE
    version: tuple[int, int] = (4, 6)
    opengl_forward_compat: bool = False
    debug: bool = False
    opengl_profile: ContextOpenGLProfile = ContextOpenGLProfile.CORE
    robustness: ContextRobustness = ContextRobustness.NONE
    release_behavior: ContextReleaseBehavior = ContextReleaseBehavior.ANY
    no_error: bool = False


@dataclass
class Win32Hints:
    """Hints that only apply on Windows."""

    keyboard_menu: bool = False
    showdefault: bool = False


@dataclass
class CocoaHints:
    """Hints that only apply on macOS; an empty frame name disables autosaving."""

    frame_name: str = ""
    graphics_switching: bool = False


@dataclass
class WaylandHints:
    """Hints that only apply on Wayland."""

    app_id: str = ""


@dataclass
class X11Hints:
    """Hints that only apply on X11 (the WM_CLASS parts)."""

    class_name: str = ""
    instance_name: str = ""


@dataclass
class Hints:
    """Every group of window creation hints."""

    window: WindowHints = field(default_factory=WindowHints)
    framebuffer: FramebufferHints = field(default_factory=FramebufferHints)
    monitor: MonitorHints = field(default_factory=MonitorHints)
    context: ContextHints = field(default_factory=ContextHints)
    win32: Win32Hints = field(default_factory=Win32Hints)
    cocoa: CocoaHints = field(default_factory=CocoaHints)
    wayland: WaylandHints = field(default_factory=WaylandHints)
    x11: X11Hints = field(default_factory=X11Hints)


@dataclass(frozen=True)
class VideoMode:
    """A monitor video mode: resolution, color depth and refresh rate."""

    size: tuple[int, int] = (0, 0)
    color_bits: tuple[int, int, int] = (0, 0, 0)
    refresh_rate: int = 0