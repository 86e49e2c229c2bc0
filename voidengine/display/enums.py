"""Enumerations for window contexts, keyboard input and mouse input."""

from __future__ import annotations

import enum


class ContextClientAPI(enum.IntEnum):
    """Client API a window's context is created for."""

    NONE = 0
    OPENGL = 0x00030001
    OPENGL_ES = 0x00030002


class ContextCreationAPI(enum.IntEnum):
    """API used to create a window's context."""

    NATIVE = 0x00036001
    EGL = 0x00036002
    OSMESA = 0x00036003


class ContextRobustness(enum.IntEnum):
    """Robustness strategy of a context."""

    NONE = 0
    NO_RESET_NOTIFICATION = 0x00031001
    LOSE_CONTEXT_ON_RESET = 0x00031002


class ContextReleaseBehavior(enum.IntEnum):
    """What happens to the pipeline when a context is released."""

    ANY = 0
    FLUSH = 0x00035001
    NONE = 0x00035002


class ContextOpenGLProfile(enum.IntEnum):
    """OpenGL profile a context is created for."""

    ANY = 0
    COMPATIBILITY = 0x00032002
    CORE = 0x00032001


class Key(enum.IntEnum):
    """Keyboard keys."""

    NONE = 0
    SPACE = 32
    APOSTROPHE = 39
    COMMA = 44
    MINUS = 45
    PERIOD = 46
    SLASH = 47
    NUM_0 = 48
    NUM_1 = 49
    NUM_2 = 50
    NUM_3 = 51
    NUM_4 = 52
    NUM_5 = 53
    NUM_6 = 54
    NUM_7 = 55
    NUM_8 = 56
    NUM_9 = 57
    SEMICOLON = 59
    EQUAL = 61
    A = 65
    B = 66
    C = 67
    D = 68
    E = 69
    F = 70
    G = 71
    H = 72
    I = 73  # noqa: E741
    J = 74
    K = 75
    L = 76
    M = 77
    N = 78
    O = 79  # noqa: E741
    P = 80
    Q = 81
    R = 82
    S = 83
    T = 84
    U = 85
    V = 86
    W = 87
    X = 88
    Y = 89
    Z = 90
    LEFT_BRACKET = 91
    BACKSLASH = 92
    RIGHT_BRACKET = 93
    BACKTICK = 96
    ESCAPE = 256
    ENTER = 257
    TAB = 258
    BACKSPACE = 259
    INSERT = 260
    DELETE = 261
    RIGHT = 262
    LEFT = 263
    DOWN = 264
    UP = 265
    PAGE_UP = 266
    PAGE_DOWN = 267
    HOME = 268
    END = 269
    CAPS_LOCK = 280
    SCROLL_LOCK = 281
    NUM_LOCK = 282
    PRINT_SCREEN = 283
    PAUSE = 284
    F1 = 290
    F2 = 291
    F3 = 292
    F4 = 293
    F5 = 294
    F6 = 295
    F7 = 296
    F8 = 297
    F9 = 298
    F10 = 299
    F11 = 300
    F12 = 301
    LEFT_SHIFT = 340
    LEFT_CONTROL = 341
    LEFT_ALT = 342
    LEFT_SUPER = 343
    RIGHT_SHIFT = 344
    RIGHT_CONTROL = 345
    RIGHT_ALT = 346
    RIGHT_SUPER = 347
    MENU = 348


class KeyAction(enum.IntEnum):
    """What happened to a key."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


class KeyMod(enum.IntFlag):
    """Modifier keys held during an input event."""

    SHIFT = 0x0001
    CONTROL = 0x0002
    ALT = 0x0004
    SUPER = 0x0008
    CAPS_LOCK = 0x0010
    NUM_LOCK = 0x0020


class Button(enum.IntEnum):
    """Mouse buttons."""

    LEFT = 0
    RIGHT = 1
    MIDDLE = 2


class ButtonAction(enum.IntEnum):
    """What happened to a mouse button."""

    RELEASE = 0
    PRESS = 1


class Mode(enum.IntEnum):
    """Cursor mode of a window."""

    NORMAL = 0x00034001
    HIDDEN = 0x00034002
    DISABLED = 0x00034003


class Shape(enum.IntEnum):
    """Standard cursor shapes."""

    ARROW = 0x00036001
    IBEAM = 0x00036002
    CROSSHAIR = 0x00036003
    HAND = 0x00036004
    EW_RESIZE = 0x00036005
    NS_RESIZE = 0x00036006
    NWSE_RESIZE = 0x00036007
    NESW_RESIZE = 0x00036008
    ALL_RESIZE = 0x00036009
    NOT_ALLOWED = 0x0003600A