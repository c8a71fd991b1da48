"""Key, mouse button and cursor mode codes shared by input and events."""

from enum import IntEnum

__all__ = ["KeyCode", "MouseCode", "CursorMode"]


class KeyCode(IntEnum):
    """Platform-independent keyboard key codes."""

    NONE = 0

    LEFT_SHIFT = 1
    RIGHT_SHIFT = 2
    LEFT_CONTROL = 3
    RIGHT_CONTROL = 4
    LEFT_ALT = 5
    RIGHT_ALT = 6

    SPACE = 7
    ENTER = 8
    DELETE = 9
    ESCAPE = 10

    UP = 11
    DOWN = 12
    LEFT = 13
    RIGHT = 14
    BACKSPACE = 15

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


class CursorMode(IntEnum):
    """How the cursor behaves inside the window."""

    NORMAL = 0
    HIDDEN = 1
    LOCKED = 2


class MouseCode(IntEnum):
    """Platform-independent mouse button codes."""

    NONE = 0
    LEFT = 1
    RIGHT = 2
    MIDDLE = 3
    X_BUTTON_1 = 4
    X_BUTTON_2 = 5