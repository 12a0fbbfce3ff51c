"""Enumerations shared by the input and movement code."""

from enum import Enum, IntEnum


class InputEvent(IntEnum):
    """Kind of change a bound key went through during one input update."""

    NONE = 0
    PRESSED = 1
    RELEASED = 2
    HOLD = 3
    MAX_COUNT = 4


class MoveDirection(Enum):
    """Direction a controllable object can step in."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3
    MAX_COUNT = 4


class KeyCode(IntEnum):
    """Virtual key codes of the digit and letter keys."""

    NUM_0 = 0x30
    NUM_1 = 0x31
    NUM_2 = 0x32
    NUM_3 = 0x33
    NUM_4 = 0x34
    NUM_5 = 0x35
    NUM_6 = 0x36
    NUM_7 = 0x37
    NUM_8 = 0x38
    NUM_9 = 0x39

    A = 0x41
    B = 0x42
    C = 0x43
    D = 0x44
    E = 0x45
    F = 0x46
    G = 0x47
    H = 0x48
    I = 0x49  # noqa: E741
    J = 0x4A
    K = 0x4B
    L = 0x4C
    M = 0x4D
    N = 0x4E
    O = 0x4F  # noqa: E741
    P = 0x50
    Q = 0x51
    R = 0x52
    S = 0x53
    T = 0x54
    U = 0x55
    V = 0x56
    W = 0x57
    X = 0x58
    Y = 0x59
    Z = 0x5A

    MAX_COUNT = 0x5B