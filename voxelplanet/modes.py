"""Game modes, weapons and the keys the player reacts to."""

from enum import Enum, auto


class GameMode(Enum):
    """Free-flying or gravity-bound movement."""

    GOD = auto()
    NORMAL = auto()


class Weapon(Enum):
    """Tools the player can hold."""

    CREATOR = auto()
    PLASMA = auto()
    BAZOOKA = auto()


class Key(Enum):
    """Physical keys with a meaning in the game."""

    W = auto()
    A = auto()
    S = auto()
    D = auto()
    E = auto()
    Q = auto()
    G = auto()
    F = auto()
    N = auto()
    DIGIT1 = auto()
    DIGIT2 = auto()
    DIGIT3 = auto()
    DIGIT4 = auto()
    DIGIT5 = auto()
    DIGIT6 = auto()
    SPACE = auto()
    ESCAPE = auto()