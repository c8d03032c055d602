"""Keyboard driver interface: commands, modes and key codes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, IntFlag


class KbCommand(IntEnum):
    """IOCTL commands for the keyboard device."""

    SET_MODE = 0


class KbMode(IntEnum):
    """Input modes accepted by the SET_MODE command."""

    RAW = 0
    COOKED = 1
    HALFCOOKED = 2


class KbReadFlag(IntFlag):
    """Read behaviour flags."""

    BLOCK = 0
    NON_BLOCK = 1 << 2


class Key(IntEnum):
    """Key codes reported by the keyboard driver."""

    KEY_A = ord("a")
    KEY_B = ord("b")
    KEY_C = ord("c")
    KEY_D = ord("d")
    KEY_E = ord("e")
    KEY_F = ord("f")
    KEY_G = ord("g")
    KEY_H = ord("h")
    KEY_I = ord("i")
    KEY_J = ord("j")
    KEY_K = ord("k")
    KEY_L = ord("l")
    KEY_M = ord("m")
    KEY_N = ord("n")
    KEY_O = ord("o")
    KEY_P = ord("p")
    KEY_Q = ord("q")
    KEY_R = ord("r")
    KEY_S = ord("s")
    KEY_T = ord("t")
    KEY_U = ord("u")
    KEY_V = ord("v")
    KEY_W = ord("w")
    KEY_X = ord("x")
    KEY_Y = ord("y")
    KEY_Z = ord("z")
    KEY_0 = ord("0")
    KEY_1 = ord("1")
    KEY_2 = ord("2")
    KEY_3 = ord("3")
    KEY_4 = ord("4")
    KEY_5 = ord("5")
    KEY_6 = ord("6")
    KEY_7 = ord("7")
    KEY_8 = ord("8")
    KEY_9 = ord("9")
    KEY_BACKQUOTE = ord("`")
    KEY_MINUS = ord("-")
    KEY_EQUAL = ord("=")
    KEY_BACKSPACE = ord("\b")
    KEY_SPACE = ord(" ")
    KEY_ENTER = ord("\n")
    KEY_TAB = ord("\t")
    KEY_COMMA = ord(",")
    KEY_PERIOD = ord(".")
    KEY_SLASH = ord("/")
    KEY_SEMICOLON = ord(";")
    KEY_QUOTE = 0x27
    KEY_LEFT_BRACKET = ord("[")
    KEY_RIGHT_BRACKET = ord("]")
    KEY_BACKSLASH = 0x5C

    NUMPAD_0 = 0x80
    NUMPAD_1 = 0x81
    NUMPAD_2 = 0x82
    NUMPAD_3 = 0x83
    NUMPAD_4 = 0x84
    NUMPAD_5 = 0x85
    NUMPAD_6 = 0x86
    NUMPAD_7 = 0x87
    NUMPAD_8 = 0x88
    NUMPAD_9 = 0x89
    NUMPAD_DOT = 0x8A
    NUMPAD_ENTER = 0x8B
    NUMPAD_PLUS = 0x8C
    NUMPAD_MINUS = 0x8D
    NUMPAD_MUL = 0x8E
    NUMPAD_DIV = 0x8F
    NUMPAD_LOCK = 0x90
    SCROLL_LOCK = 0x91
    CAPS_LOCK = 0x92
    LEFT_SHIFT = 0x93
    LEFT_ALT = 0x94
    LEFT_CTRL = 0x95
    RIGHT_SHIFT = 0x96
    RIGHT_ALT = 0x97
    RIGHT_CTRL = 0x98
    HOME = 0x99
    END = 0x9A
    INSERT = 0x9B
    DELETE = 0x9C
    PG_DOWN = 0x9D
    PG_UP = 0x9E
    PRINT_SCREEN = 0x9F
    UP_ARROW = 0xA0
    DOWN_ARROW = 0xA1
    LEFT_ARROW = 0xA2
    RIGHT_ARROW = 0xA3
    LEFT_SPECIAL = 0xA4

    ESC = 0xF0
    F1 = 0xF1
    F2 = 0xF2
    F3 = 0xF3
    F4 = 0xF4
    F5 = 0xF5
    F6 = 0xF6
    F7 = 0xF7
    F8 = 0xF8
    F9 = 0xF9
    F10 = 0xFA
    F11 = 0xFB
    F12 = 0xFC

    RELEASED = 0xFE
    UNKNOWN = 0xFF


@dataclass(frozen=True)
class KeyEvent:
    """A key press or release read in raw mode.

    ``key`` is a Key member when the code is known, otherwise the raw integer.
    """

    key: int
    released: bool = False


def is_special(code):
    """Return True for key codes outside the printable range."""
    if not 0 <= code <= 0xFF:
        raise ValueError(f"key code out of range: {code}")
    return code >= 0x80


def _as_key(code):
    try:
        return Key(code)
    except ValueError:
        return code


def parse_raw_events(data):
    """Yield KeyEvent objects from bytes read in raw mode."""
    stream = iter(bytes(data))
    for code in stream:
        if code == Key.RELEASED:
            released = next(stream, None)
            if released is None:
                raise ValueError("release marker not followed by a key")
            yield KeyEvent(_as_key(released), released=True)
        else:
            yield KeyEvent(_as_key(code))