"""Video driver interface: IOCTL commands, colors and the text area."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum

_AREA_FORMAT = struct.Struct("<BBH")


class VideoCommand(IntEnum):
    """IOCTL commands for the video device."""

    GET_ATTR = 0
    GET_AREA = 1
    GET_CURSOR_XY = 2
    SET_ATTR = 3
    SET_CURSOR_XY = 4
    SET_COLORS = 5
    CLEAR_SCREEN = 6
    RESET_SCREEN = 7


class TextColor(IntEnum):
    """Text-mode palette."""

    BLACK = 0x0
    DARK_BLUE = 0x1
    DARK_GREEN = 0x2
    DARK_CYAN = 0x3
    DARK_RED = 0x4
    DARK_MAGENTA = 0x5
    BROWN = 0x6
    LIGHT_GRAY = 0x7
    DARK_GRAY = 0x8
    BLUE = 0x9
    GREEN = 0xA
    CYAN = 0xB
    RED = 0xC
    MAGENTA = 0xD
    YELLOW = 0xE
    WHITE = 0xF


def text_color(fg, bg):
    """Build the SET_COLORS parameter: background in the high byte."""
    return ((bg & 0xFF) << 8) | (fg & 0xFF)


@dataclass(frozen=True)
class TextArea:
    """Bounds of the current text mode."""

    width: int
    height: int
    count: int

    def __post_init__(self):
        if not 0 <= self.width <= 0xFF:
            raise ValueError(f"width out of range: {self.width}")
        if not 0 <= self.height <= 0xFF:
            raise ValueError(f"height out of range: {self.height}")
        if not 0 <= self.count <= 0xFFFF:
            raise ValueError(f"count out of range: {self.count}")

    def to_bytes(self):
        return _AREA_FORMAT.pack(self.width, self.height, self.count)

    @classmethod
    def from_bytes(cls, data):
        if len(data) != _AREA_FORMAT.size:
            raise ValueError(f"text area must be {_AREA_FORMAT.size} bytes")
        return cls(*_AREA_FORMAT.unpack(bytes(data)))