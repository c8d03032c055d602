"""Serial driver interface: IOCTL commands and attribute bits."""

from __future__ import annotations

from enum import IntEnum, IntFlag


class SerialCommand(IntEnum):
    """IOCTL commands for the serial device."""

    GET_ATTR = 0x80
    SET_ATTR = 0x81
    GET_BAUDRATE = 0x82
    SET_BAUDRATE = 0x83
    GET_TIMEOUT = 0x84
    SET_TIMEOUT = 0x85
    GET_BLOCKING = 0x86
    SET_BLOCKING = 0x87


class SerialAttr(IntFlag):
    """Attribute bitmap used with GET_ATTR and SET_ATTR."""

    MODE_RAW = 1 << 0
    RSVD1 = 1 << 1
    RSVD2 = 1 << 2
    RSVD3 = 1 << 3
    RSVD4 = 1 << 4
    RSVD5 = 1 << 5
    RSVD6 = 1 << 6
    RSVD7 = 1 << 7