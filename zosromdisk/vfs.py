"""Virtual file system interface: open flags, whence, directory entries and stat."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum, IntFlag

from .zostime import ZosDate

DEV_STDOUT = 0
DEV_STDIN = 1
FILENAME_LEN_MAX = 16
PATH_MAX = 128

_DIR_ENTRY_FORMAT = struct.Struct(f"<B{FILENAME_LEN_MAX}s")
_DATE_SIZE = 8
_STAT_SIZE_FORMAT = struct.Struct("<I")
_STAT_SIZE = _STAT_SIZE_FORMAT.size + _DATE_SIZE + FILENAME_LEN_MAX


class OpenFlag(IntFlag):
    """Modes used when opening a file or a driver."""

    RDONLY = 0
    WRONLY = 1
    RDWR = 2
    TRUNC = 1 << 2
    APPEND = 2 << 2
    CREAT = 4 << 2
    NONBLOCK = 1 << 5


class Whence(IntEnum):
    """Reference point for seek operations."""

    SET = 0
    CUR = 1
    END = 2


class FsType(IntEnum):
    """File systems supported by the kernel."""

    RAWTABLE = 0
    ZEALFS = 1


def is_file(flags):
    """Return True when directory-entry flags mark a file."""
    return (flags & 1) == 1


def is_dir(flags):
    """Return True when directory-entry flags mark a directory."""
    return (flags & 1) == 0


def _encode_name(name):
    raw = name.encode("ascii")
    if len(raw) > FILENAME_LEN_MAX:
        raise ValueError(f"name longer than {FILENAME_LEN_MAX} bytes: {name!r}")
    if b"\x00" in raw:
        raise ValueError(f"name contains a NUL byte: {name!r}")
    return raw.ljust(FILENAME_LEN_MAX, b"\x00")


def _decode_name(raw):
    return raw.split(b"\x00", 1)[0].decode("ascii")


@dataclass(frozen=True)
class DirEntry:
    """A directory entry as returned by readdir."""

    flags: int
    name: str

    def __post_init__(self):
        if not 0 <= self.flags <= 0xFF:
            raise ValueError(f"flags out of range: {self.flags}")
        _encode_name(self.name)

    @property
    def is_file(self):
        return is_file(self.flags)

    @property
    def is_dir(self):
        return is_dir(self.flags)

    def to_bytes(self):
        return _DIR_ENTRY_FORMAT.pack(self.flags, _encode_name(self.name))

    @classmethod
    def from_bytes(cls, data):
        if len(data) != _DIR_ENTRY_FORMAT.size:
            raise ValueError(
                f"directory entry must be {_DIR_ENTRY_FORMAT.size} bytes"
            )
        flags, raw_name = _DIR_ENTRY_FORMAT.unpack(bytes(data))
        return cls(flags, _decode_name(raw_name))


@dataclass(frozen=True)
class Stat:
    """File information: size in bytes, date and name."""

    size: int
    date: ZosDate
    name: str

    def __post_init__(self):
        if not 0 <= self.size <= 0xFFFFFFFF:
            raise ValueError(f"size out of range: {self.size}")
        _encode_name(self.name)

    def to_bytes(self):
        return (
            _STAT_SIZE_FORMAT.pack(self.size)
            + self.date.to_bytes()
            + _encode_name(self.name)
        )

    @classmethod
    def from_bytes(cls, data):
        data = bytes(data)
        if len(data) != _STAT_SIZE:
            raise ValueError(f"stat structure must be {_STAT_SIZE} bytes")
        (size,) = _STAT_SIZE_FORMAT.unpack_from(data)
        date_start = _STAT_SIZE_FORMAT.size
        date = ZosDate.from_bytes(data[date_start : date_start + _DATE_SIZE])
        name = _decode_name(data[date_start + _DATE_SIZE :])
        return cls(size, date, name)