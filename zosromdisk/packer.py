"""Romdisk image packer: a table of file entries followed by the file contents."""

from __future__ import annotations

import os
import shutil
import struct
import sys
from dataclasses import dataclass
from datetime import datetime

from .zostime import ZosDate

NAME_SIZE = 16
ENTRY_SIZE = 32
_COUNT_FORMAT = struct.Struct("<H")
_ENTRY_HEAD_FORMAT = struct.Struct(f"<{NAME_SIZE}sII")
_DATE_SIZE = ENTRY_SIZE - _ENTRY_HEAD_FORMAT.size
_MAX_U32 = 0xFFFFFFFF


def _encode_name(name):
    raw = os.fsencode(name)
    if len(raw) > NAME_SIZE:
        raise ValueError(f"entry name longer than {NAME_SIZE} bytes: {name!r}")
    return raw.ljust(NAME_SIZE, b"\x00")


def _decode_name(raw):
    return os.fsdecode(raw.split(b"\x00", 1)[0])


@dataclass(frozen=True)
class RomdiskEntry:
    """One 32-byte entry of the image's file table."""

    name: str
    size: int
    offset: int
    date: ZosDate

    def __post_init__(self):
        _encode_name(self.name)
        for field in ("size", "offset"):
            value = getattr(self, field)
            if not 0 <= value <= _MAX_U32:
                raise ValueError(f"{field} out of range: {value}")

    def to_bytes(self):
        head = _ENTRY_HEAD_FORMAT.pack(_encode_name(self.name), self.size, self.offset)
        return head + self.date.to_bytes()

    @classmethod
    def from_bytes(cls, data):
        data = bytes(data)
        if len(data) != ENTRY_SIZE:
            raise ValueError(f"romdisk entry must be {ENTRY_SIZE} bytes")
        raw_name, size, offset = _ENTRY_HEAD_FORMAT.unpack_from(data)
        date = ZosDate.from_bytes(data[_ENTRY_HEAD_FORMAT.size :])
        return cls(_decode_name(raw_name), size, offset, date)


@dataclass(frozen=True)
class RomdiskImage:
    """A parsed romdisk image."""

    entries: tuple
    data: bytes

    @classmethod
    def from_bytes(cls, data):
        data = bytes(data)
        if len(data) < _COUNT_FORMAT.size:
            raise ValueError("image too short to hold the entry count")
        (count,) = _COUNT_FORMAT.unpack_from(data)
        table_end = _COUNT_FORMAT.size + ENTRY_SIZE * count
        if len(data) < table_end:
            raise ValueError("image too short to hold its entry table")
        entries = tuple(
            RomdiskEntry.from_bytes(data[start : start + ENTRY_SIZE])
            for start in range(_COUNT_FORMAT.size, table_end, ENTRY_SIZE)
        )
        return cls(entries, data)

    @property
    def names(self):
        return [entry.name for entry in self.entries]

    def __iter__(self):
        return iter(self.entries)

    def __len__(self):
        return len(self.entries)

    def read(self, name):
        """Return the contents of the entry called ``name``."""
        for entry in self.entries:
            if entry.name == name:
                end = entry.offset + entry.size
                if end > len(self.data):
                    raise ValueError(f"entry {name!r} extends past the end of the image")
                return self.data[entry.offset : end]
        raise KeyError(name)


def _date_of(mtime):
    moment = datetime.fromtimestamp(mtime)
    return ZosDate(
        year=moment.year,
        month=moment.month,
        day=moment.day,
        weekday=moment.isoweekday() % 7,
        hours=moment.hour,
        minutes=moment.minute,
        seconds=moment.second,
    )


def _table(paths):
    """Build the entry table for ``paths``, stat'ing each file."""
    paths = [os.fspath(p) for p in paths]
    if len(paths) > 0xFFFF:
        raise ValueError(f"too many files: {len(paths)}")
    offset = _COUNT_FORMAT.size + ENTRY_SIZE * len(paths)
    entries = []
    for path in paths:
        info = os.stat(path)
        raw_name = os.fsencode(os.path.basename(path))[:NAME_SIZE]
        size = info.st_size & _MAX_U32
        entry = RomdiskEntry(
            name=os.fsdecode(raw_name),
            size=size,
            offset=offset & _MAX_U32,
            date=_date_of(info.st_mtime),
        )
        entries.append(entry)
        offset += size
    return paths, entries


def _header(entries):
    return _COUNT_FORMAT.pack(len(entries)) + b"".join(e.to_bytes() for e in entries)


def _write_to(stream, paths):
    paths, entries = _table(paths)
    stream.write(_header(entries))
    for path in paths:
        with open(path, "rb") as source:
            shutil.copyfileobj(source, stream)


def _open_output(output):
    fd = os.open(output, os.O_CREAT | os.O_WRONLY, 0o644)
    return os.fdopen(fd, "wb")


def build_image(paths):
    """Return the romdisk image of the given files as bytes."""
    paths, entries = _table(paths)
    chunks = [_header(entries)]
    for path in paths:
        with open(path, "rb") as source:
            chunks.append(source.read())
    return b"".join(chunks)


def write_image(output, paths):
    """Write the romdisk image of ``paths`` into the file ``output``.

    The output is not truncated first, like the original packing tool.
    """
    with _open_output(output) as stream:
        _write_to(stream, paths)


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2:
        print("usage: pack <output> <input1> <input2> ...")
        return 1
    output, inputs = args[0], args[1:]
    try:
        stream = _open_output(output)
    except OSError as exc:
        print(f"Cannot create output file: {exc.strerror or exc}", file=sys.stderr)
        return 2
    try:
        with stream:
            _write_to(stream, inputs)
    except (OSError, ValueError) as exc:
        message = exc.strerror if isinstance(exc, OSError) and exc.strerror else exc
        print(f"Error : {message}", file=sys.stderr)
        return 3
    return 0


if __name__ == "__main__":
    sys.exit(main())