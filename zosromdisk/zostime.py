"""Time and BCD-encoded date structures."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from datetime import datetime

_TIME_FORMAT = struct.Struct("<H")
_DATE_SIZE = 8


def to_bcd(value):
    """Encode the last two decimal digits of ``value`` as one BCD byte."""
    if value < 0:
        raise ValueError(f"cannot encode negative value {value} as BCD")
    return (((value // 10) % 10) << 4) | (value % 10)


def from_bcd(value):
    """Decode one BCD byte into an integer between 0 and 99."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"BCD value out of byte range: {value}")
    high, low = value >> 4, value & 0x0F
    if high > 9 or low > 9:
        raise ValueError(f"invalid BCD byte 0x{value:02x}")
    return high * 10 + low


@dataclass(frozen=True)
class ZosTime:
    """Time counter, in milliseconds."""

    millis: int

    def __post_init__(self):
        if not 0 <= self.millis <= 0xFFFF:
            raise ValueError(f"millis out of range: {self.millis}")

    def to_bytes(self):
        return _TIME_FORMAT.pack(self.millis)

    @classmethod
    def from_bytes(cls, data):
        if len(data) != _TIME_FORMAT.size:
            raise ValueError(f"time structure must be {_TIME_FORMAT.size} bytes")
        (millis,) = _TIME_FORMAT.unpack(bytes(data))
        return cls(millis)


@dataclass(frozen=True)
class ZosDate:
    """Calendar date; serialised with every field in BCD.

    ``weekday`` ranges from 1 (Sunday) to 7 (Saturday).
    """

    year: int
    month: int
    day: int
    weekday: int
    hours: int
    minutes: int
    seconds: int

    def __post_init__(self):
        if not 0 <= self.year <= 9999:
            raise ValueError(f"year out of range: {self.year}")
        for name in ("month", "day", "weekday", "hours", "minutes", "seconds"):
            value = getattr(self, name)
            if not 0 <= value <= 99:
                raise ValueError(f"{name} out of range: {value}")

    def to_bytes(self):
        return bytes(
            to_bcd(v)
            for v in (
                self.year // 100,
                self.year % 100,
                self.month,
                self.day,
                self.weekday,
                self.hours,
                self.minutes,
                self.seconds,
            )
        )

    @classmethod
    def from_bytes(cls, data):
        if len(data) != _DATE_SIZE:
            raise ValueError(f"date structure must be {_DATE_SIZE} bytes")
        year_h, year_l, month, day, weekday, hours, minutes, seconds = (
            from_bcd(b) for b in bytes(data)
        )
        return cls(year_h * 100 + year_l, month, day, weekday, hours, minutes, seconds)

    @classmethod
    def from_datetime(cls, moment):
        return cls(
            year=moment.year,
            month=moment.month,
            day=moment.day,
            weekday=moment.isoweekday() % 7 + 1,
            hours=moment.hour,
            minutes=moment.minute,
            seconds=moment.second,
        )

    def to_datetime(self):
        return datetime(
            self.year, self.month, self.day, self.hours, self.minutes, self.seconds
        )