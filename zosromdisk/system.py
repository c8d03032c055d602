"""System interface: targets, exec modes and the kernel configuration."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum

_CONFIG_FORMAT = struct.Struct("<BBcBBBHHH")


class Target(IntEnum):
    """Machines the kernel can run on."""

    UNKNOWN = 0
    ZEAL8BIT = 1
    TRS80 = 2
    AGON = 3


class ExecMode(IntEnum):
    """Whether the calling program is kept in memory by exec."""

    OVERRIDE_PROGRAM = 0
    PRESERVE_PROGRAM = 1


def _check_range(name, value, limit):
    if not 0 <= value <= limit:
        raise ValueError(f"{name} out of range: {value}")


@dataclass(frozen=True)
class KernelConfig:
    """Read-only kernel configuration; a ``custom`` of 0 means no custom area."""

    target: Target
    mmu: bool
    def_disk: str
    max_driver: int
    max_dev: int
    max_files: int
    max_path: int
    prog_addr: int
    custom: int = 0

    def __post_init__(self):
        object.__setattr__(self, "target", Target(self.target))
        object.__setattr__(self, "mmu", bool(self.mmu))
        if len(self.def_disk) != 1 or not ("A" <= self.def_disk <= "Z"):
            raise ValueError(f"default disk must be an upper case letter: {self.def_disk!r}")
        for name in ("max_driver", "max_dev", "max_files"):
            _check_range(name, getattr(self, name), 0xFF)
        for name in ("max_path", "prog_addr", "custom"):
            _check_range(name, getattr(self, name), 0xFFFF)

    def to_bytes(self):
        return _CONFIG_FORMAT.pack(
            self.target,
            int(self.mmu),
            self.def_disk.encode("ascii"),
            self.max_driver,
            self.max_dev,
            self.max_files,
            self.max_path,
            self.prog_addr,
            self.custom,
        )

    @classmethod
    def from_bytes(cls, data):
        if len(data) != _CONFIG_FORMAT.size:
            raise ValueError(f"kernel configuration must be {_CONFIG_FORMAT.size} bytes")
        (
            target,
            mmu,
            def_disk,
            max_driver,
            max_dev,
            max_files,
            max_path,
            prog_addr,
            custom,
        ) = _CONFIG_FORMAT.unpack(bytes(data))
        return cls(
            target=Target(target),
            mmu=bool(mmu),
            def_disk=def_disk.decode("ascii"),
            max_driver=max_driver,
            max_dev=max_dev,
            max_files=max_files,
            max_path=max_path,
            prog_addr=prog_addr,
            custom=custom,
        )