"""Error codes reported by the kernel and the exception that carries them."""

from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """Error values returned by kernel syscalls."""

    SUCCESS = 0
    FAILURE = 1
    NOT_IMPLEMENTED = 2
    NOT_SUPPORTED = 3
    NO_SUCH_ENTRY = 4
    INVALID_SYSCALL = 5
    INVALID_PARAMETER = 6
    INVALID_VIRT_PAGE = 7
    INVALID_PHYS_ADDRESS = 8
    INVALID_OFFSET = 9
    INVALID_NAME = 10
    INVALID_PATH = 11
    INVALID_FILESYSTEM = 12
    INVALID_FILEDEV = 13
    PATH_TOO_LONG = 14
    ALREADY_EXIST = 15
    ALREADY_OPENED = 16
    ALREADY_MOUNTED = 17
    READ_ONLY = 18
    BAD_MODE = 19
    CANNOT_REGISTER_MORE = 20
    NO_MORE_ENTRIES = 21
    NO_MORE_MEMORY = 22
    NOT_A_DIR = 23
    NOT_A_FILE = 24
    ENTRY_CORRUPTED = 25
    DIR_NOT_EMPTY = 26


class ZosError(Exception):
    """Raised when a kernel error code other than SUCCESS is reported."""

    def __init__(self, code):
        self.code = ErrorCode(code)
        super().__init__(f"{self.code.name} ({self.code.value})")


def check(code):
    """Raise ZosError unless ``code`` is SUCCESS."""
    error = ErrorCode(code)
    if error is not ErrorCode.SUCCESS:
        raise ZosError(error)