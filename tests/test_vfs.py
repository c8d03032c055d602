import pytest

from zosromdisk.vfs import (
    DEV_STDIN,
    DEV_STDOUT,
    FILENAME_LEN_MAX,
    PATH_MAX,
    DirEntry,
    FsType,
    OpenFlag,
    Stat,
    Whence,
    is_dir,
    is_file,
)
from zosromdisk.zostime import ZosDate


def _date():
    return ZosDate(2023, 5, 17, 4, 13, 45, 9)


def test_open_flag_values_match_header():
    assert OpenFlag(0) is OpenFlag.RDONLY
    assert OpenFlag(1) is OpenFlag.WRONLY
    assert OpenFlag(2) is OpenFlag.RDWR
    assert OpenFlag(1 << 2) is OpenFlag.TRUNC
    assert OpenFlag(2 << 2) is OpenFlag.APPEND
    assert OpenFlag(4 << 2) is OpenFlag.CREAT
    assert OpenFlag(1 << 5) is OpenFlag.NONBLOCK


def test_open_flags_combine():
    combined = OpenFlag.WRONLY | OpenFlag.CREAT | OpenFlag.TRUNC
    assert OpenFlag(int(combined)) == combined
    assert OpenFlag.CREAT in combined
    assert OpenFlag.APPEND not in combined


def test_device_and_limit_constants():
    assert DEV_STDOUT == 0
    assert DEV_STDIN == 1
    assert PATH_MAX == 128
    assert len(DirEntry(1, "x").to_bytes()) == 1 + FILENAME_LEN_MAX == 17


def test_whence_and_fs_values():
    assert [Whence(v) for v in range(3)] == list(Whence)
    assert FsType(0) is FsType.RAWTABLE
    assert FsType(1) is FsType.ZEALFS


@pytest.mark.parametrize("flags", [0, 1, 2, 3, 0xFE, 0xFF])
def test_is_file_and_is_dir_are_exclusive(flags):
    assert is_file(flags) != is_dir(flags)
    assert is_file(flags) == bool(flags & 1)


def test_dir_entry_wire_bytes():
    entry = DirEntry(1, "init.bin")
    assert entry.to_bytes() == b"\x01init.bin" + b"\x00" * 8


def test_dir_entry_round_trip():
    entry = DirEntry(0, "subdir")
    decoded = DirEntry.from_bytes(entry.to_bytes())
    assert decoded == entry
    assert decoded.is_dir
    assert not decoded.is_file


def test_dir_entry_full_length_name_round_trip():
    name = "a" * FILENAME_LEN_MAX
    entry = DirEntry(1, name)
    assert DirEntry.from_bytes(entry.to_bytes()).name == name


def test_dir_entry_name_too_long():
    with pytest.raises(ValueError):
        DirEntry(1, "a" * (FILENAME_LEN_MAX + 1))


def test_dir_entry_bad_flags():
    with pytest.raises(ValueError):
        DirEntry(256, "x")


def test_dir_entry_from_bytes_wrong_length():
    with pytest.raises(ValueError):
        DirEntry.from_bytes(b"\x01abc")


def test_stat_wire_layout():
    stat = Stat(0x01020304, _date(), "simple.txt")
    raw = stat.to_bytes()
    assert raw[:4] == b"\x04\x03\x02\x01"
    assert raw[4:12] == _date().to_bytes()
    assert raw[12:] == b"simple.txt".ljust(FILENAME_LEN_MAX, b"\x00")


def test_stat_round_trip():
    stat = Stat(1024, _date(), "init.bin")
    assert Stat.from_bytes(stat.to_bytes()) == stat


def test_stat_size_out_of_range():
    with pytest.raises(ValueError):
        Stat(-1, _date(), "x")
    with pytest.raises(ValueError):
        Stat(1 << 32, _date(), "x")


def test_stat_from_bytes_wrong_length():
    raw = Stat(5, _date(), "x").to_bytes()
    with pytest.raises(ValueError):
        Stat.from_bytes(raw[:-1])