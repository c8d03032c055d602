import pytest

from zosromdisk.keyboard import (
    KbCommand,
    KbMode,
    KbReadFlag,
    Key,
    KeyEvent,
    is_special,
    parse_raw_events,
)


def test_documented_codes():
    events = list(parse_raw_events(bytes([0x61, 0x93, 0xFE, 0x61])))
    assert events == [
        KeyEvent(Key.KEY_A),
        KeyEvent(Key.LEFT_SHIFT),
        KeyEvent(Key.KEY_A, released=True),
    ]
    assert KbReadFlag(1 << 2) is KbReadFlag.NON_BLOCK
    assert KbMode(2) is KbMode.HALFCOOKED
    assert KbCommand(0) is KbCommand.SET_MODE


def test_shift_then_a():
    events = list(parse_raw_events(bytes([0x93, 0x61])))
    assert events == [KeyEvent(Key.LEFT_SHIFT), KeyEvent(Key.KEY_A)]


def test_press_and_release():
    events = list(parse_raw_events(bytes([0x61, 0xFE, 0x61])))
    assert events == [KeyEvent(Key.KEY_A), KeyEvent(Key.KEY_A, released=True)]


def test_unknown_code_kept_as_int():
    (event,) = parse_raw_events(bytes([0xA5]))
    assert event.key == 0xA5
    assert not isinstance(event.key, Key)


def test_dangling_release_marker():
    with pytest.raises(ValueError):
        list(parse_raw_events(bytes([0x61, 0xFE])))


def test_empty_input():
    assert list(parse_raw_events(b"")) == []


def test_is_special():
    assert is_special(Key.F1)
    assert is_special(Key.NUMPAD_0)
    assert not is_special(Key.KEY_Z)
    assert not is_special(Key.KEY_BACKSLASH)


def test_is_special_range():
    with pytest.raises(ValueError):
        is_special(256)