import pytest

from zosromdisk.errors import ErrorCode, ZosError, check


def test_documented_values():
    assert ZosError(21).code is ErrorCode.NO_MORE_ENTRIES
    with pytest.raises(ZosError) as info:
        check(26)
    assert info.value.code is ErrorCode.DIR_NOT_EMPTY
    assert check(0) is None


def test_codes_are_contiguous():
    for value in range(1, 27):
        with pytest.raises(ZosError) as info:
            check(value)
        assert info.value.code.value == value
    with pytest.raises(ValueError):
        check(27)


def test_error_carries_code():
    err = ZosError(5)
    assert err.code is ErrorCode.INVALID_SYSCALL
    assert "INVALID_SYSCALL" in str(err)


def test_error_rejects_unknown_code():
    with pytest.raises(ValueError):
        ZosError(200)


@pytest.mark.parametrize("code", [c for c in ErrorCode if c is not ErrorCode.SUCCESS])
def test_check_raises_for_failures(code):
    with pytest.raises(ZosError) as info:
        check(code.value)
    assert info.value.code is code


def test_check_accepts_success():
    assert check(ErrorCode.SUCCESS) is None


def test_check_rejects_unknown_code():
    with pytest.raises(ValueError):
        check(-3)