"""Tests for cutrel.core.errors module."""

from cutrel.core.errors import ErrorCode


def test_exit_code_values_are_stable() -> None:
    assert ErrorCode.OK == 0
    assert ErrorCode.USER_ERROR == 1
    assert ErrorCode.ENV_ERROR == 2
    assert ErrorCode.RELEASE_ERROR == 3
    assert ErrorCode.IO_ERROR == 5

