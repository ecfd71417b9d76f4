"""Tests for brewship.core.errors module."""

from brewship.core.errors import ErrorCode


class TestErrorCodeValues:
    """Exit codes are part of the CLI contract."""

    def test_values(self) -> None:
        assert ErrorCode.OK == 0
        assert ErrorCode.USER_ERROR == 1
        assert ErrorCode.ENV_ERROR == 2
        assert ErrorCode.DETECTION_ERROR == 3
        assert ErrorCode.EXTERNAL_ERROR == 4
        assert ErrorCode.ABORTED == 5

    def test_codes_are_unique(self) -> None:
        assert len({int(c) for c in ErrorCode}) == len(ErrorCode)


def test_can_use_as_int() -> None:
    code: int = ErrorCode.DETECTION_ERROR
    assert code == 3
