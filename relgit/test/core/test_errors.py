"""Tests for relgit.core.errors module."""

from __future__ import annotations

from relgit.core.errors import ErrorCode


class TestErrorCode:
    def test_values_are_stable(self) -> None:
        assert ErrorCode.OK == 0
        assert ErrorCode.USER_ERROR == 1
        assert ErrorCode.ENV_ERROR == 2
        assert ErrorCode.GIT_ERROR == 3
        assert ErrorCode.PRECONDITION_ERROR == 4

    def test_str(self) -> None:
        assert str(ErrorCode.PRECONDITION_ERROR) == "precondition error"
        assert str(ErrorCode.OK) == "ok"

    def test_success_flags(self) -> None:
        assert ErrorCode.OK.is_success
        assert not ErrorCode.OK.is_error
        assert all(code.is_error for code in ErrorCode if code is not ErrorCode.OK)
