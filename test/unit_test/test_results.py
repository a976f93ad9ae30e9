"""
Tests for error codes and result schemas.
"""
from datetime import datetime, timezone

import pytest

from gip_auth import ErrorCode, CodeResult, SSTokenResult, UidResult
from gip_auth.auth import FAILURE_ERROR_CODES
from gip_auth.security import TokenFailure


class TestErrorCode:
    """Tests for the error code table."""

    def test_numeric_values(self):
        assert ErrorCode.SUCCESS == 0
        assert ErrorCode.TOKEN_CREATION_FAILED == 1001
        assert ErrorCode.TOKEN_VERIFICATION_FAILED == 1002
        assert ErrorCode.TOKEN_DECODING_FAILED == 1003
        assert ErrorCode.TOKEN_INVALID == 1004
        assert ErrorCode.TOKEN_EXPIRED == 1005
        assert ErrorCode.INVALID_ARGUMENT == 1101
        assert ErrorCode.CONFIGURATION_ERROR == 1102
        assert ErrorCode.UNKNOWN_ERROR == 9999

    def test_every_code_has_a_message(self):
        for code in ErrorCode:
            assert code.message

    def test_describe(self):
        assert ErrorCode.describe(1005) == "Token has expired"
        assert ErrorCode.describe(4242) == "Unknown error code: 4242"

    def test_is_success(self):
        assert ErrorCode.is_success(0)
        assert not ErrorCode.is_success(ErrorCode.TOKEN_INVALID)

    def test_every_failure_kind_is_mapped(self):
        assert set(FAILURE_ERROR_CODES) == set(TokenFailure)


class TestResults:
    """Tests for result construction."""

    def test_code_result_ok(self):
        expire_date = datetime(2030, 1, 1, tzinfo=timezone.utc)
        result = CodeResult.ok("a.b.c", expire_date)

        assert result.success
        assert result.error_code == ErrorCode.SUCCESS
        assert result.error_message is None
        assert result.code == "a.b.c"
        assert result.expire_date == expire_date

    def test_error_uses_default_message(self):
        result = UidResult.error(ErrorCode.TOKEN_EXPIRED)

        assert not result.success
        assert result.error_message == "Token has expired"
        assert result.uid is None

    def test_error_with_custom_message(self):
        result = SSTokenResult.error(ErrorCode.INVALID_ARGUMENT, "User ID cannot be null or empty")

        assert result.error_code == ErrorCode.INVALID_ARGUMENT
        assert result.error_message == "User ID cannot be null or empty"
        assert result.token is None

    def test_error_accepts_int_code(self):
        assert UidResult.error(1004).error_code is ErrorCode.TOKEN_INVALID

    def test_error_rejects_unknown_code(self):
        with pytest.raises(ValueError):
            UidResult.error(4242)

    def test_result_serializes(self):
        result = UidResult.ok("u1")
        assert result.model_dump() == {
            "success": True,
            "error_code": ErrorCode.SUCCESS,
            "error_message": None,
            "uid": "u1",
        }
