"""
Tests for custom exception classes and error handling.
"""

import pytest
from http import HTTPStatus

from connect_proxy.exceptions import (
    ConnectProxyError,
    ErrorCode,
    RestError,
    error_code_for_status
)
from connect_proxy.registry.exceptions import ClusterNotFoundError


@pytest.mark.unit
class TestConnectProxyError:
    """Test the base exception class."""

    def test_basic_exception_creation(self):
        error = ConnectProxyError(
            message="Test error",
            error_code=ErrorCode.INTERNAL_SERVER_ERROR
        )

        assert str(error) == "Test error"
        assert error.message == "Test error"
        assert error.error_code == ErrorCode.INTERNAL_SERVER_ERROR
        assert error.details == {}
        assert error.cause is None

    def test_to_dict_includes_cause(self):
        cause = ValueError("Original error")
        error = ConnectProxyError(
            message="Test error",
            error_code=ErrorCode.TIMEOUT,
            details={"key": "value"},
            cause=cause
        )

        result = error.to_dict()

        assert result["error"] == "TIMEOUT"
        assert result["message"] == "Test error"
        assert result["details"]["key"] == "value"
        assert result["details"]["cause"] == "Original error"
        assert result["details"]["cause_type"] == "ValueError"

    def test_to_dict_does_not_mutate_details(self):
        details = {"key": "value"}
        error = ConnectProxyError("Test error", details=details, cause=ValueError("boom"))

        error.to_dict()

        assert error.details == {"key": "value"}


@pytest.mark.unit
class TestRestError:
    """Test errors rendered by the HTTP boundary."""

    def test_defaults(self):
        error = RestError("Something broke")

        assert error.status_code == 500
        assert error.error_code == ErrorCode.INTERNAL_SERVER_ERROR
        assert error.log_fields == {}
        assert error.silent is False
        assert error.cause is None

    @pytest.mark.parametrize("status_code,error_code", [
        (HTTPStatus.NOT_FOUND, ErrorCode.NOT_FOUND),
        (400, ErrorCode.VALIDATION_ERROR),
        (409, ErrorCode.CONFLICT),
        (503, ErrorCode.SERVICE_UNAVAILABLE),
        (418, ErrorCode.INTERNAL_SERVER_ERROR),
    ])
    def test_error_code_derived_from_status(self, status_code, error_code):
        assert RestError("x", status_code=status_code).error_code == error_code
        assert error_code_for_status(int(status_code)) == error_code

    def test_explicit_error_code_wins(self):
        error = RestError("x", status_code=404, error_code=ErrorCode.CONFLICT)
        assert error.error_code == ErrorCode.CONFLICT

    def test_status_code_is_plain_int(self):
        error = RestError("x", status_code=HTTPStatus.NOT_FOUND)
        assert type(error.status_code) is int

    def test_log_fields_keep_insertion_order(self):
        error = RestError("x", log_fields={"b": 1, "a": 2, "c": 3})
        assert list(error.log_fields) == ["b", "a", "c"]

    def test_log_fields_are_copied(self):
        fields = {"cluster_name": "dev"}
        error = RestError("x", log_fields=fields)

        fields["cluster_name"] = "changed"

        assert error.log_fields == {"cluster_name": "dev"}

    def test_to_dict_hides_internal_diagnostics(self):
        error = RestError(
            "Public message",
            status_code=404,
            cause=RuntimeError("internal detail"),
            log_fields={"cluster_name": "dev"}
        )

        result = error.to_dict()

        assert result == {"error": "NOT_FOUND", "message": "Public message", "details": {}}

    def test_can_be_raised(self):
        with pytest.raises(RestError) as exc_info:
            raise RestError("Public message", status_code=404)

        assert exc_info.value.status_code == 404
        assert isinstance(exc_info.value, ConnectProxyError)


@pytest.mark.unit
class TestClusterNotFoundError:
    """Test the not-found error for unknown cluster names."""

    def test_payload(self):
        error = ClusterNotFoundError("dev")

        assert error.status_code == 404
        assert error.message == "There's no configured cluster with the given connect cluster name"
        assert error.log_fields == {"cluster_name": "dev"}
        assert error.silent is False
        assert str(error.cause) == "a client for the given cluster name does not exist"
        assert isinstance(error.cause, LookupError)

    def test_repr_mentions_fields(self):
        text = repr(ClusterNotFoundError("dev"))

        assert text.startswith("ClusterNotFoundError(")
        assert "'cluster_name': 'dev'" in text
        assert "status_code=404" in text
