"""Tests for domain exceptions (error_code, message, details) and their HTTP status."""

from app.core.exception_handlers import status_for_error_code
from app.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    ConflictException,
    ResourceNotFoundException,
    RoleApiException,
    ServiceNotConfiguredException,
    ValidationException,
)


def test_base_exception_default_error_code() -> None:
    """Base RoleApiException uses class name as error_code when not provided."""
    exc = RoleApiException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "RoleApiException"
    assert exc.details == {}


def test_base_exception_to_dict() -> None:
    exc = RoleApiException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {
        "error": "CUSTOM",
        "message": "Oops",
        "details": {"key": "value"},
    }


def test_validation_exception() -> None:
    exc = ValidationException("Invalid sort query", field="sort", errors=[{"msg": "bad"}])
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "sort", "errors": [{"msg": "bad"}]}


def test_validation_exception_without_field() -> None:
    exc = ValidationException("Invalid")
    assert exc.details == {}


def test_authentication_exception_default_message() -> None:
    exc = AuthenticationException()
    assert exc.message == "Not authenticated"
    assert exc.error_code == "AUTHENTICATION_ERROR"


def test_authorization_exception_with_capability() -> None:
    exc = AuthorizationException("role:create")
    assert exc.message == "Permission denied: role:create required"
    assert exc.error_code == "PERMISSION_DENIED"
    assert exc.details == {"capability": "role:create"}


def test_authorization_exception_without_capability() -> None:
    exc = AuthorizationException()
    assert exc.message == "Permission denied"
    assert exc.details == {}


def test_resource_not_found_exception() -> None:
    exc = ResourceNotFoundException("role", "r1")
    assert exc.message == "role not found: r1"
    assert exc.details == {"resource_type": "role", "resource_id": "r1"}


def test_conflict_and_service_unavailable_codes() -> None:
    assert ConflictException("dup").error_code == "CONFLICT"
    exc = ServiceNotConfiguredException("Role use cases")
    assert exc.error_code == "SERVICE_UNAVAILABLE"
    assert exc.details == {"collaborator": "Role use cases"}


def test_status_for_error_code() -> None:
    assert status_for_error_code("RESOURCE_NOT_FOUND") == 404
    assert status_for_error_code("AUTHENTICATION_ERROR") == 401
    assert status_for_error_code("PERMISSION_DENIED") == 403
    assert status_for_error_code("VALIDATION_ERROR") == 400
    assert status_for_error_code("CONFLICT") == 409
    assert status_for_error_code("SERVICE_UNAVAILABLE") == 503
    assert status_for_error_code("SOMETHING_ELSE") == 400
