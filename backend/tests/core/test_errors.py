"""Error hierarchy — codes, statuses, and the REST envelope."""

from app.core.errors import (
    RosterError, ValidationError, ConflictError, ResourceNotFoundError,
    DatabaseError, ErrorCategory, ErrorSeverity, ErrorContext,
)


def test_all_errors_share_base_class():
    for exc in (
        ValidationError("bad", field="email"),
        ConflictError(),
        ResourceNotFoundError("User", "abc"),
        DatabaseError("down", "execute"),
    ):
        assert isinstance(exc, RosterError)


def test_validation_error_is_400_with_field():
    exc = ValidationError("first_name cannot be empty", field="first_name")
    assert exc.http_status == 400
    assert exc.code == "VALIDATION_ERROR"
    assert exc.category == ErrorCategory.VALIDATION
    assert exc.field == "first_name"


def test_conflict_error_defaults_to_email():
    exc = ConflictError()
    assert exc.http_status == 409
    assert exc.code == "EMAIL_CONFLICT"
    assert exc.category == ErrorCategory.CONFLICT
    assert exc.field == "email"
    assert str(exc) == "A user with this email already exists"


def test_not_found_message_names_resource():
    exc = ResourceNotFoundError("User", "1234")
    assert exc.http_status == 404
    assert exc.message == "User '1234' not found"


def test_database_error_is_critical_503():
    exc = DatabaseError("Connection refused", "execute")
    assert exc.http_status == 503
    assert exc.severity == ErrorSeverity.CRITICAL
    assert exc.operation == "execute"


def test_to_response_envelope():
    exc = ConflictError(context=ErrorContext(user_id="u-1"))
    body = exc.to_response()["error"]
    assert body["code"] == "EMAIL_CONFLICT"
    assert body["category"] == "conflict"
    assert body["severity"] == "warning"
    assert body["context"] == {"user_id": "u-1", "field": "email"}
    assert "timestamp" in body
