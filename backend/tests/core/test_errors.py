"""Error Hierarchy: codes, statuses and the REST envelope.

Tests:
    - Each error maps to its HTTP status and code
    - to_response() carries resource context without internals
"""

import pytest

from taskboard.core.errors import (
    ConflictError, ErrorCategory, ErrorContext, ResourceNotFoundError,
    StorageUnavailableError, TaskboardError, UnauthenticatedError,
    UnauthorizedError, ValidationError,
)


@pytest.mark.parametrize(
    "error, status, code",
    [
        (ValidationError("Board name is required", "name"), 400, "VALIDATION_ERROR"),
        (UnauthenticatedError(), 401, "UNAUTHENTICATED"),
        (UnauthorizedError("Board", "b1"), 403, "UNAUTHORIZED"),
        (ResourceNotFoundError("Task", "t1"), 404, "RESOURCE_NOT_FOUND"),
        (ConflictError("User with this email already exists"), 409, "CONFLICT"),
        (StorageUnavailableError("disk full", "write"), 503, "STORAGE_UNAVAILABLE"),
    ],
)
def test_error_status_and_code(error, status, code):
    assert isinstance(error, TaskboardError)
    assert error.http_status == status
    assert error.code == code


def test_unauthenticated_default_message():
    assert UnauthenticatedError().message == "Authentication required"


def test_not_found_response_envelope():
    body = ResourceNotFoundError("Board", "b1").to_response()
    assert body["error"]["code"] == "RESOURCE_NOT_FOUND"
    assert body["error"]["message"] == "Board not found"
    assert body["error"]["category"] == ErrorCategory.RESOURCE_NOT_FOUND.value
    assert body["error"]["context"] == {"resource_type": "Board", "resource_id": "b1"}


def test_unauthorized_keeps_supplied_context():
    ctx = ErrorContext(user_id="u2")
    err = UnauthorizedError("Task", "t1", ctx)
    assert err.context.user_id == "u2"
    assert err.context.resource_id == "t1"


def test_storage_error_message_names_operation():
    err = StorageUnavailableError("permission denied", "read")
    assert err.message == "Storage read failed: permission denied"
    assert err.operation == "read"
