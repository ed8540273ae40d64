"""Error Hierarchy — verifies codes, statuses and the response envelope.

Tests:
    - Each error kind maps to its HTTP status and code
    - to_response() yields {"message", "error"} and only adds details when present
    - Duplicate-key message names the conflicting id
"""

import pytest

from light_api.core.errors import (
    LightApiError, MalformedInputError, ValidationError, DuplicateKeyError,
    StorageError, SchemaError, ErrorCategory, ErrorSeverity,
)


@pytest.mark.parametrize(
    "error, status, code",
    [
        (MalformedInputError(), 400, "MALFORMED_INPUT"),
        (ValidationError(["id"]), 400, "VALIDATION_ERROR"),
        (DuplicateKeyError("u1"), 409, "DUPLICATE_KEY"),
        (StorageError("Internal database error", "find_by_id"), 500, "STORAGE_ERROR"),
        (SchemaError(), 500, "SCHEMA_ERROR"),
    ],
)
def test_error_kinds_map_to_http_status(error, status, code):
    assert isinstance(error, LightApiError)
    assert error.http_status == status
    assert error.code == code


def test_response_envelope_shape():
    body = StorageError("Internal database error", "find_by_id").to_response()
    assert body == {
        "message": "Internal database error",
        "error": {
            "code": "STORAGE_ERROR",
            "category": ErrorCategory.DATABASE.value,
            "severity": ErrorSeverity.CRITICAL.value,
        },
    }


def test_validation_error_lists_missing_fields():
    err = ValidationError(["id", "name"])
    details = err.to_response()["error"]["details"]
    assert [d["field"] for d in details] == ["id", "name"]
    assert err.missing_fields == ["id", "name"]


def test_duplicate_key_message_names_id():
    err = DuplicateKeyError("alice-01")
    assert "alice-01" in err.message
    assert err.user_id == "alice-01"
    assert err.category == ErrorCategory.CONFLICT


def test_storage_error_keeps_operation():
    err = StorageError("Failed to create user due to internal error", "create")
    assert err.operation == "create"
    assert str(err) == "Failed to create user due to internal error"
