"""Error hierarchy: codes, statuses and the REST envelope."""

from course_catalog.core.errors import (
    CourseCatalogError, CourseNotFoundError, DatabaseError,
    ErrorCategory, ErrorSeverity, ResourceNotFoundError,
)


def test_course_not_found_is_a_404_resource_error():
    err = CourseNotFoundError(42)
    assert isinstance(err, ResourceNotFoundError)
    assert isinstance(err, CourseCatalogError)
    assert err.http_status == 404
    assert err.code == "RESOURCE_NOT_FOUND"
    assert err.message == "Course '42' not found"


def test_to_response_envelope():
    body = CourseNotFoundError(42).to_response()["error"]
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["category"] == ErrorCategory.RESOURCE_NOT_FOUND.value
    assert body["severity"] == ErrorSeverity.ERROR.value
    assert body["context"]["course_id"] == 42
    assert "timestamp" in body


def test_database_error_is_critical_503():
    err = DatabaseError("Connection or operational error", "execute")
    assert err.http_status == 503
    assert err.severity is ErrorSeverity.CRITICAL
    assert err.operation == "execute"
    assert "execute" in err.message
