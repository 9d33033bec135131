"""Error Hierarchy — status codes, message text and response envelope.

Tests cover:
    - Each error kind carries the right HTTP status
    - Not-found errors are told apart by message text
    - Registry errors share the RegistryError base
    - to_response envelope shape
"""

import pytest

from campus_api.core.errors import (
    BlankCredentialsError, BuildingNotFoundError, CampusError,
    CourseCodeNotFoundError, CourseNotFoundError, DatabaseError,
    DepartmentNotFoundError, DuplicateEmailError, ErrorCategory,
    HousingUnitNotFoundError, InvalidCredentialsError, RegistryError,
    UserNotFoundError,
)


@pytest.mark.parametrize("error, status", [
    (DepartmentNotFoundError("HIST"), 404),
    (CourseNotFoundError("9999"), 404),
    (CourseCodeNotFoundError("1004"), 404),
    (BuildingNotFoundError(7), 404),
    (HousingUnitNotFoundError(8), 404),
    (UserNotFoundError("a@b.c"), 404),
    (BlankCredentialsError(), 400),
    (InvalidCredentialsError(), 401),
    (DuplicateEmailError("a@b.c"), 409),
    (DatabaseError("boom", "commit"), 503),
])
def test_http_status(error: CampusError, status: int):
    assert error.http_status == status


def test_not_found_messages():
    assert DepartmentNotFoundError("HIST").message == "Department Not Found"
    assert CourseNotFoundError("9999").message == "Course Not Found"
    assert CourseCodeNotFoundError("1004").message == (
        "Course with code 1004 not found in any department"
    )
    assert BuildingNotFoundError(7).message == "Building with id 7 not found"
    assert HousingUnitNotFoundError(8).message == "Housing unit with id 8 not found"


def test_registry_errors_share_base():
    for error in (
        DepartmentNotFoundError("X"), CourseNotFoundError("1"),
        CourseCodeNotFoundError("1"),
    ):
        assert isinstance(error, RegistryError)
    assert not isinstance(BuildingNotFoundError(1), RegistryError)


def test_duplicate_email_message():
    error = DuplicateEmailError("emily.johnson@example.com")
    assert error.message == (
        "There is an account already associated with emily.johnson@example.com"
    )
    assert error.category == ErrorCategory.CONFLICT


def test_to_response_envelope():
    body = BuildingNotFoundError(3).to_response()
    assert set(body["error"]) == {"code", "message", "category", "severity", "timestamp"}
    assert body["error"]["code"] == "BUILDING_NOT_FOUND"
    assert body["error"]["category"] == "resource_not_found"
