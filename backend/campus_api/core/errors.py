"""Error Hierarchy — typed, categorized exceptions for every failure mode of both services.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Not-found errors carry the exact message text clients match on
    - RegistryError subclasses are rendered as plain text by the registry route class;
      every other CampusError is rendered as the JSON envelope from to_response()
    - User-facing messages never include driver or stack details

Design Decisions:
    - One CampusError base so a single app-level handler covers the housing side
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """Coarse grouping used by the response envelope and log filters."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    UNAUTHORIZED = "unauthorized"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource_id: str | None = None
    debug_info: dict[str, Any] | None = None


class CampusError(Exception):
    """Base exception for all Campus API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """JSON error envelope returned by the housing and user endpoints."""
        body = {
            "code": self.code,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "timestamp": self.context.timestamp.isoformat(),
        }
        return {"error": body}


class _NotFound(CampusError):
    """404 for a single named resource; resource_id recorded on the context."""

    def __init__(self, message: str, code: str, resource_id: Any,
                 context: ErrorContext | None = None):
        super().__init__(
            message, code, ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.WARNING,
            context or ErrorContext(resource_id=str(resource_id)), 404,
        )


# ─── Course Registry Errors (plain-text responses) ──────────────

class RegistryError(CampusError):
    """Registry failure rendered as a plain-text body."""


class DepartmentNotFoundError(_NotFound, RegistryError):
    def __init__(self, dept_code: str, context: ErrorContext | None = None):
        super().__init__(
            "Department Not Found", "DEPARTMENT_NOT_FOUND", dept_code, context,
        )
        self.dept_code = dept_code


class CourseNotFoundError(_NotFound, RegistryError):
    """Course code does not resolve inside the requested department."""
    def __init__(self, course_code: str, context: ErrorContext | None = None):
        super().__init__(
            "Course Not Found", "COURSE_NOT_FOUND", course_code, context,
        )
        self.course_code = course_code


class CourseCodeNotFoundError(_NotFound, RegistryError):
    """No department offers a course with this code."""
    def __init__(self, course_code: str, context: ErrorContext | None = None):
        super().__init__(
            f"Course with code {course_code} not found in any department",
            "COURSE_CODE_NOT_FOUND", course_code, context,
        )
        self.course_code = course_code


# ─── Housing Errors (JSON envelope) ─────────────────────────────

class BuildingNotFoundError(_NotFound):
    def __init__(self, building_id: int, context: ErrorContext | None = None):
        super().__init__(
            f"Building with id {building_id} not found",
            "BUILDING_NOT_FOUND", building_id, context,
        )


class HousingUnitNotFoundError(_NotFound):
    def __init__(self, housing_unit_id: int, context: ErrorContext | None = None):
        super().__init__(
            f"Housing unit with id {housing_unit_id} not found",
            "HOUSING_UNIT_NOT_FOUND", housing_unit_id, context,
        )


class UserNotFoundError(_NotFound):
    """No account is registered under this email address."""
    def __init__(self, email_address: str, context: ErrorContext | None = None):
        super().__init__(
            f"No account is associated with {email_address}",
            "USER_NOT_FOUND", email_address, context,
        )


class BlankCredentialsError(CampusError):
    """Email or password missing from an authentication attempt."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Email address and password must not be blank",
            "BLANK_CREDENTIALS", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class InvalidCredentialsError(CampusError):
    """Password digest does not match the stored digest."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid email address or password",
            "INVALID_CREDENTIALS", ErrorCategory.UNAUTHORIZED,
            ErrorSeverity.WARNING, context, 401,
        )


class DuplicateEmailError(CampusError):
    def __init__(self, email_address: str, context: ErrorContext | None = None):
        super().__init__(
            f"There is an account already associated with {email_address}",
            "DUPLICATE_EMAIL", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )
        self.email_address = email_address


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(CampusError):
    """Database operation failed; 503 so clients may retry later."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
