"""Domain Types — identity aliases and outcome enums shared across both services.

Invariants:
    - Department codes are stored and compared in canonical uppercase
    - Course codes are compared as exact strings
    - Outcomes of counter mutations are Enums, never bare booleans or strings
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

DeptCode = NewType("DeptCode", str)
CourseCode = NewType("CourseCode", str)
UserId = NewType("UserId", int)
BuildingId = NewType("BuildingId", int)
HousingUnitId = NewType("HousingUnitId", int)


def normalize_dept_code(raw: str) -> DeptCode:
    """Canonical key for a department code typed by a client."""
    return DeptCode(raw.strip().upper())


# ─── Enums ───────────────────────────────────────────────────────

class MajorCountChange(str, Enum):
    """What a major-count mutation actually did to the counter."""
    INCREMENTED = "incremented"
    DECREMENTED = "decremented"
    AT_MINIMUM = "at_minimum"


class LookupFailure(str, Enum):
    """Why a department → course lookup produced no course."""
    DEPARTMENT_NOT_FOUND = "department_not_found"
    COURSE_NOT_FOUND = "course_not_found"
