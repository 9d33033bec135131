"""Registry Store — in-process record store for departments and their courses.

Invariants:
    - Department keys are canonical uppercase; client input is normalized once, here
    - Lookups never raise for missing records: they return None or a CourseLookup
      carrying a LookupFailure kind
    - find_course short-circuits: a missing department never triggers a course lookup
    - find_courses_by_code keeps every (dept_code, course) match, no deduplication
    - Snapshots are JSON-safe dicts; missing keys fall back to entity defaults

Design Decisions:
    - One RegistryStore instance per app, created in the lifespan and injected into
      routes (no module-level singleton)
"""

from dataclasses import dataclass
from typing import Iterable

from campus_api.core.domain_types import LookupFailure, normalize_dept_code
from campus_api.core.registry_entities import Course, Department


@dataclass
class CourseLookup:
    """Result of resolving department code → course code."""
    department: Department | None = None
    course: Course | None = None
    failure: LookupFailure | None = None

    @property
    def found(self) -> bool:
        return self.failure is None


class RegistryStore:
    """Keyed mapping of canonical department code → Department."""

    def __init__(self, departments: Iterable[Department] = ()):
        self._departments: dict[str, Department] = {}
        for department in departments:
            self.add_department(department)

    def add_department(self, department: Department) -> None:
        department.dept_code = normalize_dept_code(department.dept_code)
        self._departments[department.dept_code] = department

    @property
    def department_codes(self) -> list[str]:
        return list(self._departments)

    def __len__(self) -> int:
        return len(self._departments)

    # --- Lookups --------------------------------------------------------------

    def find_department(self, dept_code: str) -> Department | None:
        """Case-insensitive department lookup."""
        return self._departments.get(normalize_dept_code(dept_code))

    def find_course(self, dept_code: str, course_code: str) -> CourseLookup:
        """Resolve a course inside a department, reporting which step failed."""
        department = self.find_department(dept_code)
        if department is None:
            return CourseLookup(failure=LookupFailure.DEPARTMENT_NOT_FOUND)
        course = department.get_course(str(course_code))
        if course is None:
            return CourseLookup(
                department=department,
                failure=LookupFailure.COURSE_NOT_FOUND,
            )
        return CourseLookup(department=department, course=course)

    def find_courses_by_code(self, course_code: str) -> list[tuple[str, Course]]:
        """Every department offering this course code, in store order."""
        matches = []
        for dept_code, department in self._departments.items():
            course = department.get_course(course_code)
            if course is not None:
                matches.append((dept_code, course))
        return matches

    # --- Snapshots ------------------------------------------------------------

    def to_snapshot(self) -> dict:
        """Serialize the whole registry to a JSON-safe dict. Pure, no IO."""
        return {
            "departments": [
                {
                    "dept_code": dept.dept_code,
                    "department_chair": dept.department_chair,
                    "number_of_majors": dept.number_of_majors,
                    "courses": {
                        code: {
                            "instructor_name": course.instructor_name,
                            "course_location": course.course_location,
                            "course_time_slot": course.course_time_slot,
                            "enrollment_capacity": course.enrollment_capacity,
                            "enrolled_student_count": course.enrolled_student_count,
                        }
                        for code, course in dept.courses.items()
                    },
                }
                for dept in self._departments.values()
            ],
        }

    @classmethod
    def from_snapshot(cls, snapshot: dict) -> "RegistryStore":
        """Rebuild a store from a to_snapshot() dict."""
        departments = []
        for raw in snapshot.get("departments", []):
            courses = {
                str(code): Course(
                    instructor_name=c.get("instructor_name", ""),
                    course_location=c.get("course_location", ""),
                    course_time_slot=c.get("course_time_slot", ""),
                    enrollment_capacity=int(c.get("enrollment_capacity", 0)),
                    enrolled_student_count=int(c.get("enrolled_student_count", 0)),
                )
                for code, c in raw.get("courses", {}).items()
            }
            departments.append(Department(
                dept_code=raw["dept_code"],
                department_chair=raw.get("department_chair", ""),
                number_of_majors=int(raw.get("number_of_majors", 0)),
                courses=courses,
            ))
        return cls(departments)
