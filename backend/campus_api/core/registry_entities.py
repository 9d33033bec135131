"""Registry Entities — Course and Department with their counter invariants.

Invariants:
    - 0 <= enrolled_student_count <= enrollment_capacity after every enroll/drop
    - enroll_student on a full course is rejected (returns False), never clamped
    - drop_student at zero is a no-op returning False
    - is_course_full is computed on demand, never stored
    - number_of_majors never drops below zero
    - Every mutator holds the entity's lock, so concurrent callers serialize per entity

Design Decisions:
    - set_enrolled_student_count is an administrative override: it skips the capacity
      check and CAN leave the course over capacity
    - drop_person_from_major returns a MajorCountChange so callers can tell a real
      decrement from a no-op at the floor
"""

import threading
from dataclasses import dataclass, field

from campus_api.core.domain_types import MajorCountChange


@dataclass
class Course:
    """A course offering with a capacity-bounded enrollment counter."""

    instructor_name: str
    course_location: str
    course_time_slot: str
    enrollment_capacity: int
    enrolled_student_count: int = 0

    _lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False,
    )

    # --- Enrollment state machine ---------------------------------------------

    def enroll_student(self) -> bool:
        """Add one student if a seat is free."""
        with self._lock:
            if self.enrolled_student_count >= self.enrollment_capacity:
                return False
            self.enrolled_student_count += 1
            return True

    def drop_student(self) -> bool:
        """Remove one student if anyone is enrolled."""
        with self._lock:
            if self.enrolled_student_count <= 0:
                return False
            self.enrolled_student_count -= 1
            return True

    def is_course_full(self) -> bool:
        return self.enrolled_student_count >= self.enrollment_capacity

    def set_enrolled_student_count(self, count: int) -> None:
        """Overwrite the enrolled count as given. No capacity check."""
        with self._lock:
            self.enrolled_student_count = count

    # --- Display fields -------------------------------------------------------

    def reassign_instructor(self, instructor_name: str) -> None:
        with self._lock:
            self.instructor_name = instructor_name

    def reassign_location(self, course_location: str) -> None:
        with self._lock:
            self.course_location = course_location

    def reassign_time(self, course_time_slot: str) -> None:
        with self._lock:
            self.course_time_slot = course_time_slot

    def __str__(self) -> str:
        return (
            f"\nInstructor: {self.instructor_name}; "
            f"Location: {self.course_location}; "
            f"Time: {self.course_time_slot}"
        )


@dataclass
class Department:
    """A department, its chair, its major headcount and its courses."""

    dept_code: str
    department_chair: str
    number_of_majors: int = 0
    courses: dict[str, Course] = field(default_factory=dict)

    _lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False,
    )

    def get_course(self, course_code: str) -> Course | None:
        """Exact-match lookup of a course offered by this department."""
        return self.courses.get(course_code)

    def add_course(self, course_code: str, course: Course) -> None:
        with self._lock:
            self.courses[course_code] = course

    def add_person_to_major(self) -> MajorCountChange:
        with self._lock:
            self.number_of_majors += 1
            return MajorCountChange.INCREMENTED

    def drop_person_from_major(self) -> MajorCountChange:
        """Decrement the major count, stopping at zero."""
        with self._lock:
            if self.number_of_majors <= 0:
                return MajorCountChange.AT_MINIMUM
            self.number_of_majors -= 1
            return MajorCountChange.DECREMENTED

    def __str__(self) -> str:
        return "".join(
            f"{self.dept_code} {code}: {course}\n"
            for code, course in self.courses.items()
        )
