"""Registry Messages — every text body the course registry returns.

Invariants:
    - Message text is part of the public contract; clients match on it
    - Pure functions only, no store access
"""

from campus_api.core.registry_entities import Course, Department

WELCOME_MESSAGE = (
    "Welcome, in order to make an API call direct your browser or Postman to an endpoint "
    "\n\n This can be done using the following format: \n\n http:127.0.0.1:8080/endpoint?arg=value"
)
INTERNAL_ERROR_MESSAGE = "An Error has occurred"

ATTRIBUTE_UPDATED = "Attribute was updated successfully"
ATTRIBUTE_UPDATED_OR_AT_MINIMUM = "Attribute was updated or is at minimum"
COURSE_ATTRIBUTE_UPDATED = "Attributed was updated successfully."

STUDENT_ENROLLED = "Student has been enrolled."
STUDENT_NOT_ENROLLED = "Student has not been enrolled."
STUDENT_DROPPED = "Student has been dropped."
STUDENT_NOT_DROPPED = "Student has not been dropped."


def department_detail(department: Department) -> str:
    return str(department)


def course_detail(course: Course) -> str:
    return str(course)


def courses_by_code_detail(matches: list[tuple[str, Course]]) -> str:
    """One block per department offering the course."""
    return "".join(f"{dept_code}: \n{course}\n\n" for dept_code, course in matches)


def major_count_sentence(department: Department) -> str:
    return f"There are: {department.number_of_majors} majors in the department"


def department_chair_sentence(department: Department) -> str:
    return f"{department.department_chair} is the department chair."


def course_location_sentence(course: Course) -> str:
    return f"{course.course_location} is where the course is located."


def course_instructor_sentence(course: Course) -> str:
    return f"{course.instructor_name} is the instructor for the course."


def course_time_sentence(course: Course) -> str:
    return f"The course meets at: {course.course_time_slot}"
