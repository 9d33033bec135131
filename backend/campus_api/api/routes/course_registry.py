"""Course Registry Routes — department and course queries and mutations.

Invariants:
    - Every handler resolves through the injected RegistryStore (never a global)
    - Lookups that name both a department and a course report which one is missing,
      except the course-field endpoints, which report "Course Not Found" for either
    - Bodies are plain text except /isCourseFull, which returns a JSON boolean
    - Failures are raised as RegistryErrors; RegistryRoute renders them
"""

import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from campus_api.api.dependencies import get_registry
from campus_api.api.registry_route import RegistryRoute
from campus_api.core import format_registry as fmt
from campus_api.core.domain_types import LookupFailure
from campus_api.core.errors import (
    CourseCodeNotFoundError, CourseNotFoundError, DepartmentNotFoundError,
)
from campus_api.core.registry_entities import Course, Department
from campus_api.core.registry_store import RegistryStore

logger = logging.getLogger(__name__)
router = APIRouter(tags=["course-registry"], route_class=RegistryRoute)


# ─── Lookup helpers ──────────────────────────────────────────────

def _require_department(store: RegistryStore, dept_code: str) -> Department:
    department = store.find_department(dept_code)
    if department is None:
        raise DepartmentNotFoundError(dept_code)
    return department


def _require_course(
    store: RegistryStore, dept_code: str, course_code: int,
    collapse_failures: bool = False,
) -> Course:
    """Resolve dept → course. collapse_failures reports any miss as Course Not Found."""
    lookup = store.find_course(dept_code, str(course_code))
    if lookup.found:
        return lookup.course
    if lookup.failure is LookupFailure.DEPARTMENT_NOT_FOUND and not collapse_failures:
        raise DepartmentNotFoundError(dept_code)
    raise CourseNotFoundError(str(course_code))


# ─── Index ───────────────────────────────────────────────────────

@router.get("/", response_class=PlainTextResponse)
@router.get("/index", response_class=PlainTextResponse)
@router.get("/home", response_class=PlainTextResponse)
async def index():
    """Usage hint for API clients."""
    return fmt.WELCOME_MESSAGE


# ─── Department queries ──────────────────────────────────────────

@router.get("/retrieveDept", response_class=PlainTextResponse)
async def retrieve_department(
    dept_code: str = Query(alias="deptCode"),
    store: RegistryStore = Depends(get_registry),
):
    return fmt.department_detail(_require_department(store, dept_code))


@router.get("/getMajorCountFromDept", response_class=PlainTextResponse)
async def get_major_count_from_department(
    dept_code: str = Query(alias="deptCode"),
    store: RegistryStore = Depends(get_registry),
):
    return fmt.major_count_sentence(_require_department(store, dept_code))


@router.get("/idDeptChair", response_class=PlainTextResponse)
async def identify_department_chair(
    dept_code: str = Query(alias="deptCode"),
    store: RegistryStore = Depends(get_registry),
):
    return fmt.department_chair_sentence(_require_department(store, dept_code))


# ─── Course queries ──────────────────────────────────────────────

@router.get("/retrieveCourse", response_class=PlainTextResponse)
async def retrieve_course(
    dept_code: str = Query(alias="deptCode"),
    course_code: int = Query(alias="courseCode"),
    store: RegistryStore = Depends(get_registry),
):
    return fmt.course_detail(_require_course(store, dept_code, course_code))


@router.get("/retrieveCourses", response_class=PlainTextResponse)
async def retrieve_courses(
    course_code: str = Query(alias="courseCode"),
    store: RegistryStore = Depends(get_registry),
):
    """Every department offering this course code."""
    matches = store.find_courses_by_code(course_code)
    if not matches:
        raise CourseCodeNotFoundError(course_code)
    return fmt.courses_by_code_detail(matches)


@router.get("/isCourseFull")
async def is_course_full(
    dept_code: str = Query(alias="deptCode"),
    course_code: int = Query(alias="courseCode"),
    store: RegistryStore = Depends(get_registry),
) -> bool:
    return _require_course(store, dept_code, course_code).is_course_full()


@router.get("/findCourseLocation", response_class=PlainTextResponse)
async def find_course_location(
    dept_code: str = Query(alias="deptCode"),
    course_code: int = Query(alias="courseCode"),
    store: RegistryStore = Depends(get_registry),
):
    course = _require_course(store, dept_code, course_code, collapse_failures=True)
    return fmt.course_location_sentence(course)


@router.get("/findCourseInstructor", response_class=PlainTextResponse)
async def find_course_instructor(
    dept_code: str = Query(alias="deptCode"),
    course_code: int = Query(alias="courseCode"),
    store: RegistryStore = Depends(get_registry),
):
    course = _require_course(store, dept_code, course_code, collapse_failures=True)
    return fmt.course_instructor_sentence(course)


@router.get("/findCourseTime", response_class=PlainTextResponse)
async def find_course_time(
    dept_code: str = Query(alias="deptCode"),
    course_code: int = Query(alias="courseCode"),
    store: RegistryStore = Depends(get_registry),
):
    course = _require_course(store, dept_code, course_code, collapse_failures=True)
    return fmt.course_time_sentence(course)


# ─── Department mutations ────────────────────────────────────────

@router.patch("/addMajorToDept", response_class=PlainTextResponse)
async def add_major_to_department(
    dept_code: str = Query(alias="deptCode"),
    store: RegistryStore = Depends(get_registry),
):
    department = _require_department(store, dept_code)
    outcome = department.add_person_to_major()
    logger.info(
        "Major count changed",
        extra={"dept_code": department.dept_code, "outcome": outcome.value},
    )
    return fmt.ATTRIBUTE_UPDATED


@router.patch("/removeMajorFromDept", response_class=PlainTextResponse)
async def remove_major_from_department(
    dept_code: str = Query(alias="deptCode"),
    store: RegistryStore = Depends(get_registry),
):
    department = _require_department(store, dept_code)
    outcome = department.drop_person_from_major()
    logger.info(
        "Major count changed",
        extra={"dept_code": department.dept_code, "outcome": outcome.value},
    )
    return fmt.ATTRIBUTE_UPDATED_OR_AT_MINIMUM


# ─── Enrollment ──────────────────────────────────────────────────

@router.patch("/enrollStudentInCourse", response_class=PlainTextResponse)
async def enroll_student_in_course(
    dept_code: str = Query(alias="deptCode"),
    course_code: int = Query(alias="courseCode"),
    store: RegistryStore = Depends(get_registry),
):
    course = _require_course(store, dept_code, course_code)
    if not course.enroll_student():
        logger.info(
            "Enrollment rejected: course full",
            extra={"dept_code": dept_code, "course_code": course_code},
        )
        return PlainTextResponse(fmt.STUDENT_NOT_ENROLLED, status_code=400)
    return fmt.STUDENT_ENROLLED


@router.patch("/dropStudentFromCourse", response_class=PlainTextResponse)
async def drop_student_from_course(
    dept_code: str = Query(alias="deptCode"),
    course_code: int = Query(alias="courseCode"),
    store: RegistryStore = Depends(get_registry),
):
    course = _require_course(store, dept_code, course_code)
    if not course.drop_student():
        return PlainTextResponse(fmt.STUDENT_NOT_DROPPED, status_code=400)
    return fmt.STUDENT_DROPPED


@router.patch("/setEnrollmentCount", response_class=PlainTextResponse)
async def set_enrollment_count(
    dept_code: str = Query(alias="deptCode"),
    course_code: int = Query(alias="courseCode"),
    count: int = Query(),
    store: RegistryStore = Depends(get_registry),
):
    """Administrative override: sets the count without checking capacity."""
    course = _require_course(store, dept_code, course_code, collapse_failures=True)
    course.set_enrolled_student_count(count)
    if count > course.enrollment_capacity or count < 0:
        logger.warning(
            f"Enrollment count set outside [0, {course.enrollment_capacity}]: {count}",
            extra={"dept_code": dept_code, "course_code": course_code},
        )
    return fmt.COURSE_ATTRIBUTE_UPDATED


# ─── Course field reassignment ───────────────────────────────────

@router.patch("/changeCourseTime", response_class=PlainTextResponse)
async def change_course_time(
    dept_code: str = Query(alias="deptCode"),
    course_code: int = Query(alias="courseCode"),
    time: str = Query(),
    store: RegistryStore = Depends(get_registry),
):
    course = _require_course(store, dept_code, course_code, collapse_failures=True)
    course.reassign_time(time)
    return fmt.COURSE_ATTRIBUTE_UPDATED


@router.patch("/changeCourseTeacher", response_class=PlainTextResponse)
async def change_course_teacher(
    dept_code: str = Query(alias="deptCode"),
    course_code: int = Query(alias="courseCode"),
    teacher: str = Query(),
    store: RegistryStore = Depends(get_registry),
):
    course = _require_course(store, dept_code, course_code, collapse_failures=True)
    course.reassign_instructor(teacher)
    return fmt.COURSE_ATTRIBUTE_UPDATED


@router.patch("/changeCourseLocation", response_class=PlainTextResponse)
async def change_course_location(
    dept_code: str = Query(alias="deptCode"),
    course_code: int = Query(alias="courseCode"),
    location: str = Query(),
    store: RegistryStore = Depends(get_registry),
):
    course = _require_course(store, dept_code, course_code, collapse_failures=True)
    course.reassign_location(location)
    return fmt.COURSE_ATTRIBUTE_UPDATED
