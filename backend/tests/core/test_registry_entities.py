"""Registry Entities — tests for the enrollment state machine and major counter.

Tests cover:
    - enroll/drop respect [0, capacity] and report success as bool
    - is_course_full tracks enrolled >= capacity in every reachable state
    - set_enrolled_student_count bypasses the capacity check
    - Field reassignment is unconditional
    - Major count floors at zero and reports a tri-state outcome
    - Concurrent enroll calls never overshoot capacity
    - String renderings used by the retrieve endpoints
"""

import random
import threading

from campus_api.core.domain_types import MajorCountChange
from campus_api.core.registry_entities import Course, Department


def _course(capacity: int = 2, enrolled: int = 0) -> Course:
    course = Course("Gail Kaiser", "501 NWC", "10:10-11:25", capacity)
    course.set_enrolled_student_count(enrolled)
    return course


# ─── enroll_student ──────────────────────────────────────────────

def test_new_course_starts_empty():
    course = Course("Adam Cannon", "417 IAB", "11:40-12:55", 400)
    assert course.enrolled_student_count == 0
    assert not course.is_course_full()


def test_enroll_increments_when_seat_free():
    course = _course(capacity=2, enrolled=1)
    assert course.enroll_student() is True
    assert course.enrolled_student_count == 2


def test_enroll_rejected_when_full_leaves_count_unchanged():
    course = _course(capacity=2, enrolled=2)
    assert course.enroll_student() is False
    assert course.enrolled_student_count == 2


def test_enroll_filling_last_seat_makes_course_full():
    course = _course(capacity=1)
    assert course.enroll_student() is True
    assert course.is_course_full()


def test_enroll_on_zero_capacity_course_rejected():
    course = _course(capacity=0)
    assert course.enroll_student() is False
    assert course.enrolled_student_count == 0


# ─── drop_student ────────────────────────────────────────────────

def test_drop_decrements_when_students_enrolled():
    course = _course(capacity=2, enrolled=2)
    assert course.drop_student() is True
    assert course.enrolled_student_count == 1
    assert not course.is_course_full()


def test_drop_at_zero_is_noop():
    course = _course(capacity=2, enrolled=0)
    assert course.drop_student() is False
    assert course.enrolled_student_count == 0


def test_full_then_drop_then_enroll_cycle():
    course = _course(capacity=2, enrolled=2)
    assert course.enroll_student() is False
    assert course.drop_student() is True
    assert course.enrolled_student_count == 1
    assert course.enroll_student() is True
    assert course.enrolled_student_count == 2


def test_random_enroll_drop_sequence_stays_within_bounds():
    rng = random.Random(4156)
    course = _course(capacity=5)
    for _ in range(500):
        if rng.random() < 0.5:
            course.enroll_student()
        else:
            course.drop_student()
        assert 0 <= course.enrolled_student_count <= course.enrollment_capacity
        assert course.is_course_full() == (
            course.enrolled_student_count >= course.enrollment_capacity
        )


# ─── set_enrolled_student_count (override) ───────────────────────

def test_override_can_exceed_capacity():
    course = _course(capacity=2)
    course.set_enrolled_student_count(10)
    assert course.enrolled_student_count == 10
    assert course.is_course_full()


def test_override_can_go_negative():
    course = _course(capacity=2)
    course.set_enrolled_student_count(-3)
    assert course.enrolled_student_count == -3
    assert course.drop_student() is False


def test_enroll_after_override_above_capacity_still_rejected():
    course = _course(capacity=2)
    course.set_enrolled_student_count(3)
    assert course.enroll_student() is False
    assert course.enrolled_student_count == 3


# ─── Reassignment ────────────────────────────────────────────────

def test_reassign_fields_overwrite_unconditionally():
    course = _course()
    course.reassign_instructor("Griffin Newbold")
    course.reassign_location("")
    course.reassign_time("not-a-time")
    assert course.instructor_name == "Griffin Newbold"
    assert course.course_location == ""
    assert course.course_time_slot == "not-a-time"


# ─── Department majors ───────────────────────────────────────────

def test_add_person_to_major_has_no_upper_bound():
    dept = Department("COMS", "Luca Carloni", number_of_majors=0)
    for _ in range(1000):
        assert dept.add_person_to_major() == MajorCountChange.INCREMENTED
    assert dept.number_of_majors == 1000


def test_drop_person_from_major_decrements():
    dept = Department("COMS", "Luca Carloni", number_of_majors=1)
    assert dept.drop_person_from_major() == MajorCountChange.DECREMENTED
    assert dept.number_of_majors == 0


def test_drop_person_from_major_floors_at_zero():
    dept = Department("COMS", "Luca Carloni", number_of_majors=2)
    outcomes = [dept.drop_person_from_major() for _ in range(5)]
    assert dept.number_of_majors == 0
    assert outcomes.count(MajorCountChange.DECREMENTED) == 2
    assert outcomes[2:] == [MajorCountChange.AT_MINIMUM] * 3


# ─── Concurrency ─────────────────────────────────────────────────

def test_concurrent_enrolls_never_exceed_capacity():
    course = _course(capacity=50)
    results: list[bool] = []
    results_lock = threading.Lock()
    start = threading.Barrier(20)

    def worker():
        start.wait()
        for _ in range(10):
            ok = course.enroll_student()
            with results_lock:
                results.append(ok)

    threads = [threading.Thread(target=worker) for _ in range(20)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert course.enrolled_student_count == 50
    assert results.count(True) == 50
    assert results.count(False) == 150


# ─── Renderings ──────────────────────────────────────────────────

def test_course_str():
    course = Course("Gail Kaiser", "501 NWC", "10:10-11:25", 120)
    assert str(course) == "\nInstructor: Gail Kaiser; Location: 501 NWC; Time: 10:10-11:25"


def test_department_str_lists_every_course():
    dept = Department("COMS", "Luca Carloni")
    dept.add_course("1004", Course("Adam Cannon", "417 IAB", "11:40-12:55", 400))
    dept.add_course("4156", Course("Gail Kaiser", "501 NWC", "10:10-11:25", 120))
    assert str(dept) == (
        "COMS 1004: \nInstructor: Adam Cannon; Location: 417 IAB; Time: 11:40-12:55\n"
        "COMS 4156: \nInstructor: Gail Kaiser; Location: 501 NWC; Time: 10:10-11:25\n"
    )


def test_department_get_course_is_exact_match():
    dept = Department("COMS", "Luca Carloni")
    dept.add_course("4156", _course())
    assert dept.get_course("4156") is not None
    assert dept.get_course("04156") is None
    assert dept.get_course("4156 ") is None
