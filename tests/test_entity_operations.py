import pytest

from models import College, Course, Student
from services import Reason, Status


ADD_CASES = [
    ("students", "add_student", (10, "Amy", 20), Student),
    ("colleges", "add_college", (1, "Tech", 1000), College),
    ("courses", "add_course", (5, "CS101", 4), Course),
]

DELETE_CASES = [
    ("students", "delete_student"),
    ("colleges", "delete_college"),
    ("courses", "delete_course"),
]


def _operation(tx, service, name):
    return getattr(getattr(tx, service), name)


@pytest.mark.parametrize("service, name, args, model", ADD_CASES)
def test_duplicate_add_is_rejected_and_keeps_one_row(tx, service, name, args, model):
    first = tx.run(_operation(tx, service, name), *args)
    second = tx.run(_operation(tx, service, name), *args)

    assert first.ok
    assert second.status is Status.REJECTED
    assert second.reason is Reason.ALREADY_EXISTS
    assert tx.session.query(model).filter(model.id == args[0]).count() == 1


@pytest.mark.parametrize("service, name", DELETE_CASES)
def test_delete_missing_key_is_rejected(campus, service, name):
    tx = campus
    before = (
        tx.session.query(Student).count(),
        tx.session.query(College).count(),
        tx.session.query(Course).count(),
    )

    outcome = tx.run(_operation(tx, service, name), 999)

    assert outcome.reason is Reason.NOT_FOUND
    after = (
        tx.session.query(Student).count(),
        tx.session.query(College).count(),
        tx.session.query(Course).count(),
    )
    assert before == after


def test_add_student_with_unknown_college_is_rejected(tx):
    outcome = tx.run(tx.students.add_student, 10, "Amy", 20, 42)

    assert outcome.reason is Reason.NOT_FOUND
    assert tx.session.get(Student, 10) is None


def test_add_student_without_college_choice(tx):
    outcome = tx.run(tx.students.add_student, 11, "Ben", 22)

    assert outcome.ok
    assert tx.session.get(Student, 11).college_choice is None


def test_set_college_choice_to_unknown_college_keeps_reference(campus):
    tx = campus
    outcome = tx.run(tx.students.set_college_choice, 10, 77)

    assert outcome.reason is Reason.NOT_FOUND
    assert tx.session.get(Student, 10).college_choice == 1


def test_set_college_choice_for_unknown_student(campus):
    outcome = campus.run(campus.students.set_college_choice, 99, 1)

    assert outcome.reason is Reason.NOT_FOUND


def test_set_and_clear_college_choice(campus):
    tx = campus
    tx.run(tx.colleges.add_college, 2, "Arts", 800)

    assert tx.run(tx.students.set_college_choice, 10, 2).ok
    assert tx.session.get(Student, 10).college_choice == 2

    assert tx.run(tx.students.clear_college_choice, 10).ok
    assert tx.session.get(Student, 10).college_choice is None


def test_update_without_fields_reports_no_updates(campus):
    tx = campus
    outcome = tx.run(tx.students.update_student_details, 10)

    assert outcome.reason is Reason.NO_UPDATES
    student = tx.session.get(Student, 10)
    assert (student.name, student.age) == ("Amy", 20)


def test_update_single_field_changes_only_that_field(campus):
    tx = campus
    assert tx.run(tx.students.update_student_details, 10, age=21).ok

    student = tx.session.get(Student, 10)
    assert student.age == 21
    assert student.name == "Amy"


def test_update_course_accepts_zero_and_empty_values(campus):
    tx = campus
    assert tx.run(tx.courses.update_course_details, 5, name="", duration=0).ok

    course = tx.session.get(Course, 5)
    assert course.name == ""
    assert course.duration == 0


def test_update_missing_entity_is_rejected(tx):
    outcome = tx.run(tx.courses.update_course_details, 5, name="CS102")

    assert outcome.reason is Reason.NOT_FOUND


def test_update_college_fee(campus):
    tx = campus
    assert tx.run(tx.colleges.update_college_fee, 1, 1500).ok

    college = tx.session.get(College, 1)
    assert college.fees == 1500
    assert college.name == "Tech"


def test_delete_college_clears_student_choice_and_offerings(campus):
    tx = campus
    outcome = tx.run(tx.colleges.delete_college, 1)

    assert outcome.ok
    assert outcome.data == 1
    assert tx.session.get(Student, 10).college_choice is None
    assert not tx.relationships.validator.offering_exists(1, 5)


def test_delete_course_cascades_to_associations(campus):
    tx = campus
    tx.run(tx.relationships.enroll_student_in_course, 10, 5)

    assert tx.run(tx.courses.delete_course, 5).ok
    assert not tx.relationships.validator.offering_exists(1, 5)
    assert not tx.relationships.validator.enrollment_exists(10, 5)


def test_delete_student_cascades_to_enrollments(campus):
    tx = campus
    tx.run(tx.relationships.enroll_student_in_course, 10, 5)

    assert tx.run(tx.students.delete_student, 10).ok
    assert not tx.relationships.validator.enrollment_exists(10, 5)


def test_add_college_then_assign_student(campus):
    tx = campus
    outcome = tx.run(tx.students.add_college_then_assign_student, 2, "Arts", 800, 10)

    assert outcome.ok
    assert tx.session.get(College, 2) is not None
    assert tx.session.get(Student, 10).college_choice == 2


def test_add_college_then_assign_unknown_student_keeps_new_college(campus):
    tx = campus
    outcome = tx.run(tx.students.add_college_then_assign_student, 2, "Arts", 800, 99)

    assert outcome.reason is Reason.NOT_FOUND
    assert tx.session.get(College, 2) is not None

    tx.rollback()
    assert tx.session.get(College, 2) is None


def test_add_college_then_assign_stops_when_college_exists(campus):
    tx = campus
    tx.run(tx.colleges.add_college, 2, "Arts", 800)
    tx.run(tx.students.set_college_choice, 10, 2)

    outcome = tx.run(tx.students.add_college_then_assign_student, 1, "Tech", 1000, 10)

    assert outcome.reason is Reason.ALREADY_EXISTS
    assert tx.session.get(Student, 10).college_choice == 2
