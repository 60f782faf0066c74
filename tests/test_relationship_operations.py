from models import CollegeCourse, StudentCourse
from services import Reason, RelationshipService, TransactionSession
from services.relationship_service import NOT_OFFERED_WARNING


def _offering_rows(tx, college_id, course_id):
    return tx.session.query(CollegeCourse).filter_by(
        college_id=college_id, course_id=course_id
    ).count()


def _enrollment_rows(tx, student_id, course_id):
    return tx.session.query(StudentCourse).filter_by(
        student_id=student_id, course_id=course_id
    ).count()


def test_offer_course_twice_keeps_one_row(campus):
    tx = campus
    outcome = tx.run(tx.relationships.offer_course_at_college, 1, 5)

    assert outcome.reason is Reason.ASSOCIATION_EXISTS
    assert _offering_rows(tx, 1, 5) == 1


def test_offer_course_requires_both_endpoints(campus):
    tx = campus

    assert tx.run(tx.relationships.offer_course_at_college, 9, 5).reason is Reason.NOT_FOUND
    assert tx.run(tx.relationships.offer_course_at_college, 1, 9).reason is Reason.NOT_FOUND
    assert _offering_rows(tx, 9, 5) == 0


def test_withdraw_course_from_college(campus):
    tx = campus

    assert tx.run(tx.relationships.withdraw_course_from_college, 1, 5).ok
    assert _offering_rows(tx, 1, 5) == 0

    again = tx.run(tx.relationships.withdraw_course_from_college, 1, 5)
    assert again.reason is Reason.ASSOCIATION_NOT_FOUND


def test_withdraw_course_requires_both_endpoints(campus):
    tx = campus

    assert tx.run(tx.relationships.withdraw_course_from_college, 9, 5).reason is Reason.NOT_FOUND
    assert tx.run(tx.relationships.withdraw_course_from_college, 1, 9).reason is Reason.NOT_FOUND
    assert _offering_rows(tx, 1, 5) == 1


def test_enroll_in_offered_course_has_no_warning(campus):
    tx = campus
    outcome = tx.run(tx.relationships.enroll_student_in_course, 10, 5)

    assert outcome.ok
    assert outcome.warnings == []
    assert _enrollment_rows(tx, 10, 5) == 1


def test_enroll_in_unoffered_course_warns_but_succeeds(campus):
    tx = campus
    outcome = tx.run(tx.relationships.enroll_student_in_course, 10, 6)

    assert outcome.ok
    assert outcome.warnings == [NOT_OFFERED_WARNING]
    assert _enrollment_rows(tx, 10, 6) == 1


def test_enroll_student_without_college_choice_warns(campus):
    tx = campus
    tx.run(tx.students.add_student, 11, "Ben", 22)

    outcome = tx.run(tx.relationships.enroll_student_in_course, 11, 5)

    assert outcome.ok
    assert outcome.warnings == [NOT_OFFERED_WARNING]


def test_duplicate_enrollment_is_rejected(campus):
    tx = campus
    tx.run(tx.relationships.enroll_student_in_course, 10, 5)

    outcome = tx.run(tx.relationships.enroll_student_in_course, 10, 5)

    assert outcome.reason is Reason.ASSOCIATION_EXISTS
    assert _enrollment_rows(tx, 10, 5) == 1


def test_duplicate_unoffered_enrollment_keeps_warning(campus):
    tx = campus
    tx.run(tx.relationships.enroll_student_in_course, 10, 6)

    outcome = tx.run(tx.relationships.enroll_student_in_course, 10, 6)

    assert outcome.reason is Reason.ASSOCIATION_EXISTS
    assert outcome.warnings == [NOT_OFFERED_WARNING]


def test_enroll_requires_existing_student_and_course(campus):
    tx = campus

    assert tx.run(tx.relationships.enroll_student_in_course, 99, 5).reason is Reason.NOT_FOUND
    assert tx.run(tx.relationships.enroll_student_in_course, 10, 99).reason is Reason.NOT_FOUND


def test_unenroll_requires_existing_student_and_course(campus):
    tx = campus
    tx.run(tx.relationships.enroll_student_in_course, 10, 5)

    assert tx.run(tx.relationships.unenroll_student_from_course, 99, 5).reason is Reason.NOT_FOUND
    assert tx.run(tx.relationships.unenroll_student_from_course, 10, 99).reason is Reason.NOT_FOUND
    assert _enrollment_rows(tx, 10, 5) == 1


def test_enroll_then_unenroll_leaves_no_rows(campus):
    tx = campus
    tx.run(tx.relationships.enroll_student_in_course, 10, 5)

    assert tx.run(tx.relationships.unenroll_student_from_course, 10, 5).ok
    assert _enrollment_rows(tx, 10, 5) == 0


def test_unenroll_absent_pair_reports_not_found(campus):
    tx = campus
    outcome = tx.run(tx.relationships.unenroll_student_from_course, 10, 5)

    assert outcome.reason is Reason.ASSOCIATION_NOT_FOUND
    assert _enrollment_rows(tx, 10, 5) == 0


def test_strict_offering_rejects_unoffered_course(db):
    with TransactionSession(db.get_session(), strict_offering=True) as tx:
        tx.run(tx.colleges.add_college, 1, "Tech", 1000)
        tx.run(tx.courses.add_course, 6, "ART110", 2)
        tx.run(tx.students.add_student, 10, "Amy", 20, 1)

        outcome = tx.run(tx.relationships.enroll_student_in_course, 10, 6)

        assert outcome.reason is Reason.COURSE_NOT_OFFERED
        assert _enrollment_rows(tx, 10, 6) == 0


def test_relationship_service_defaults_to_advisory_mode(db):
    session = db.get_session()
    try:
        assert RelationshipService(session).strict_offering is False
    finally:
        session.close()
