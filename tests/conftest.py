import pytest

from database import Database
from models import Base
from services import TransactionSession


@pytest.fixture
def db():
    database = Database(url="sqlite://", echo=False)
    Base.metadata.create_all(database.engine)
    yield database
    database.dispose()


@pytest.fixture
def tx(db):
    with TransactionSession(db.get_session()) as session:
        yield session


@pytest.fixture
def campus(tx):
    """学院 1 开设课程 5；学生 10 的志愿为学院 1；课程 6 没有学院开设"""
    tx.run(tx.colleges.add_college, 1, "Tech", 1000)
    tx.run(tx.courses.add_course, 5, "CS101", 4)
    tx.run(tx.courses.add_course, 6, "ART110", 2)
    tx.run(tx.students.add_student, 10, "Amy", 20, 1)
    tx.run(tx.relationships.offer_course_at_college, 1, 5)
    tx.commit()
    return tx
