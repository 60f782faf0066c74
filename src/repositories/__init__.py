"""
数据访问层（Repository）包

Repository 只执行语句并 flush，从不 commit / rollback：
事务边界由 services.transaction.TransactionSession 决定。
"""
from .student_repository import StudentRepository
from .college_repository import CollegeRepository
from .course_repository import CourseRepository
from .association_repository import OfferingRepository, EnrollmentRepository

__all__ = [
    'StudentRepository',
    'CollegeRepository',
    'CourseRepository',
    'OfferingRepository',
    'EnrollmentRepository',
]
