"""
业务逻辑层（Service）包
"""
from .outcome import Outcome, Reason, Status
from .validator import ExistenceValidator
from .student_service import StudentService
from .college_service import CollegeService
from .course_service import CourseService
from .relationship_service import RelationshipService
from .report_service import ReportService
from .transaction import TransactionSession, TransactionState
from .seed_service import SeedService

__all__ = [
    'Outcome', 'Reason', 'Status',
    'ExistenceValidator',
    'StudentService', 'CollegeService', 'CourseService',
    'RelationshipService', 'ReportService',
    'TransactionSession', 'TransactionState',
    'SeedService',
]
