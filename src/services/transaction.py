"""
事务会话

整个客户端运行期间只有一个 TransactionSession，持有一个 SQLAlchemy Session
和其中唯一的未提交事务。提交 / 回滚完全由调用方决定，与单个操作的成败无关：

  OPEN ──commit()──▶ COMMITTED ──下一个操作──▶ OPEN
  OPEN ──rollback()─▶ ROLLED_BACK ──下一个操作──▶ OPEN
  任意状态 ──数据库故障 / close()──▶ CLOSED（终态）

操作中出现数据库故障（SQLAlchemyError）时立即回滚、关闭会话并抛出 StoreFault。
"""
import enum
import logging
from sqlalchemy.exc import SQLAlchemyError
from exceptions import SessionClosedError, StoreFault
from .college_service import CollegeService
from .course_service import CourseService
from .outcome import Outcome
from .relationship_service import RelationshipService
from .report_service import ReportService
from .student_service import StudentService

logger = logging.getLogger(__name__)


class TransactionState(enum.Enum):
    OPEN = 'open'
    COMMITTED = 'committed'
    ROLLED_BACK = 'rolled_back'
    CLOSED = 'closed'


class TransactionSession:
    """调用方控制提交点的长事务会话"""

    def __init__(self, session, strict_offering=False):
        """
        Args:
            session: SQLAlchemy 数据库会话（由 Database.get_session() 创建）
            strict_offering: 传给 RelationshipService，见其说明
        """
        self.session = session
        self.state = TransactionState.OPEN
        self.pending_changes = 0

        self.students = StudentService(session)
        self.colleges = CollegeService(session)
        self.courses = CourseService(session)
        self.relationships = RelationshipService(session, strict_offering=strict_offering)
        self.reports = ReportService(session)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        # 未提交的修改在关闭时丢弃
        self.close()

    @property
    def closed(self):
        return self.state is TransactionState.CLOSED

    def _ensure_open(self):
        if self.closed:
            raise SessionClosedError("会话已关闭，无法继续操作")

    def run(self, operation, *args, **kwargs):
        """
        执行一个写操作

        校验失败以 REJECTED 的 Outcome 返回，不影响事务，也不计入 pending_changes；
        数据库故障会回滚当前事务、关闭会话，并抛出 StoreFault。

        Args:
            operation: 业务方法，如 self.students.add_student

        Returns:
            Outcome
        """
        self._ensure_open()
        name = getattr(operation, '__name__', repr(operation))
        try:
            outcome = operation(*args, **kwargs)
        except SQLAlchemyError as e:
            logger.exception("%s 执行失败，回滚并关闭会话", name)
            self._abort()
            raise StoreFault(name, e) from e

        self.state = TransactionState.OPEN
        if outcome.changed:
            self.pending_changes += 1
        return outcome

    def read(self, operation, *args, **kwargs):
        """
        执行一个只读查询

        查询失败只返回 ERROR 的 Outcome，不回滚。
        """
        self._ensure_open()
        try:
            return operation(*args, **kwargs)
        except SQLAlchemyError as e:
            logger.exception("查询 %s 失败", getattr(operation, '__name__', repr(operation)))
            return Outcome.error(f"查询失败: {e}")

    def commit(self):
        """持久化上次提交以来的所有修改"""
        self._ensure_open()
        try:
            self.session.commit()
        except SQLAlchemyError as e:
            logger.exception("提交失败，回滚并关闭会话")
            self._abort()
            raise StoreFault('commit', e) from e

        logger.info("已提交 %d 个操作", self.pending_changes)
        self.state = TransactionState.COMMITTED
        self.pending_changes = 0

    def rollback(self):
        """丢弃上次提交以来的所有修改"""
        self._ensure_open()
        try:
            self.session.rollback()
        except SQLAlchemyError as e:
            logger.exception("回滚失败，关闭会话")
            self._abort()
            raise StoreFault('rollback', e) from e

        logger.info("已回滚 %d 个操作", self.pending_changes)
        self.state = TransactionState.ROLLED_BACK
        self.pending_changes = 0

    def close(self):
        """关闭会话；未提交的修改被丢弃"""
        if self.closed:
            return
        if self.pending_changes:
            logger.info("关闭会话，丢弃 %d 个未提交的操作", self.pending_changes)
        self.session.close()
        self.state = TransactionState.CLOSED

    def _abort(self):
        try:
            self.session.rollback()
        except SQLAlchemyError:
            logger.exception("故障后回滚失败")
        finally:
            self.session.close()
            self.state = TransactionState.CLOSED
