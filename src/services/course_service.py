"""
Course 业务逻辑服务
"""
import logging
from models import Course
from repositories import CourseRepository
from .common import already_exists, no_updates, not_found, supplied_fields
from .outcome import Outcome
from .validator import ExistenceValidator

logger = logging.getLogger(__name__)


class CourseService:
    """课程业务逻辑类"""

    def __init__(self, session):
        """
        Args:
            session: SQLAlchemy 数据库会话
        """
        self.repository = CourseRepository(session)
        self.validator = ExistenceValidator(session)

    def add_course(self, course_id, name, duration):
        """
        新增课程

        Args:
            course_id: 课程 ID（调用方指定，必须唯一）
            name: 课程名称
            duration: 课程时长

        Returns:
            Outcome
        """
        if self.validator.course_exists(course_id):
            return already_exists("课程", course_id)

        course = Course(id=course_id, name=name, duration=duration)
        self.repository.add(course)
        logger.info("新增课程 %s (%s)", course_id, name)
        return Outcome.success("课程添加成功！", data=course)

    def delete_course(self, course_id):
        """删除课程，开课与选课记录随之级联删除"""
        if not self.validator.course_exists(course_id):
            return not_found("课程", course_id)

        self.repository.delete(course_id)
        logger.info("删除课程 %s", course_id)
        return Outcome.success("课程删除成功！")

    def update_course_details(self, course_id, name=None, duration=None):
        """
        更新课程信息，只写入提供了值的字段

        Args:
            course_id: 课程 ID
            name: 新名称，None 表示不修改
            duration: 新时长，None 表示不修改

        Returns:
            Outcome
        """
        if not self.validator.course_exists(course_id):
            return not_found("课程", course_id)

        updates = supplied_fields({Course.name: name, Course.duration: duration})
        if not updates:
            return no_updates("课程", course_id)

        self.repository.update_fields(course_id, updates)
        logger.info("更新课程 %s: %s", course_id, sorted(c.key for c in updates))
        return Outcome.success("课程信息更新成功！")
