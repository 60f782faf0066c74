"""
College 业务逻辑服务
"""
import logging
from models import College
from repositories import CollegeRepository
from .common import already_exists, no_updates, not_found, supplied_fields
from .outcome import Outcome
from .validator import ExistenceValidator

logger = logging.getLogger(__name__)


class CollegeService:
    """学院业务逻辑类"""

    def __init__(self, session):
        """
        Args:
            session: SQLAlchemy 数据库会话
        """
        self.repository = CollegeRepository(session)
        self.validator = ExistenceValidator(session)

    def add_college(self, college_id, name, fees):
        """
        新增学院

        Args:
            college_id: 学院 ID（调用方指定，必须唯一）
            name: 学院名称
            fees: 学费（整数）

        Returns:
            Outcome
        """
        if self.validator.college_exists(college_id):
            return already_exists("学院", college_id)

        college = College(id=college_id, name=name, fees=fees)
        self.repository.add(college)
        logger.info("新增学院 %s (%s)", college_id, name)
        return Outcome.success("学院添加成功！", data=college)

    def delete_college(self, college_id):
        """
        删除学院

        流程：
        1. 校验学院存在
        2. 清空所有以该学院为志愿的学生的 college_choice
        3. 删除学院（CollegeCourses 由外键级联删除）

        Returns:
            Outcome，data 为被清空志愿的学生数量
        """
        if not self.validator.college_exists(college_id):
            return not_found("学院", college_id)

        cleared = self.repository.clear_student_choices(college_id)
        self.repository.delete(college_id)
        logger.info("删除学院 %s，清空 %d 名学生的志愿", college_id, cleared)

        message = "学院删除成功！"
        if cleared:
            message += f"（已清空 {cleared} 名学生的学院志愿）"
        return Outcome.success(message, data=cleared)

    def update_college_details(self, college_id, name=None, fees=None):
        """
        更新学院信息，只写入提供了值的字段

        Args:
            college_id: 学院 ID
            name: 新名称，None 表示不修改
            fees: 新学费，None 表示不修改（0 是合法学费）

        Returns:
            Outcome
        """
        if not self.validator.college_exists(college_id):
            return not_found("学院", college_id)

        updates = supplied_fields({College.name: name, College.fees: fees})
        if not updates:
            return no_updates("学院", college_id)

        self.repository.update_fields(college_id, updates)
        logger.info("更新学院 %s: %s", college_id, sorted(c.key for c in updates))
        return Outcome.success("学院信息更新成功！")

    def update_college_fee(self, college_id, fees):
        """只更新学费"""
        outcome = self.update_college_details(college_id, fees=fees)
        if outcome.ok:
            outcome.message = "学费更新成功！"
        return outcome
