"""
Student 业务逻辑服务
包括学生的增删改，以及学院志愿（college_choice）的设置
"""
import logging
from models import Student
from repositories import StudentRepository
from .college_service import CollegeService
from .common import already_exists, no_updates, not_found, supplied_fields
from .outcome import Outcome
from .validator import ExistenceValidator

logger = logging.getLogger(__name__)


class StudentService:
    """学生业务逻辑类"""

    def __init__(self, session):
        """
        Args:
            session: SQLAlchemy 数据库会话
        """
        self.repository = StudentRepository(session)
        self.validator = ExistenceValidator(session)
        self.college_service = CollegeService(session)

    def add_student(self, student_id, name, age, college_choice=None):
        """
        新增学生

        Args:
            student_id: 学生 ID（调用方指定，必须唯一）
            name: 姓名
            age: 年龄
            college_choice: 学院志愿 ID，None 表示暂不选择

        Returns:
            Outcome
        """
        if self.validator.student_exists(student_id):
            return already_exists("学生", student_id)
        if college_choice is not None and not self.validator.college_exists(college_choice):
            return not_found("学院", college_choice)

        student = Student(id=student_id, name=name, age=age, college_choice=college_choice)
        self.repository.add(student)
        logger.info("新增学生 %s (%s)，志愿学院: %s", student_id, name, college_choice)
        return Outcome.success("学生添加成功！", data=student)

    def delete_student(self, student_id):
        """删除学生，选课记录随之级联删除"""
        if not self.validator.student_exists(student_id):
            return not_found("学生", student_id)

        self.repository.delete(student_id)
        logger.info("删除学生 %s", student_id)
        return Outcome.success("学生删除成功！")

    def update_student_details(self, student_id, name=None, age=None):
        """
        更新学生信息，只写入提供了值的字段

        Args:
            student_id: 学生 ID
            name: 新姓名，None 表示不修改
            age: 新年龄，None 表示不修改

        Returns:
            Outcome
        """
        if not self.validator.student_exists(student_id):
            return not_found("学生", student_id)

        updates = supplied_fields({Student.name: name, Student.age: age})
        if not updates:
            return no_updates("学生", student_id)

        self.repository.update_fields(student_id, updates)
        logger.info("更新学生 %s: %s", student_id, sorted(c.key for c in updates))
        return Outcome.success("学生信息更新成功！")

    def set_college_choice(self, student_id, college_id):
        """
        设置学生的学院志愿

        Args:
            student_id: 学生 ID
            college_id: 学院 ID；None 表示清空志愿（不校验学院）

        Returns:
            Outcome
        """
        if not self.validator.student_exists(student_id):
            return not_found("学生", student_id)
        if college_id is not None and not self.validator.college_exists(college_id):
            return not_found("学院", college_id)

        self.repository.update_fields(student_id, {Student.college_choice: college_id})
        if college_id is None:
            logger.info("清空学生 %s 的学院志愿", student_id)
            return Outcome.success("已将学生移出学院！")

        logger.info("学生 %s 的学院志愿设为 %s", student_id, college_id)
        return Outcome.success("学院志愿更新成功！")

    def clear_college_choice(self, student_id):
        """将学生移出学院（志愿置空）"""
        return self.set_college_choice(student_id, None)

    def add_college_then_assign_student(self, college_id, name, fees, student_id):
        """
        新建学院，并把学生的志愿改为这个新学院

        两步共用同一个事务：如果学生不存在，操作在学院创建之后终止，
        新学院仍处于未提交状态，由调用方决定提交还是回滚。

        Args:
            college_id: 新学院 ID
            name: 新学院名称
            fees: 新学院学费
            student_id: 要分配的学生 ID

        Returns:
            Outcome
        """
        outcome = self.college_service.add_college(college_id, name, fees)
        if not outcome.ok:
            return outcome

        if not self.validator.student_exists(student_id):
            rejected = not_found("学生", student_id)
            rejected.message += f"（学院 {college_id} 已创建，尚未提交）"
            rejected.partial = True
            return rejected

        self.repository.update_fields(student_id, {Student.college_choice: college_id})
        logger.info("新建学院 %s 并分配学生 %s", college_id, student_id)
        return Outcome.success("新学院已创建，学生志愿已更新为该学院！")
