"""
关联关系业务逻辑服务
  - 学院开课：offer_course_at_college / withdraw_course_from_college
  - 学生选课：enroll_student_in_course / unenroll_student_from_course

两端实体必须存在（硬性条件）；选课时“课程是否由学生志愿学院开设”
默认只给出警告，strict_offering=True 时改为拒绝。
"""
import logging
from repositories import OfferingRepository, EnrollmentRepository, StudentRepository
from .common import not_found
from .outcome import Outcome, Reason
from .validator import ExistenceValidator

logger = logging.getLogger(__name__)

NOT_OFFERED_WARNING = "警告：该课程可能不在学生志愿学院的开课列表中。"


class RelationshipService:
    """学院-课程、学生-课程关联的业务逻辑类"""

    def __init__(self, session, strict_offering=False):
        """
        Args:
            session: SQLAlchemy 数据库会话
            strict_offering: 为 True 时，拒绝选修志愿学院未开设的课程
        """
        self.offerings = OfferingRepository(session)
        self.enrollments = EnrollmentRepository(session)
        self.students = StudentRepository(session)
        self.validator = ExistenceValidator(session)
        self.strict_offering = strict_offering

    def _check_college_and_course(self, college_id, course_id):
        if not self.validator.college_exists(college_id):
            return not_found("学院", college_id)
        if not self.validator.course_exists(course_id):
            return not_found("课程", course_id)
        return None

    def _check_student_and_course(self, student_id, course_id):
        if not self.validator.student_exists(student_id):
            return not_found("学生", student_id)
        if not self.validator.course_exists(course_id):
            return not_found("课程", course_id)
        return None

    def offer_course_at_college(self, college_id, course_id):
        """
        学院开设课程（重复开设会被拒绝，不报错）

        Returns:
            Outcome
        """
        rejected = self._check_college_and_course(college_id, course_id)
        if rejected:
            return rejected

        if self.validator.offering_exists(college_id, course_id):
            logger.info("学院 %s 已开设课程 %s", college_id, course_id)
            return Outcome.reject(Reason.ASSOCIATION_EXISTS, "该课程已添加到学院")

        self.offerings.add(college_id, course_id)
        logger.info("学院 %s 开设课程 %s", college_id, course_id)
        return Outcome.success("课程已成功添加到学院！")

    def withdraw_course_from_college(self, college_id, course_id):
        """学院撤销课程"""
        rejected = self._check_college_and_course(college_id, course_id)
        if rejected:
            return rejected

        if self.offerings.delete(college_id, course_id) == 0:
            logger.info("学院 %s 未开设课程 %s", college_id, course_id)
            return Outcome.reject(Reason.ASSOCIATION_NOT_FOUND, "未找到该开课记录")

        logger.info("学院 %s 撤销课程 %s", college_id, course_id)
        return Outcome.success("已从学院移除该课程！")

    def enroll_student_in_course(self, student_id, course_id):
        """
        学生选课

        流程：
        1. 校验学生、课程存在
        2. 检查志愿学院是否开设该课程（默认只警告）
        3. 检查是否已选（重复选课会被拒绝）
        4. 插入选课记录

        Returns:
            Outcome，未开设时 warnings 中带有提示
        """
        rejected = self._check_student_and_course(student_id, course_id)
        if rejected:
            return rejected

        warnings = []
        if not self._offered_by_chosen_college(student_id, course_id):
            if self.strict_offering:
                logger.info("拒绝选课：学生 %s 的志愿学院未开设课程 %s", student_id, course_id)
                return Outcome.reject(
                    Reason.COURSE_NOT_OFFERED, "学生志愿学院未开设该课程，无法选课"
                )
            logger.warning("学生 %s 选修的课程 %s 不在志愿学院开课列表中", student_id, course_id)
            warnings.append(NOT_OFFERED_WARNING)

        if self.validator.enrollment_exists(student_id, course_id):
            logger.info("学生 %s 已选课程 %s", student_id, course_id)
            return Outcome.reject(
                Reason.ASSOCIATION_EXISTS, "学生已选过该课程", warnings=warnings
            )

        self.enrollments.add(student_id, course_id)
        logger.info("学生 %s 选课 %s", student_id, course_id)
        return Outcome.success("选课成功！", warnings=warnings)

    def unenroll_student_from_course(self, student_id, course_id):
        """学生退课"""
        rejected = self._check_student_and_course(student_id, course_id)
        if rejected:
            return rejected

        if self.enrollments.delete(student_id, course_id) == 0:
            logger.info("学生 %s 未选课程 %s", student_id, course_id)
            return Outcome.reject(Reason.ASSOCIATION_NOT_FOUND, "未找到该选课记录")

        logger.info("学生 %s 退课 %s", student_id, course_id)
        return Outcome.success("退课成功！")

    def _offered_by_chosen_college(self, student_id, course_id):
        """学生的志愿学院是否开设了该课程；没有志愿视为未开设"""
        student = self.students.get_by_id(student_id)
        if student is None or student.college_choice is None:
            return False
        return self.validator.offering_exists(student.college_choice, course_id)
