"""
存在性校验器

每个写操作在执行前都要先过一遍这里的检查。
每种实体一个固定的查询方法，不接受表名 / 列名参数。
"""
from repositories import (
    StudentRepository, CollegeRepository, CourseRepository,
    OfferingRepository, EnrollmentRepository
)


class ExistenceValidator:
    """按实体类型划分的存在性检查，只读"""

    def __init__(self, session):
        """
        Args:
            session: SQLAlchemy 数据库会话
        """
        self.students = StudentRepository(session)
        self.colleges = CollegeRepository(session)
        self.courses = CourseRepository(session)
        self.offerings = OfferingRepository(session)
        self.enrollments = EnrollmentRepository(session)

    def student_exists(self, student_id):
        return self.students.exists(student_id)

    def college_exists(self, college_id):
        return self.colleges.exists(college_id)

    def course_exists(self, course_id):
        return self.courses.exists(course_id)

    def offering_exists(self, college_id, course_id):
        """学院 college_id 是否开设了课程 course_id"""
        return self.offerings.exists(college_id, course_id)

    def enrollment_exists(self, student_id, course_id):
        """学生 student_id 是否已选课程 course_id"""
        return self.enrollments.exists(student_id, course_id)
