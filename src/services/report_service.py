"""
查询与报表服务（只读）

列表类查询不做存在性校验；按学院 / 学生查询时若对象不存在返回 NOT_FOUND。
"""
from repositories import (
    StudentRepository, CollegeRepository, CourseRepository,
    OfferingRepository, EnrollmentRepository
)
from .common import not_found
from .outcome import Outcome


class ReportService:
    """只读查询与统计报表"""

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

    def list_students(self):
        return Outcome.success("所有学生：", data=self.students.get_all())

    def list_colleges(self):
        return Outcome.success("所有学院：", data=self.colleges.get_all())

    def list_courses(self):
        return Outcome.success("所有课程：", data=self.courses.get_all())

    def search_students_by_name(self, fragment):
        """按姓名片段搜索学生"""
        return Outcome.success("搜索结果：", data=self.students.search_by_name(fragment))

    def students_of_college(self, college_id):
        """志愿为某学院的所有学生"""
        if not self.colleges.exists(college_id):
            return not_found("学院", college_id)
        return Outcome.success(
            f"学院 {college_id} 的学生：", data=self.colleges.get_students(college_id)
        )

    def courses_of_college(self, college_id):
        """某学院开设的所有课程"""
        if not self.colleges.exists(college_id):
            return not_found("学院", college_id)
        return Outcome.success(
            f"学院 {college_id} 开设的课程：", data=self.colleges.get_courses(college_id)
        )

    def enrolled_courses_of_student(self, student_id):
        """某学生已选的所有课程"""
        if not self.students.exists(student_id):
            return not_found("学生", student_id)
        return Outcome.success(
            f"学生 {student_id} 已选课程：", data=self.students.get_enrolled_courses(student_id)
        )

    def students_per_college(self):
        """
        报表：各学院学生人数

        Returns:
            Outcome，data 为 [{'college_id': ..., 'student_count': ...}, ...]
        """
        rows = [
            {'college_id': college_id, 'student_count': count}
            for college_id, count in self.students.count_by_college()
        ]
        return Outcome.success("各学院学生人数报表：", data=rows)

    def average_age_per_college(self):
        """
        报表：各学院学生平均年龄

        Returns:
            Outcome，data 为 [{'college_id': ..., 'avg_age': float}, ...]
        """
        rows = [
            {'college_id': college_id, 'avg_age': avg_age}
            for college_id, avg_age in self.students.average_age_by_college()
        ]
        return Outcome.success("各学院学生平均年龄报表：", data=rows)

    def dangling_college_choices(self):
        """完整性检查：志愿指向不存在学院的学生"""
        return Outcome.success(
            "志愿学院不存在的学生：", data=self.students.get_dangling_college_choices()
        )

    def table_counts(self):
        """各表行数"""
        return Outcome.success("各表行数：", data={
            'Student': self.students.count(),
            'College': self.colleges.count(),
            'Courses': self.courses.count(),
            'CollegeCourses': self.offerings.count(),
            'StudentCourses': self.enrollments.count(),
        })
