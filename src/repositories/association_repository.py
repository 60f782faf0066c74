"""
关联表数据访问层
  - OfferingRepository: CollegeCourses（学院开设课程）
  - EnrollmentRepository: StudentCourses（学生选课）
"""
from sqlalchemy import func
from models import CollegeCourse, StudentCourse


class OfferingRepository:
    """学院-课程关联数据访问类"""

    def __init__(self, session):
        self.session = session

    def exists(self, college_id, course_id):
        """检查学院是否已开设该课程"""
        return self.session.query(CollegeCourse).filter(
            CollegeCourse.college_id == college_id,
            CollegeCourse.course_id == course_id
        ).first() is not None

    def add(self, college_id, course_id):
        """插入开课记录（不提交）"""
        self.session.add(CollegeCourse(college_id=college_id, course_id=course_id))
        self.session.flush()

    def delete(self, college_id, course_id):
        """
        删除开课记录

        Returns:
            int: 受影响行数，0 表示记录不存在
        """
        return self.session.query(CollegeCourse).filter(
            CollegeCourse.college_id == college_id,
            CollegeCourse.course_id == course_id
        ).delete(synchronize_session='fetch')

    def count(self):
        return self.session.query(func.count()).select_from(CollegeCourse).scalar()


class EnrollmentRepository:
    """学生-课程关联数据访问类"""

    def __init__(self, session):
        self.session = session

    def exists(self, student_id, course_id):
        """检查学生是否已选该课程"""
        return self.session.query(StudentCourse).filter(
            StudentCourse.student_id == student_id,
            StudentCourse.course_id == course_id
        ).first() is not None

    def add(self, student_id, course_id):
        """插入选课记录（不提交）"""
        self.session.add(StudentCourse(student_id=student_id, course_id=course_id))
        self.session.flush()

    def delete(self, student_id, course_id):
        """
        删除选课记录

        Returns:
            int: 受影响行数，0 表示记录不存在
        """
        return self.session.query(StudentCourse).filter(
            StudentCourse.student_id == student_id,
            StudentCourse.course_id == course_id
        ).delete(synchronize_session='fetch')

    def count(self):
        return self.session.query(func.count()).select_from(StudentCourse).scalar()
