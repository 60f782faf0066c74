"""
College 数据访问层
负责所有与 colleges 表相关的数据库操作
"""
from sqlalchemy import func
from models import College, CollegeCourse, Course, Student


class CollegeRepository:
    """College 数据访问类"""

    def __init__(self, session):
        """
        Args:
            session: SQLAlchemy 数据库会话
        """
        self.session = session

    def add(self, college):
        """插入学院（不提交）"""
        self.session.add(college)
        self.session.flush()

    def get_by_id(self, college_id):
        """根据 ID 获取学院，不存在返回 None"""
        return self.session.get(College, college_id)

    def get_all(self):
        """获取所有学院"""
        return self.session.query(College).order_by(College.id).all()

    def exists(self, college_id):
        """检查学院是否存在"""
        return self.session.query(College.id).filter(College.id == college_id).first() is not None

    def update_fields(self, college_id, values):
        """
        只更新给定的字段

        Args:
            college_id: 学院 ID
            values: {列属性: 新值}

        Returns:
            int: 受影响行数
        """
        return self.session.query(College).filter(
            College.id == college_id
        ).update(values, synchronize_session='fetch')

    def clear_student_choices(self, college_id):
        """
        清空所有选择了该学院的学生志愿

        Returns:
            int: 被清空的学生数量
        """
        return self.session.query(Student).filter(
            Student.college_choice == college_id
        ).update({Student.college_choice: None}, synchronize_session='fetch')

    def delete(self, college_id):
        """
        删除学院（开课记录由外键级联删除）

        Returns:
            int: 受影响行数
        """
        college = self.get_by_id(college_id)
        if college is None:
            return 0
        self.session.delete(college)
        self.session.flush()
        return 1

    def get_students(self, college_id):
        """获取志愿为该学院的所有学生"""
        return self.session.query(Student).filter(
            Student.college_choice == college_id
        ).order_by(Student.id).all()

    def get_courses(self, college_id):
        """获取该学院开设的所有课程"""
        return self.session.query(Course).join(
            CollegeCourse, CollegeCourse.course_id == Course.id
        ).filter(
            CollegeCourse.college_id == college_id
        ).order_by(Course.id).all()

    def count(self):
        """获取学院总数"""
        return self.session.query(func.count(College.id)).scalar()
