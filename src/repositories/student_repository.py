"""
Student 数据访问层
负责所有与 students 表相关的数据库操作，包括按学院分组的统计
"""
from sqlalchemy import func
from models import College, Course, Student, StudentCourse


class StudentRepository:
    """Student 数据访问类"""

    def __init__(self, session):
        """
        Args:
            session: SQLAlchemy 数据库会话
        """
        self.session = session

    def add(self, student):
        """插入学生（不提交）"""
        self.session.add(student)
        self.session.flush()

    def get_by_id(self, student_id):
        """根据 ID 获取学生，不存在返回 None"""
        return self.session.get(Student, student_id)

    def get_all(self):
        """获取所有学生"""
        return self.session.query(Student).order_by(Student.id).all()

    def exists(self, student_id):
        """检查学生是否存在"""
        return self.session.query(Student.id).filter(Student.id == student_id).first() is not None

    def update_fields(self, student_id, values):
        """
        只更新给定的字段

        Args:
            student_id: 学生 ID
            values: {列属性: 新值}，如 {Student.age: 21}

        Returns:
            int: 受影响行数
        """
        return self.session.query(Student).filter(
            Student.id == student_id
        ).update(values, synchronize_session='fetch')

    def delete(self, student_id):
        """
        删除学生（选课记录由外键级联删除）

        Returns:
            int: 受影响行数
        """
        student = self.get_by_id(student_id)
        if student is None:
            return 0
        self.session.delete(student)
        self.session.flush()
        return 1

    def search_by_name(self, fragment):
        """
        按姓名模糊搜索（LIKE '%fragment%'，通配符会被转义）

        大小写是否敏感取决于数据库的 collation。
        """
        return self.session.query(Student).filter(
            Student.name.contains(fragment, autoescape=True)
        ).order_by(Student.id).all()

    def get_enrolled_courses(self, student_id):
        """获取学生已选的所有课程"""
        return self.session.query(Course).join(
            StudentCourse, StudentCourse.course_id == Course.id
        ).filter(
            StudentCourse.student_id == student_id
        ).order_by(Course.id).all()

    def count_by_college(self):
        """
        按学院志愿统计学生数量（不含未选择学院的学生）

        Returns:
            list: [(college_id, student_count), ...]
        """
        results = self.session.query(
            Student.college_choice,
            func.count(Student.id).label('num_students')
        ).filter(
            Student.college_choice.isnot(None)
        ).group_by(
            Student.college_choice
        ).order_by(
            Student.college_choice
        ).all()

        return [(college_id, count) for college_id, count in results]

    def average_age_by_college(self):
        """
        按学院志愿统计平均年龄（不含未选择学院的学生）

        Returns:
            list: [(college_id, avg_age), ...]，avg_age 为 float
        """
        results = self.session.query(
            Student.college_choice,
            func.avg(Student.age).label('avg_age')
        ).filter(
            Student.college_choice.isnot(None)
        ).group_by(
            Student.college_choice
        ).order_by(
            Student.college_choice
        ).all()

        # MySQL 的 AVG 返回 Decimal
        return [(college_id, float(avg_age)) for college_id, avg_age in results]

    def get_dangling_college_choices(self):
        """
        查找 college_choice 指向不存在学院的学生

        数据库若未声明 ON DELETE SET NULL，删除学院后会留下这类记录。
        """
        return self.session.query(Student).outerjoin(
            College, College.id == Student.college_choice
        ).filter(
            Student.college_choice.isnot(None),
            College.id.is_(None)
        ).order_by(Student.id).all()

    def count(self):
        """获取学生总数"""
        return self.session.query(func.count(Student.id)).scalar()
