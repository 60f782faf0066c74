"""
Course 数据访问层
负责所有与 courses 表相关的数据库操作
"""
from models import Course


class CourseRepository:
    """Course 数据访问类"""

    def __init__(self, session):
        """
        初始化 Repository

        Args:
            session: SQLAlchemy 数据库会话
        """
        self.session = session

    def add(self, course):
        """
        插入课程（不提交）

        Args:
            course: Course 对象
        """
        self.session.add(course)
        self.session.flush()

    def get_by_id(self, course_id):
        """
        根据 ID 获取课程

        Args:
            course_id: 课程 ID

        Returns:
            Course 对象或 None
        """
        return self.session.get(Course, course_id)

    def get_all(self):
        """
        获取所有课程

        Returns:
            Course 对象列表
        """
        return self.session.query(Course).order_by(Course.id).all()

    def exists(self, course_id):
        """
        检查课程是否存在

        Args:
            course_id: 课程 ID

        Returns:
            bool: 是否存在
        """
        return self.session.query(Course.id).filter(Course.id == course_id).first() is not None

    def update_fields(self, course_id, values):
        """
        只更新给定的字段

        Args:
            course_id: 课程 ID
            values: {列属性: 新值}，如 {Course.name: "CS101"}

        Returns:
            int: 受影响行数
        """
        return self.session.query(Course).filter(
            Course.id == course_id
        ).update(values, synchronize_session='fetch')

    def delete(self, course_id):
        """
        删除课程（开课、选课记录由外键级联删除）

        Returns:
            int: 受影响行数
        """
        course = self.get_by_id(course_id)
        if course is None:
            return 0
        self.session.delete(course)
        self.session.flush()
        return 1

    def count(self):
        """
        获取课程总数

        Returns:
            int: 课程数量
        """
        return self.session.query(Course).count()
