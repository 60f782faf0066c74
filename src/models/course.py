"""
Course 数据模型
使用 SQLAlchemy ORM 定义
"""
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from . import Base


class Course(Base):
    """课程表"""
    __tablename__ = 'Courses'

    # 主键：由调用方指定
    id = Column('course_id', Integer, primary_key=True, autoincrement=False)

    # 基本信息
    name = Column('course_name', String(255), nullable=False)
    duration = Column('course_duration', Integer, nullable=False)

    # 关系：一对多 → CollegeCourse（哪些学院开设了这门课）
    college_courses = relationship(
        "CollegeCourse",
        back_populates="course",
        cascade="all, delete-orphan",  # 删除课程时自动删除开课记录
        passive_deletes=True
    )

    # 关系：一对多 → StudentCourse（选了这门课的学生）
    student_courses = relationship(
        "StudentCourse",
        back_populates="course",
        cascade="all, delete-orphan",  # 删除课程时自动删除选课记录
        passive_deletes=True
    )

    def __repr__(self):
        return f"<Course {self.id}: {self.name}>"

    def __str__(self):
        return f"ID: {self.id}, Name: {self.name}, Duration: {self.duration}"
