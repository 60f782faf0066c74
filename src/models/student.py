"""
Student 数据模型
表示学生及其（可选的）学院志愿

college_choice 说明：
  - 数据库层：外键 ON DELETE SET NULL，删除学院时清空志愿
  - 应用层：写入前由 ExistenceValidator 校验学院存在
"""
from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from . import Base


class Student(Base):
    """学生表"""
    __tablename__ = 'Student'

    # 主键：由调用方指定
    id = Column('student_id', Integer, primary_key=True, autoincrement=False)

    # 个人信息
    name = Column('student_name', String(255), nullable=False)
    age = Column('student_age', Integer, nullable=False)

    # 学院志愿：可为空（未选择学院）
    college_choice = Column(
        'college_id_choice',
        Integer,
        ForeignKey('College.college_id', ondelete='SET NULL'),
        nullable=True,
        index=True
    )

    # 关系
    college = relationship("College", back_populates="students")
    student_courses = relationship(
        "StudentCourse",
        back_populates="student",
        cascade="all, delete-orphan",  # 删除学生时级联删除选课记录
        passive_deletes=True
    )

    def __repr__(self):
        return f"<Student {self.id}: {self.name}>"

    def __str__(self):
        return (
            f"ID: {self.id}, Name: {self.name}, Age: {self.age}, "
            f"College: {self.college_choice}"
        )
