"""
StudentCourse 数据模型
student 和 course 的多对多关联表（学生选课）
"""
from sqlalchemy import Column, Integer, ForeignKey, PrimaryKeyConstraint
from sqlalchemy.orm import relationship
from . import Base


class StudentCourse(Base):
    """学生-课程关联表"""
    __tablename__ = 'StudentCourses'

    student_id = Column(
        Integer,
        ForeignKey('Student.student_id', ondelete='CASCADE'),
        nullable=False
    )
    course_id = Column(
        Integer,
        ForeignKey('Courses.course_id', ondelete='CASCADE'),
        nullable=False
    )

    # 关系
    student = relationship("Student", back_populates="student_courses")
    course = relationship("Course", back_populates="student_courses")

    __table_args__ = (
        PrimaryKeyConstraint('student_id', 'course_id'),
    )

    def __repr__(self):
        return f"<StudentCourse {self.student_id} → {self.course_id}>"
