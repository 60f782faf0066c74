"""
CollegeCourse 数据模型
college 和 course 的多对多关联表（学院开设课程）
"""
from sqlalchemy import Column, Integer, ForeignKey, PrimaryKeyConstraint
from sqlalchemy.orm import relationship
from . import Base


class CollegeCourse(Base):
    """学院-课程关联表"""
    __tablename__ = 'CollegeCourses'

    college_id = Column(
        Integer,
        ForeignKey('College.college_id', ondelete='CASCADE'),
        nullable=False
    )
    course_id = Column(
        Integer,
        ForeignKey('Courses.course_id', ondelete='CASCADE'),
        nullable=False
    )

    # 关系
    college = relationship("College", back_populates="college_courses")
    course = relationship("Course", back_populates="college_courses")

    __table_args__ = (
        PrimaryKeyConstraint('college_id', 'course_id'),
    )

    def __repr__(self):
        return f"<CollegeCourse {self.college_id} → {self.course_id}>"
