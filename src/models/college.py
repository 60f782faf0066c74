"""
College 数据模型
"""
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from . import Base


class College(Base):
    """学院表"""
    __tablename__ = 'College'

    # 主键：由调用方指定，不自增
    id = Column('college_id', Integer, primary_key=True, autoincrement=False)
    name = Column('college_name', String(255), nullable=False)
    fees = Column('college_fees', Integer, nullable=False)

    # 关系
    college_courses = relationship(
        "CollegeCourse",
        back_populates="college",
        cascade="all, delete-orphan",  # 删除学院时级联删除开课记录
        passive_deletes=True
    )
    students = relationship("Student", back_populates="college", passive_deletes=True)

    def __repr__(self):
        return f"<College {self.id}: {self.name}>"

    def __str__(self):
        return f"ID: {self.id}, Name: {self.name}, Fees: {self.fees}"
