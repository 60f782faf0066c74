"""
数据模型包
"""
from sqlalchemy.orm import declarative_base

# 创建 ORM 基类
Base = declarative_base()

# 导出所有模型 — 实体
from .college import College
from .course import Course
from .student import Student

# 导出所有模型 — 关联表
from .college_course import CollegeCourse
from .student_course import StudentCourse

__all__ = [
    'Base',
    # 实体
    'College',
    'Course',
    'Student',
    # 关联表
    'CollegeCourse',
    'StudentCourse',
]
