"""
操作结果

每个业务操作都返回一个 Outcome，而不是直接打印到控制台：
  - OK:        执行成功（可能带有提示性 warnings）
  - REJECTED:  校验未通过（ID 已存在 / 不存在 / 关联已存在等）；
               partial=True 表示被拒绝前已有修改写入会话
  - ERROR:     只读查询失败，不触发回滚
"""
import enum
from dataclasses import dataclass, field
from typing import Any, List, Optional


class Status(enum.Enum):
    OK = 'ok'
    REJECTED = 'rejected'
    ERROR = 'error'


class Reason(enum.Enum):
    """校验失败原因"""
    ALREADY_EXISTS = 'already_exists'
    NOT_FOUND = 'not_found'
    ASSOCIATION_EXISTS = 'association_exists'
    ASSOCIATION_NOT_FOUND = 'association_not_found'
    NO_UPDATES = 'no_updates'
    COURSE_NOT_OFFERED = 'course_not_offered'


@dataclass
class Outcome:
    status: Status
    message: str
    reason: Optional[Reason] = None
    data: Any = None
    warnings: List[str] = field(default_factory=list)
    partial: bool = False

    @property
    def ok(self):
        return self.status is Status.OK

    @property
    def rejected(self):
        return self.status is Status.REJECTED

    @property
    def changed(self):
        """会话中是否留下了未提交的修改"""
        return self.ok or self.partial

    @classmethod
    def success(cls, message, data=None, warnings=None):
        return cls(Status.OK, message, data=data, warnings=list(warnings or []))

    @classmethod
    def reject(cls, reason, message, warnings=None, partial=False):
        return cls(Status.REJECTED, message, reason=reason,
                   warnings=list(warnings or []), partial=partial)

    @classmethod
    def error(cls, message):
        return cls(Status.ERROR, message)

    def __str__(self):
        return self.message
