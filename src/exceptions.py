"""
异常定义

校验失败（ID 已存在 / 不存在等）不抛异常，而是以 Outcome 返回；
这里只定义需要越过操作边界传播的错误。
"""


class EnrollmentError(Exception):
    """本项目所有异常的基类"""


class ConfigurationError(EnrollmentError):
    """数据库配置不完整"""


class StoreFault(EnrollmentError):
    """
    数据库故障（连接断开、未被校验器拦住的约束冲突等）

    由 TransactionSession 在回滚并关闭会话后抛出，对会话是致命的。
    """

    def __init__(self, operation, cause):
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation} 执行失败: {cause}")


class SessionClosedError(EnrollmentError):
    """会话已因致命错误或显式关闭而不可用"""


class SeedDataError(EnrollmentError):
    """种子数据文件未通过 schema 校验"""

    def __init__(self, path, errors):
        self.path = path
        self.errors = list(errors)
        details = '\n'.join(self.errors)
        super().__init__(f"YAML 文件校验失败：{path}\n{details}")
