"""
业务层公共工具
"""
import logging
from .outcome import Outcome, Reason

logger = logging.getLogger(__name__)


def supplied_fields(values):
    """
    过滤出调用方实际提供的字段

    None 表示“未提供，跳过该字段”；0 和空字符串都是合法的新值。

    Args:
        values: {列属性: 新值或 None}

    Returns:
        dict: 只包含提供了新值的字段
    """
    return {column: value for column, value in values.items() if value is not None}


def not_found(entity, key):
    logger.info("%s %s 不存在", entity, key)
    return Outcome.reject(Reason.NOT_FOUND, f"{entity} {key} 不存在")


def already_exists(entity, key):
    logger.info("%s %s 已存在", entity, key)
    return Outcome.reject(Reason.ALREADY_EXISTS, f"{entity} ID {key} 已存在")


def no_updates(entity, key):
    logger.info("%s %s 未提供任何更新字段", entity, key)
    return Outcome.reject(Reason.NO_UPDATES, "未提供任何更新内容")
