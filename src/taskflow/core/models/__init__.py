"""TaskFlow Core Domain Models -- 公共类型导出

所有公共模型类型从此入口导入。
"""

from .bounded_set import BoundedOrderedSet
from .enums import (
    HIGH_PRIORITIES,
    PRIORITY_WEIGHTS,
    TERMINAL_STATES,
    VALID_TRANSITIONS,
    TaskPriority,
    TaskStatus,
    display_name,
    priority_weight,
    validate_transition,
)
from .project import Project
from .task import Task
from .user import User

__all__ = [
    # 枚举
    "TaskStatus",
    "TaskPriority",
    "PRIORITY_WEIGHTS",
    "HIGH_PRIORITIES",
    "priority_weight",
    "display_name",
    # 状态机
    "VALID_TRANSITIONS",
    "TERMINAL_STATES",
    "validate_transition",
    # 集合
    "BoundedOrderedSet",
    # 实体
    "User",
    "Task",
    "Project",
]
