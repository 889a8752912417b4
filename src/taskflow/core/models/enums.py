"""枚举定义

包含 TaskStatus、TaskPriority 枚举，优先级权重与展示名映射，
以及可选启用的 VALID_TRANSITIONS 状态流转允许列表和 TERMINAL_STATES 终态集合。
"""

from enum import StrEnum


class TaskStatus(StrEnum):
    """Task 生命周期状态"""

    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"

    @property
    def display_name(self) -> str:
        return display_name(self)


class TaskPriority(StrEnum):
    """Task 优先级，按权重全序：LOW < MEDIUM < HIGH < CRITICAL"""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"

    @property
    def weight(self) -> int:
        return priority_weight(self)

    @property
    def display_name(self) -> str:
        return display_name(self)

    def is_higher_than(self, other: "TaskPriority") -> bool:
        """本优先级权重是否严格高于 other"""
        return priority_weight(self) > priority_weight(other)


# 权重仅用于排序比较
PRIORITY_WEIGHTS: dict[TaskPriority, int] = {
    TaskPriority.LOW: 1,
    TaskPriority.MEDIUM: 2,
    TaskPriority.HIGH: 3,
    TaskPriority.CRITICAL: 4,
}

HIGH_PRIORITIES: frozenset[TaskPriority] = frozenset(
    {TaskPriority.HIGH, TaskPriority.CRITICAL}
)

# 严格模式下的合法状态流转（Task.transition_to 使用）
VALID_TRANSITIONS: dict[TaskStatus, set[TaskStatus]] = {
    TaskStatus.TODO: {
        TaskStatus.IN_PROGRESS,
        TaskStatus.COMPLETED,
        TaskStatus.CANCELLED,
    },
    TaskStatus.IN_PROGRESS: {
        TaskStatus.TODO,
        TaskStatus.COMPLETED,
        TaskStatus.CANCELLED,
    },
    # 终态不可再流转
    TaskStatus.COMPLETED: set(),
    TaskStatus.CANCELLED: set(),
}

TERMINAL_STATES: set[TaskStatus] = {
    TaskStatus.COMPLETED,
    TaskStatus.CANCELLED,
}


def priority_weight(priority: TaskPriority) -> int:
    """优先级 -> 权重（1-4）"""
    return PRIORITY_WEIGHTS[TaskPriority(priority)]


def display_name(member: StrEnum) -> str:
    """枚举 -> 展示名

    下划线替换为空格，首字母大写、其余小写，例如 IN_PROGRESS -> "In progress"。
    """
    name = member.name.replace("_", " ")
    return name[:1].upper() + name[1:].lower()


def validate_transition(from_status: TaskStatus, to_status: TaskStatus) -> bool:
    """验证状态流转是否合法

    Args:
        from_status: 当前状态
        to_status: 目标状态

    Returns:
        True 如果流转合法，否则 False
    """
    allowed = VALID_TRANSITIONS.get(from_status, set())
    return to_status in allowed
