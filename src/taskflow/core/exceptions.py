"""TaskFlow Core 异常体系

容量已满、重复添加、元素不存在均为正常结果（返回 False），不使用异常。
异常仅用于编程错误与显式的严格状态流转。
"""


class TaskflowError(Exception):
    """TaskFlow Core 基础异常"""


class InvalidTransitionError(TaskflowError):
    """任务状态流转不在允许列表中

    仅由 Task.transition_to() 抛出；mark_as_* 系列方法保持无条件覆盖。
    """

    def __init__(self, from_status: str, to_status: str) -> None:
        """
        Args:
            from_status: 当前状态
            to_status: 目标状态
        """
        super().__init__(f"非法状态流转: {from_status} -> {to_status}")
        self.from_status = from_status
        self.to_status = to_status
