"""Task Domain Model

可变记录 + 便捷判断方法。状态与指派由调用方直接覆盖；
需要严格流转校验时使用 transition_to()。
"""

from datetime import date

import structlog
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..exceptions import InvalidTransitionError
from .enums import HIGH_PRIORITIES, TaskPriority, TaskStatus, validate_transition

log = structlog.get_logger()


class Task(BaseModel):
    """Task 数据模型

    assigned_to_user_id / project_id 为 None 表示未指派 / 不属于任何项目；
    空字符串在校验时归一为 None。
    project_id 与 Project.task_ids 的一致性由调用方维护。
    """

    model_config = ConfigDict(validate_assignment=True)

    id: str | None = Field(default=None, description="唯一标识；None 表示尚未分配")
    title: str = Field(description="任务标题")
    description: str = Field(default="", description="任务描述")
    status: TaskStatus = Field(default=TaskStatus.TODO, description="当前状态")
    priority: TaskPriority = Field(default=TaskPriority.MEDIUM, description="优先级")
    assigned_to_user_id: str | None = Field(default=None, description="指派用户 ID")
    project_id: str | None = Field(default=None, description="所属项目 ID")
    due_date: date | None = Field(default=None, description="截止日期（无时间、无时区）")

    @field_validator("assigned_to_user_id", "project_id", mode="before")
    @classmethod
    def _blank_reference_to_none(cls, value: str | None) -> str | None:
        if value == "":
            return None
        return value

    def is_assigned(self) -> bool:
        return self.assigned_to_user_id is not None and self.assigned_to_user_id != ""

    def is_completed(self) -> bool:
        return self.status == TaskStatus.COMPLETED

    def is_high_priority(self) -> bool:
        return self.priority in HIGH_PRIORITIES

    def mark_as_completed(self) -> None:
        """无条件覆盖为 COMPLETED（不做流转校验）"""
        self.status = TaskStatus.COMPLETED

    def mark_as_in_progress(self) -> None:
        """无条件覆盖为 IN_PROGRESS（不做流转校验）"""
        self.status = TaskStatus.IN_PROGRESS

    def transition_to(self, to_status: TaskStatus) -> None:
        """按 VALID_TRANSITIONS 严格流转

        Raises:
            InvalidTransitionError: 流转不在允许列表中，状态保持不变
        """
        to_status = TaskStatus(to_status)
        from_status = self.status
        if not validate_transition(from_status, to_status):
            raise InvalidTransitionError(from_status, to_status)
        self.status = to_status
        log.info(
            "task_status_transition",
            task_id=self.id,
            from_status=str(from_status),
            to_status=str(to_status),
        )

    def assign_to(self, user_id: str | None) -> None:
        self.assigned_to_user_id = user_id

    def unassign(self) -> None:
        self.assigned_to_user_id = None

    def __str__(self) -> str:
        return (
            f"Task{{id='{self.id}', title='{self.title}', status={self.status}, "
            f"priority={self.priority}, assignedTo='{self.assigned_to_user_id}'}}"
        )
