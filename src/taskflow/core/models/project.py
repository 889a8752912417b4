"""Project Domain Model

元数据 + 两个 BoundedOrderedSet（成员、任务）组成的聚合。
成员/任务操作直接委托给对应集合；不对 User/Task 实体做引用完整性校验。
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, computed_field

from ..config import get_max_project_members, get_max_project_tasks
from .bounded_set import BoundedOrderedSet


class Project(BaseModel):
    """Project 数据模型

    每个 Project 独占自己的成员集合与任务集合，拷贝时不共享。
    model_dump() 通过 member_ids / task_ids 输出集合内容（只读）；
    model_validate() 不会从这两个字段恢复集合，需要调用方逐个 add_member / add_task。
    """

    model_config = ConfigDict(validate_assignment=True)

    id: str | None = Field(default=None, description="唯一标识；None 表示尚未分配")
    name: str = Field(description="项目名称")
    description: str = Field(default="", description="项目描述")
    owner_id: str | None = Field(default=None, description="所有者用户 ID（不校验）")

    _members: BoundedOrderedSet[str] = PrivateAttr()
    _tasks: BoundedOrderedSet[str] = PrivateAttr()

    def model_post_init(self, __context: Any) -> None:
        self._members = BoundedOrderedSet(get_max_project_members())
        self._tasks = BoundedOrderedSet(get_max_project_tasks())

    def __copy__(self) -> "Project":
        # BaseModel.__copy__ 浅拷贝私有属性，会共享集合；model_copy(deep=False) 也走这里
        copied = super().__copy__()
        copied._members = self._members.copy()
        copied._tasks = self._tasks.copy()
        return copied

    # 只读视图

    @computed_field  # type: ignore[prop-decorator]
    @property
    def member_ids(self) -> tuple[str, ...]:
        return tuple(self._members.to_list())

    @computed_field  # type: ignore[prop-decorator]
    @property
    def task_ids(self) -> tuple[str, ...]:
        return tuple(self._tasks.to_list())

    @property
    def member_count(self) -> int:
        return self._members.count

    @property
    def task_count(self) -> int:
        return self._tasks.count

    @property
    def max_members(self) -> int:
        return self._members.capacity

    @property
    def max_tasks(self) -> int:
        return self._tasks.capacity

    # 成员

    def add_member(self, user_id: str) -> bool:
        """添加成员；已满或已是成员时返回 False"""
        return self._members.add(user_id)

    def remove_member(self, user_id: str) -> bool:
        """移除成员；非成员时返回 False"""
        return self._members.remove(user_id)

    def is_member(self, user_id: str) -> bool:
        return self._members.contains(user_id)

    def has_members(self) -> bool:
        return not self._members.is_empty()

    # 任务

    def add_task(self, task_id: str) -> bool:
        """添加任务；已满或已存在时返回 False"""
        return self._tasks.add(task_id)

    def remove_task(self, task_id: str) -> bool:
        return self._tasks.remove(task_id)

    def has_task(self, task_id: str) -> bool:
        return self._tasks.contains(task_id)

    def has_tasks(self) -> bool:
        return not self._tasks.is_empty()

    def __str__(self) -> str:
        return (
            f"Project{{id='{self.id}', name='{self.name}', ownerId='{self.owner_id}', "
            f"members={self.member_count}, tasks={self.task_count}}}"
        )
