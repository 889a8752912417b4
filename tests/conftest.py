"""全局 pytest 配置 -- 领域实体 fixture"""

import pytest
from taskflow.core.models import Project, Task, TaskPriority, User


@pytest.fixture(autouse=True)
def _default_capacities(monkeypatch: pytest.MonkeyPatch) -> None:
    """清除容量相关环境变量，确保使用默认容量"""
    monkeypatch.delenv("TASKFLOW_MAX_PROJECT_MEMBERS", raising=False)
    monkeypatch.delenv("TASKFLOW_MAX_PROJECT_TASKS", raising=False)


@pytest.fixture
def owner() -> User:
    return User(id="u1", username="alice", email="alice@example.com", full_name="Alice")


@pytest.fixture
def project(owner: User) -> Project:
    return Project(id="p1", name="TaskFlow", description="测试项目", owner_id=owner.id)


@pytest.fixture
def task() -> Task:
    return Task(id="t1", title="写测试", description="补齐单元测试")


@pytest.fixture
def urgent_task() -> Task:
    return Task(title="线上故障", description="登录 500", priority=TaskPriority.CRITICAL)
