"""CLI 入口模块 -- python -m taskflow.core <command>

支持的命令：
  demo [--debug]  构建示例用户、项目与任务，输出渲染结果；--debug 同时输出集合拒绝事件
"""

import sys
from datetime import date, timedelta

import structlog

from .identity import ensure_identifier
from .logging_config import setup_logging
from .models import Project, Task, TaskPriority, User
from .rendering import render_members, render_project, render_task, render_tasks, render_user

log = structlog.get_logger()


def main() -> None:
    """CLI 主入口"""
    if len(sys.argv) < 2:
        print("用法: python -m taskflow.core <command>")
        print("命令:")
        print("  demo [--debug]  构建示例用户、项目与任务并输出")
        sys.exit(1)

    command = sys.argv[1]

    if command == "demo":
        if "--debug" in sys.argv[2:]:
            setup_logging(log_level="DEBUG", collection_debug=True)
        else:
            setup_logging()
        run_demo()
    else:
        print(f"未知命令: {command}")
        print("可用命令: demo")
        sys.exit(1)


def run_demo() -> None:
    """执行示例流程"""
    owner = User(username="alice", email="alice@example.com", full_name="Alice Liddell")
    member = User(username="bob", email="bob@example.com", full_name="Bob Builder")
    for user in (owner, member):
        ensure_identifier(user)

    project = Project(
        name="TaskFlow",
        description="示例项目",
        owner_id=owner.id,
    )
    project_id = ensure_identifier(project)
    project.add_member(owner.id)
    project.add_member(member.id)
    if not project.add_member(member.id):
        log.info("demo_duplicate_member_rejected", user_id=member.id)

    tasks = [
        Task(title="搭建仓库", description="初始化代码仓库"),
        Task(
            title="修复登录",
            description="登录页偶发 500",
            priority=TaskPriority.CRITICAL,
            due_date=date.today() + timedelta(days=3),
        ),
    ]
    for task in tasks:
        task_id = ensure_identifier(task)
        task.project_id = project_id
        project.add_task(task_id)

    tasks[0].assign_to(owner.id)
    tasks[0].mark_as_completed()
    tasks[1].assign_to(member.id)
    tasks[1].mark_as_in_progress()

    log.info(
        "demo_built",
        project_id=project_id,
        member_count=project.member_count,
        task_count=project.task_count,
    )

    for user in (owner, member):
        print(render_user(user))
    print(render_project(project))
    print(render_members(project))
    print(render_tasks(project))
    print()
    for task in tasks:
        print(render_task(task))


if __name__ == "__main__":
    main()
