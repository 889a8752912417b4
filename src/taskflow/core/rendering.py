"""文本渲染 -- 实体状态 -> 字符串

纯函数，只读取实体状态，不做 I/O、不修改实体。
"""

from .models.project import Project
from .models.task import Task
from .models.user import User


def render_user(user: User) -> str:
    return (
        "=== User Information ===\n"
        f"ID: {user.id}\n"
        f"Username: {user.username}\n"
        f"Full Name: {user.full_name}\n"
        f"Email: {user.email}\n"
        "========================\n"
    )


def render_task(task: Task) -> str:
    """任务详情；未指派、无项目、无截止日期分别显示占位文本"""
    assigned = task.assigned_to_user_id if task.is_assigned() else "Unassigned"
    project = task.project_id if task.project_id is not None else "None"
    due_date = task.due_date.isoformat() if task.due_date is not None else "Not set"
    return (
        "=== Task Information ===\n"
        f"ID: {task.id}\n"
        f"Title: {task.title}\n"
        f"Description: {task.description}\n"
        f"Status: {task.status.display_name}\n"
        f"Priority: {task.priority.display_name}\n"
        f"Assigned To: {assigned}\n"
        f"Project: {project}\n"
        f"Due Date: {due_date}\n"
        "========================\n"
    )


def render_project(project: Project) -> str:
    return (
        "=== Project Information ===\n"
        f"ID: {project.id}\n"
        f"Name: {project.name}\n"
        f"Description: {project.description}\n"
        f"Owner: {project.owner_id}\n"
        f"Members: {project.member_count}/{project.max_members}\n"
        f"Tasks: {project.task_count}/{project.max_tasks}\n"
        "===========================\n"
    )


def _render_id_list(header: str, empty_text: str, ids: tuple[str, ...]) -> str:
    if not ids:
        return empty_text
    lines = [header, *(f"  - {item}" for item in ids)]
    return "\n".join(lines)


def render_members(project: Project) -> str:
    return _render_id_list(
        "Project Members:", "No members in this project.", project.member_ids
    )


def render_tasks(project: Project) -> str:
    return _render_id_list(
        "Project Tasks:", "No tasks in this project.", project.task_ids
    )
