"""配置常量模块 -- 可通过环境变量覆盖

包含项目成员/任务容量上限与日志配置。
"""

import os

import structlog

log = structlog.get_logger()

DEFAULT_MAX_PROJECT_MEMBERS = 50
DEFAULT_MAX_PROJECT_TASKS = 100


def _positive_int_from_env(env_var: str, default: int) -> int:
    """读取正整数环境变量，非法值回退默认值"""
    val = os.environ.get(env_var)
    if not val:
        return default
    try:
        parsed = int(val)
    except ValueError:
        parsed = 0
    if parsed < 1:
        log.warning(
            "invalid_capacity_config",
            env_var=env_var,
            value=val,
            fallback=default,
        )
        # 使用默认值，不阻塞启动
        return default
    return parsed


def get_max_project_members() -> int:
    """获取单个项目的成员容量上限"""
    return _positive_int_from_env(
        "TASKFLOW_MAX_PROJECT_MEMBERS", DEFAULT_MAX_PROJECT_MEMBERS
    )


def get_max_project_tasks() -> int:
    """获取单个项目的任务容量上限"""
    return _positive_int_from_env(
        "TASKFLOW_MAX_PROJECT_TASKS", DEFAULT_MAX_PROJECT_TASKS
    )


def get_log_format() -> str:
    """获取日志渲染模式（dev / json）"""
    return os.environ.get("TASKFLOW_LOG_FORMAT", "dev")


def get_log_level() -> str:
    """获取日志级别"""
    return os.environ.get("TASKFLOW_LOG_LEVEL", "INFO")
