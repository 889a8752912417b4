"""structlog 配置模块

dev 模式：pretty print 可读输出
json 模式：结构化 JSON 输出

集合拒绝事件（bounded_set_*_rejected）是 debug 级别的正常结果，
单独挂在 taskflow.core.models.bounded_set logger 上；即使全局为 DEBUG，
也只有 collection_debug=True 时才输出。
"""

import logging
from typing import TextIO

import structlog

from .config import get_log_format, get_log_level

COLLECTION_LOGGER = "taskflow.core.models.bounded_set"


def _build_renderer(log_format: str, stream: TextIO | None) -> structlog.types.Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer(ensure_ascii=False)
    colors = bool(stream is not None and stream.isatty())
    return structlog.dev.ConsoleRenderer(colors=colors)


def setup_logging(
    log_format: str | None = None,
    log_level: str | None = None,
    stream: TextIO | None = None,
    collection_debug: bool = False,
) -> None:
    """初始化 structlog 配置

    Args:
        log_format: "json" 或 "dev"；None 时读取 TASKFLOW_LOG_FORMAT
        log_level: 日志级别名；None 时读取 TASKFLOW_LOG_LEVEL，无法识别时为 INFO
        stream: 输出流；None 时为 stderr
        collection_debug: 是否输出集合拒绝事件（需同时 log_level=DEBUG）
    """
    log_format = log_format or get_log_format()
    level = getattr(logging, (log_level or get_log_level()).upper(), logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO

    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if log_format == "json":
        pre_chain.append(structlog.processors.format_exc_info)

    structlog.configure(
        processors=[
            # 先按级别过滤，被丢弃的 debug 事件不再经过后续处理器
            structlog.stdlib.filter_by_level,
            *pre_chain,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=_build_renderer(log_format, stream),
            foreign_pre_chain=pre_chain,
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    logging.getLogger(COLLECTION_LOGGER).setLevel(
        logging.NOTSET if collection_debug else max(level, logging.INFO)
    )
