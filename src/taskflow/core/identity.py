"""标识符签发

实体可以不带 id 构造（partial identity），持久化前由此处签发 ULID。
"""

from typing import Protocol

import structlog
from ulid import ULID

log = structlog.get_logger()


class Identifiable(Protocol):
    id: str | None


def new_identifier() -> str:
    """生成新的 ULID 字符串标识符"""
    return str(ULID())


def ensure_identifier(entity: Identifiable) -> str:
    """为尚未分配 id 的实体签发标识符，已有 id 时原样返回"""
    if entity.id is None:
        entity.id = new_identifier()
        log.debug(
            "identifier_assigned",
            entity_type=type(entity).__name__,
            entity_id=entity.id,
        )
    return entity.id
