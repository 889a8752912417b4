"""BoundedOrderedSet -- 有界、保持插入顺序、无重复的标识符集合

Project 用它维护成员与任务标识符。容量在构造时固定；
容量已满、重复添加、删除不存在元素都是正常结果，通过 bool 返回值表达。
成员判断采用线性扫描（容量不超过百级）。
"""

from collections.abc import Iterator
from typing import Generic, TypeVar

import structlog

T = TypeVar("T")


def _log_rejection(event: str, **kw: object) -> None:
    """记录拒绝事件；structlog 未配置时不输出

    structlog 默认配置不过滤 debug 级别，会把每次正常的 False 结果打印到 stdout。
    每次取新的 logger，保证使用当前配置。
    """
    if structlog.is_configured():
        structlog.get_logger(__name__).debug(event, **kw)


class BoundedOrderedSet(Generic[T]):
    """有界有序集合

    不变量：
    - len(self) <= capacity
    - 元素两两不相等（值相等语义）
    - 删除不改变其余元素的相对顺序
    """

    __slots__ = ("_capacity", "_elements")

    def __init__(self, capacity: int) -> None:
        """
        Args:
            capacity: 容量上限，必须为正整数

        Raises:
            ValueError: capacity 非正整数
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise ValueError(f"capacity 必须为正整数: {capacity!r}")
        self._capacity = capacity
        self._elements: list[T] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def count(self) -> int:
        return len(self._elements)

    def add(self, item: T) -> bool:
        """追加元素到末尾

        Returns:
            True 添加成功；False 表示已满或已存在，集合不变
        """
        if len(self._elements) >= self._capacity:
            _log_rejection("bounded_set_add_rejected", reason="capacity", capacity=self._capacity)
            return False
        if self.contains(item):
            _log_rejection("bounded_set_add_rejected", reason="duplicate")
            return False
        self._elements.append(item)
        return True

    def remove(self, item: T) -> bool:
        """删除第一个相等元素，其余元素保持原相对顺序

        Returns:
            True 删除成功；False 表示元素不存在，集合不变
        """
        for index, existing in enumerate(self._elements):
            if existing == item:
                del self._elements[index]
                return True
        _log_rejection("bounded_set_remove_rejected", reason="absent")
        return False

    def contains(self, item: T) -> bool:
        for existing in self._elements:
            if existing == item:
                return True
        return False

    def is_empty(self) -> bool:
        return not self._elements

    def is_full(self) -> bool:
        return len(self._elements) >= self._capacity

    def to_list(self) -> list[T]:
        """当前元素快照（防御性拷贝，不反映后续修改）"""
        return list(self._elements)

    def copy(self) -> "BoundedOrderedSet[T]":
        """同容量、同元素的独立副本"""
        clone: BoundedOrderedSet[T] = BoundedOrderedSet(self._capacity)
        clone._elements = list(self._elements)
        return clone

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[T]:
        # 遍历快照，遍历期间修改集合不影响迭代
        return iter(self.to_list())

    def __contains__(self, item: object) -> bool:
        return self.contains(item)  # type: ignore[arg-type]

    def __eq__(self, other: object) -> bool:
        """容量相同且元素按相同顺序相等"""
        if not isinstance(other, BoundedOrderedSet):
            return NotImplemented
        return self._capacity == other._capacity and self._elements == other._elements

    # 可变集合不可哈希
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"BoundedOrderedSet(capacity={self._capacity}, elements={self._elements!r})"
