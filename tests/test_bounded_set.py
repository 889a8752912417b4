"""BoundedOrderedSet 单元测试

测试内容：
1. 容量上限与计数
2. 重复拒绝
3. 删除保持顺序
4. 快照语义
5. 值相等
6. 拒绝事件日志
"""

import pytest
import structlog
import structlog.testing
from taskflow.core.models import BoundedOrderedSet


class TestConstruction:
    """构造参数校验"""

    def test_created_empty(self):
        bounded = BoundedOrderedSet(3)
        assert bounded.capacity == 3
        assert bounded.count == 0
        assert bounded.is_empty()
        assert bounded.to_list() == []

    @pytest.mark.parametrize("capacity", [0, -1, True, 2.5, "3"])
    def test_invalid_capacity_rejected(self, capacity):
        """非正整数容量是编程错误"""
        with pytest.raises(ValueError):
            BoundedOrderedSet(capacity)


class TestAdd:
    """add() 行为"""

    @pytest.mark.parametrize("capacity", [1, 2, 5, 50, 100])
    def test_fill_to_capacity_then_reject(self, capacity: int):
        """C 个不同元素都能加入，第 C+1 个被拒绝"""
        bounded = BoundedOrderedSet(capacity)
        for i in range(capacity):
            assert bounded.add(f"id-{i}") is True
            assert bounded.count == i + 1

        assert bounded.is_full()
        assert bounded.add("overflow") is False
        assert bounded.count == capacity
        assert not bounded.contains("overflow")

    def test_duplicate_rejected_without_change(self):
        bounded = BoundedOrderedSet(5)
        bounded.add("a")
        bounded.add("b")

        assert bounded.add("a") is False
        assert bounded.count == 2
        assert bounded.to_list() == ["a", "b"]

    def test_insertion_order_preserved(self):
        bounded = BoundedOrderedSet(5)
        for item in ("a", "b", "c"):
            bounded.add(item)
        assert bounded.to_list() == ["a", "b", "c"]

    def test_duplicate_check_uses_value_equality(self):
        bounded = BoundedOrderedSet(5)
        bounded.add("user-1")
        assert bounded.add("".join(["user", "-", "1"])) is False


class TestRemove:
    """remove() 行为"""

    def test_remove_middle_preserves_order(self):
        bounded = BoundedOrderedSet(5)
        for item in ("a", "b", "c"):
            bounded.add(item)

        assert bounded.remove("b") is True
        assert bounded.to_list() == ["a", "c"]
        assert bounded.count == 2
        assert not bounded.contains("b")

    @pytest.mark.parametrize("target,expected", [
        ("a", ["b", "c", "d"]),
        ("d", ["a", "b", "c"]),
    ])
    def test_remove_ends(self, target: str, expected: list[str]):
        bounded = BoundedOrderedSet(4)
        for item in ("a", "b", "c", "d"):
            bounded.add(item)
        assert bounded.remove(target) is True
        assert bounded.to_list() == expected

    def test_remove_absent_leaves_set_unchanged(self):
        bounded = BoundedOrderedSet(5)
        bounded.add("a")
        bounded.add("b")

        assert bounded.remove("zzz") is False
        assert bounded.count == 2
        assert bounded.to_list() == ["a", "b"]

    def test_remove_from_empty(self):
        assert BoundedOrderedSet(1).remove("a") is False

    def test_removal_frees_capacity(self):
        bounded = BoundedOrderedSet(2)
        bounded.add("a")
        bounded.add("b")
        assert bounded.add("c") is False

        bounded.remove("a")
        assert bounded.add("c") is True
        assert bounded.to_list() == ["b", "c"]

    def test_readd_after_remove_goes_to_end(self):
        bounded = BoundedOrderedSet(3)
        for item in ("a", "b", "c"):
            bounded.add(item)
        bounded.remove("a")
        bounded.add("a")
        assert bounded.to_list() == ["b", "c", "a"]


class TestSnapshots:
    """快照与容器协议"""

    def test_to_list_is_defensive_copy(self):
        bounded = BoundedOrderedSet(3)
        bounded.add("a")
        snapshot = bounded.to_list()
        snapshot.append("b")
        bounded.add("c")

        assert bounded.to_list() == ["a", "c"]
        assert snapshot == ["a", "b"]

    def test_container_protocol(self):
        bounded = BoundedOrderedSet(3)
        bounded.add("a")
        bounded.add("b")

        assert len(bounded) == 2
        assert "a" in bounded
        assert "x" not in bounded
        assert list(bounded) == ["a", "b"]

    def test_iteration_survives_mutation(self):
        bounded = BoundedOrderedSet(3)
        for item in ("a", "b", "c"):
            bounded.add(item)
        seen = []
        for item in bounded:
            bounded.remove(item)
            seen.append(item)
        assert seen == ["a", "b", "c"]
        assert bounded.is_empty()

    def test_copy_is_independent(self):
        bounded = BoundedOrderedSet(3)
        bounded.add("a")
        clone = bounded.copy()
        clone.add("b")

        assert clone.capacity == 3
        assert clone.to_list() == ["a", "b"]
        assert bounded.to_list() == ["a"]

    def test_repr(self):
        bounded = BoundedOrderedSet(2)
        bounded.add("a")
        assert repr(bounded) == "BoundedOrderedSet(capacity=2, elements=['a'])"


class TestEquality:
    """值相等：容量相同且元素顺序相同"""

    def test_equal_sets(self):
        first, second = BoundedOrderedSet(3), BoundedOrderedSet(3)
        for bounded in (first, second):
            bounded.add("a")
            bounded.add("b")
        assert first == second

    def test_order_matters(self):
        first, second = BoundedOrderedSet(3), BoundedOrderedSet(3)
        first.add("a")
        first.add("b")
        second.add("b")
        second.add("a")
        assert first != second

    def test_capacity_matters(self):
        assert BoundedOrderedSet(2) != BoundedOrderedSet(3)

    def test_other_types_not_equal(self):
        bounded = BoundedOrderedSet(2)
        bounded.add("a")
        assert bounded != ["a"]

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(BoundedOrderedSet(1))


class TestRejectionLogging:
    """拒绝事件日志"""

    def test_capacity(self):
        bounded = BoundedOrderedSet(1)
        bounded.add("a")
        with structlog.testing.capture_logs() as logs:
            assert bounded.add("b") is False
        assert logs == [{
            "event": "bounded_set_add_rejected",
            "log_level": "debug",
            "reason": "capacity",
            "capacity": 1,
        }]

    def test_duplicate(self):
        bounded = BoundedOrderedSet(2)
        bounded.add("a")
        with structlog.testing.capture_logs() as logs:
            assert bounded.add("a") is False
        assert logs == [{
            "event": "bounded_set_add_rejected",
            "log_level": "debug",
            "reason": "duplicate",
        }]

    def test_absent(self):
        bounded = BoundedOrderedSet(2)
        with structlog.testing.capture_logs() as logs:
            assert bounded.remove("a") is False
        assert logs == [{
            "event": "bounded_set_remove_rejected",
            "log_level": "debug",
            "reason": "absent",
        }]

    def test_success_not_logged(self):
        bounded = BoundedOrderedSet(2)
        with structlog.testing.capture_logs() as logs:
            bounded.add("a")
            bounded.remove("a")
        assert logs == []

    def test_silent_without_logging_setup(self, capsys):
        """structlog 未配置时，正常的 False 结果不打印任何内容"""
        structlog.reset_defaults()
        bounded = BoundedOrderedSet(1)
        bounded.add("a")
        bounded.add("a")
        bounded.add("b")
        bounded.remove("z")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""
