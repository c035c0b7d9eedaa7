"""
Unit Tests for RecencyList.

Tests for:
    - Append / move_to_end / remove ordering
    - Popping the least recently used node
    - Iteration while unlinking
"""

from __future__ import annotations

from inmemory_cache.caching.recency_list import RecencyList


def _keys(order: RecencyList) -> list:
    return [node.key for node in order]


class TestRecencyList:
    """Ordering operations."""

    def test_empty(self) -> None:
        order = RecencyList()
        assert len(order) == 0
        assert order.first() is None
        assert order.pop_first() is None
        assert _keys(order) == []

    def test_append_keeps_insertion_order(self) -> None:
        order = RecencyList()
        for key in "abc":
            order.append(key, key.upper())

        assert _keys(order) == ["a", "b", "c"]
        assert len(order) == 3
        assert order.first().entry == "A"

    def test_move_to_end(self) -> None:
        order = RecencyList()
        a = order.append("a", None)
        order.append("b", None)
        order.append("c", None)

        order.move_to_end(a)

        assert _keys(order) == ["b", "c", "a"]
        assert len(order) == 3

    def test_move_last_node_to_end_is_noop(self) -> None:
        order = RecencyList()
        order.append("a", None)
        c = order.append("b", None)

        order.move_to_end(c)

        assert _keys(order) == ["a", "b"]

    def test_remove_middle(self) -> None:
        order = RecencyList()
        order.append("a", None)
        b = order.append("b", None)
        order.append("c", None)

        order.remove(b)

        assert _keys(order) == ["a", "c"]
        assert len(order) == 2

    def test_pop_first(self) -> None:
        order = RecencyList()
        order.append("a", None)
        order.append("b", None)

        node = order.pop_first()

        assert node.key == "a"
        assert _keys(order) == ["b"]

    def test_iteration_tolerates_removing_current(self) -> None:
        order = RecencyList()
        for key in "abcde":
            order.append(key, None)

        for node in order:
            if node.key in ("a", "c", "e"):
                order.remove(node)

        assert _keys(order) == ["b", "d"]
        assert len(order) == 2

    def test_clear(self) -> None:
        order = RecencyList()
        order.append("a", None)
        order.append("b", None)

        order.clear()

        assert len(order) == 0
        assert _keys(order) == []
        order.append("c", None)
        assert _keys(order) == ["c"]
