"""
Recency List - Doubly Linked Queue Ordered by Last Use.

Keeps cache keys ordered from least-recently-used (front) to
most-recently-used (back). Paired with a dict from key to node it gives
O(1) lookup, O(1) move-to-end and O(1) eviction from the front.

Design Notes:
    - Circular list with a sentinel head, so there are no None checks
      on link updates
    - Nodes are owned by the list; callers only hold them transiently
"""

from __future__ import annotations

from typing import Any, Iterator, Optional


class RecencyNode:
    """A single link in the recency list."""

    __slots__ = ("key", "entry", "prev", "next")

    def __init__(self, key: Optional[str], entry: Any) -> None:
        self.key = key
        self.entry = entry
        self.prev: RecencyNode = self
        self.next: RecencyNode = self


class RecencyList:
    """
    Doubly linked list ordered oldest-first.

    Iteration yields nodes from least to most recently used and tolerates
    unlinking the node that was just yielded.
    """

    def __init__(self) -> None:
        self._head = RecencyNode(None, None)
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[RecencyNode]:
        node = self._head.next
        while node is not self._head:
            following = node.next
            yield node
            node = following

    def append(self, key: str, entry: Any) -> RecencyNode:
        """Add a new node at the most-recently-used end."""
        node = RecencyNode(key, entry)
        self._link_last(node)
        self._size += 1
        return node

    def move_to_end(self, node: RecencyNode) -> None:
        """Mark node as most recently used."""
        if node.next is self._head:
            return
        self._unlink(node)
        self._link_last(node)

    def remove(self, node: RecencyNode) -> None:
        """Detach node from the list."""
        self._unlink(node)
        self._size -= 1

    def first(self) -> Optional[RecencyNode]:
        """Least recently used node, or None when empty."""
        if self._head.next is self._head:
            return None
        return self._head.next

    def pop_first(self) -> Optional[RecencyNode]:
        """Detach and return the least recently used node."""
        node = self.first()
        if node is not None:
            self.remove(node)
        return node

    def clear(self) -> None:
        """Drop all nodes."""
        self._head.prev = self._head
        self._head.next = self._head
        self._size = 0

    def _link_last(self, node: RecencyNode) -> None:
        tail = self._head.prev
        node.prev = tail
        node.next = self._head
        tail.next = node
        self._head.prev = node

    @staticmethod
    def _unlink(node: RecencyNode) -> None:
        node.prev.next = node.next
        node.next.prev = node.prev
        node.prev = node
        node.next = node
