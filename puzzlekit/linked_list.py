"""A singly linked list of integers and the removal of matching nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

__all__ = ["ListNode", "from_values", "to_values", "remove_elements"]


@dataclass
class ListNode:
    """One node of a singly linked list."""

    val: int
    next: Optional[ListNode] = None

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


def from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a list holding ``values`` in order; an empty input gives ``None``."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of the list starting at ``head``."""
    return list(head) if head is not None else []


def remove_elements(head: Optional[ListNode], val: int) -> Optional[ListNode]:
    """Unlink every node holding ``val`` and return the new head."""
    sentinel = ListNode(0, head)
    last = sentinel
    while last.next is not None:
        if last.next.val == val:
            last.next = last.next.next
        else:
            last = last.next
    return sentinel.next