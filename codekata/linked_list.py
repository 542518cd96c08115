"""Singly linked lists of integers and the algorithms that work on them."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import zip_longest
from typing import Iterable, Iterator, Optional


@dataclass
class ListNode:
    """One node of a singly linked list."""

    val: int
    next: Optional[ListNode] = None

    @classmethod
    def from_values(cls, values: Iterable[int]) -> Optional[ListNode]:
        """Build a list holding ``values`` in order; an empty input gives None."""
        head: Optional[ListNode] = None
        for value in reversed(list(values)):
            head = cls(value, head)
        return head

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next

    def to_list(self) -> list[int]:
        """Return the values from this node to the end of the list."""
        return list(self)

    def reversed(self) -> ListNode:
        """Return a new list holding the same values in reverse order."""
        head = ListNode(self.val)
        node = self.next
        while node is not None:
            head = ListNode(node.val, head)
            node = node.next
        return head

    def __add__(self, other: object) -> ListNode:
        """Add two numbers whose decimal digits are stored least significant first."""
        if not isinstance(other, ListNode):
            return NotImplemented
        digits = []
        carry = 0
        for left, right in zip_longest(self, other, fillvalue=0):
            total = left + right + carry
            carry = 1 if total >= 10 else 0
            digits.append(total - 10 if carry else total)
        if carry:
            digits.append(1)
        result = ListNode.from_values(digits)
        assert result is not None
        return result


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list, preferring ``list1`` on ties."""
    anchor = ListNode(0)
    tail = anchor
    while list1 is not None and list2 is not None:
        if list1.val <= list2.val:
            tail.next, list1 = list1, list1.next
        else:
            tail.next, list2 = list2, list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return anchor.next


def middle_node(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the middle node; for an even length, the second of the two middles."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        assert slow is not None
        slow = slow.next
        fast = fast.next.next
    return slow


def add_two_numbers(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Sum two digit lists; None when either operand is missing."""
    if l1 is None or l2 is None:
        return None
    return l1 + l2