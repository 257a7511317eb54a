"""Singly linked lists and a few operations on them."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import zip_longest
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


def _values(head: Optional[ListNode]) -> Iterator[int]:
    if head is not None:
        yield from head


def from_iterable(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list from values; an empty iterable gives None."""
    head: Optional[ListNode] = None
    tail: Optional[ListNode] = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_list(head: Optional[ListNode]) -> list[int]:
    """Return the values of a linked list in order."""
    return list(_values(head))


def add_two_numbers(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Add two numbers stored as reversed digit lists."""
    digits = []
    carry = 0
    for a, b in zip_longest(_values(l1), _values(l2), fillvalue=0):
        carry, digit = divmod(a + b + carry, 10)
        digits.append(digit)
    if carry:
        digits.append(carry)
    return from_iterable(digits)


def delete_node(node: ListNode) -> None:
    """Remove ``node`` from its list in place, given only that node."""
    if node.next is None:
        raise ValueError("cannot delete the tail node in place")
    node.val = node.next.val
    node.next = node.next.next


def odd_even_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Group nodes at odd positions before nodes at even positions."""
    if head is None:
        return head
    odd = head
    even = head.next
    even_head = even
    while even is not None and even.next is not None:
        odd.next = even.next
        odd = odd.next
        even.next = odd.next
        even = even.next
    odd.next = even_head
    return head