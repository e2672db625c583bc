"""Singly linked lists of decimal digits and their addition."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass
class Node:
    """One cell of a singly linked list."""

    data: int
    next: Node | None = None


def push(head: Node | None, data: int) -> Node:
    """Return a new head that holds ``data`` in front of ``head``."""
    return Node(data, head)


def from_values(values: Iterable[int]) -> Node | None:
    """Build a list whose nodes hold ``values`` in the given order."""
    head = None
    for value in reversed(list(values)):
        head = push(head, value)
    return head


def iter_values(node: Node | None) -> Iterator[int]:
    """Yield the data of every node from ``node`` to the end."""
    while node is not None:
        yield node.data
        node = node.next


def format_list(node: Node | None) -> str:
    """Render the list as its values, each followed by a space."""
    return "".join(f"{value} " for value in iter_values(node))


def add_two_lists(first: Node | None, second: Node | None) -> Node | None:
    """Add two numbers stored least significant digit first.

    The result is a new list, also least significant digit first.
    """
    dummy = Node(0)
    tail = dummy
    carry = 0
    while first is not None or second is not None:
        total = carry
        if first is not None:
            total += first.data
            first = first.next
        if second is not None:
            total += second.data
            second = second.next
        carry = 1 if total >= 10 else 0
        tail.next = Node(total % 10)
        tail = tail.next
    if carry:
        tail.next = Node(carry)
    return dummy.next


def reverse(head: Node | None) -> Node | None:
    """Reverse the list in place and return its new head."""
    previous = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous


def main(argv: list[str] | None = None) -> int:
    """Add 75946 and 84 held as linked lists and print the steps."""
    argparse.ArgumentParser(
        description="Add two numbers stored as linked lists of digits."
    ).parse_args(argv)

    first = None
    for digit in (6, 4, 9, 5, 7):
        first = push(first, digit)
    print(f"First list is {format_list(first)}")

    second = None
    for digit in (4, 8):
        second = push(second, digit)
    print(f"Second list is {format_list(second)}")

    result = reverse(add_two_lists(reverse(first), reverse(second)))
    print(f"Resultant list is {format_list(result)}")
    return 0