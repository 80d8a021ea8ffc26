"""Linked-list and stack puzzles: shared suffixes, pop orders, sorting, medians."""

from __future__ import annotations

from collections import deque
from collections.abc import Mapping, Sequence

from sortedcontainers import SortedList

END = -1
END_ADDRESS = "-1"


def common_suffix(head1: int, head2: int, nodes: Mapping[int, int]) -> int | None:
    """Return the address where two linked lists join, or ``None``.

    ``nodes`` maps an address to the address of the next node; ``-1`` ends a list.
    """
    if head1 == END or head2 == END:
        return None
    if head1 == head2:
        return head1

    def next_of(address: int) -> int:
        try:
            return nodes[address]
        except KeyError:
            raise ValueError(f"no node at address {address}") from None

    first_list = set()
    address = head1
    while address != END:
        first_list.add(address)
        address = next_of(address)
    address = head2
    while address != END:
        if address in first_list:
            return address
        address = next_of(address)
    return None


def is_pop_sequence(capacity: int, sequence: Sequence[int]) -> bool:
    """Return whether pushing 1..N in order onto a stack of ``capacity`` can pop ``sequence``."""
    pending = deque(range(1, len(sequence) + 1))
    stack: list[int] = []
    for number in sequence:
        while len(stack) <= capacity and pending and (not stack or stack[-1] != number):
            stack.append(pending.popleft())
        if len(stack) > capacity:
            return False
        if stack and stack[-1] == number:
            stack.pop()
        else:
            return False
    return True


def sort_linked_list(
    head: str, nodes: Mapping[str, tuple[int, str]]
) -> tuple[str, list[tuple[str, int, str]]]:
    """Sort the list starting at ``head`` by key and relink it.

    ``nodes`` maps an address to ``(key, next_address)``; ``"-1"`` ends a list.
    Returns the new head and the ``(address, key, next)`` triples in order.
    """
    chain = []
    address = head
    while address != END_ADDRESS:
        try:
            key, following = nodes[address]
        except KeyError:
            raise ValueError(f"no node at address {address}") from None
        chain.append((key, address))
        address = following
    chain.sort()
    addresses = [address for _, address in chain]
    nexts = addresses[1:] + [END_ADDRESS]
    result = [(address, key, nxt) for (key, address), nxt in zip(chain, nexts)]
    return (addresses[0] if addresses else END_ADDRESS), result


class MedianStack:
    """A stack that can also report the median of what it holds."""

    def __init__(self) -> None:
        self._items: list[int] = []
        self._sorted: SortedList = SortedList()

    def push(self, number: int) -> None:
        """Push ``number`` onto the stack."""
        self._items.append(number)
        self._sorted.add(number)

    def pop(self) -> int:
        """Remove and return the top of the stack."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        number = self._items.pop()
        self._sorted.remove(number)
        return number

    def peek_median(self) -> int:
        """Return the ((N+1)//2)-th smallest value held."""
        if not self._items:
            raise IndexError("median of an empty stack")
        return self._sorted[(len(self._sorted) + 1) // 2 - 1]

    def __len__(self) -> int:
        return len(self._items)