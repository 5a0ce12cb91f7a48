"""A push_swap stack and the instruction set that operates on pairs of stacks."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator


class Stack:
    """A stack of integers whose top is its first element."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: deque[int] = deque(values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({list(self._items)!r})"

    def prepend(self, value: int) -> None:
        """Put a value on top of the stack."""
        self._items.appendleft(value)

    def append(self, value: int) -> None:
        """Put a value at the bottom of the stack."""
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.popleft()

    def swap(self) -> None:
        """Exchange the two top values; does nothing with fewer than two."""
        if len(self._items) < 2:
            return
        first = self._items.popleft()
        second = self._items.popleft()
        self._items.appendleft(first)
        self._items.appendleft(second)

    def rotate(self) -> None:
        """Move the top value to the bottom."""
        if len(self._items) < 2:
            return
        self._items.rotate(-1)

    def reverse_rotate(self) -> None:
        """Move the bottom value to the top."""
        if len(self._items) < 2:
            return
        self._items.rotate(1)

    def minimum(self) -> int:
        """Smallest value, or 0 for an empty stack."""
        return min(self._items, default=0)

    def index_of(self, value: int) -> int:
        """Position of the value counted from the top, or -1 if absent."""
        for position, item in enumerate(self._items):
            if item == value:
                return position
        return -1

    def is_sorted(self) -> bool:
        """True when values never decrease from top to bottom."""
        return all(a <= b for a, b in zip(self._items, list(self._items)[1:]))

    def format(self) -> str:
        """Render the stack as a chain of values ending in NULL."""
        return "".join(f"{value} ->" for value in self._items) + "NULL"


def _push(destination: Stack, source: Stack) -> None:
    if len(source) == 0:
        return
    destination.prepend(source.pop())


def sa(a: Stack) -> None:
    """Swap the two top values of a."""
    a.swap()


def sb(b: Stack) -> None:
    """Swap the two top values of b."""
    b.swap()


def ss(a: Stack, b: Stack) -> None:
    """Swap the top values of both stacks."""
    a.swap()
    b.swap()


def pa(a: Stack, b: Stack) -> None:
    """Move the top of b onto a; nothing happens if b is empty."""
    _push(a, b)


def pb(a: Stack, b: Stack) -> None:
    """Move the top of a onto b; nothing happens if a is empty."""
    _push(b, a)


def ra(a: Stack) -> None:
    """Rotate a upwards."""
    a.rotate()


def rb(b: Stack) -> None:
    """Rotate b upwards."""
    b.rotate()


def rr(a: Stack, b: Stack) -> None:
    """Rotate both stacks upwards."""
    a.rotate()
    b.rotate()


def rra(a: Stack) -> None:
    """Rotate a downwards."""
    a.reverse_rotate()


def rrb(b: Stack) -> None:
    """Rotate b downwards."""
    b.reverse_rotate()


def rrr(a: Stack, b: Stack) -> None:
    """Rotate both stacks downwards."""
    a.reverse_rotate()
    b.reverse_rotate()


def bring_min_top(stack: Stack) -> None:
    """Rotate the smallest value to the top, in the shorter direction."""
    if len(stack) == 0:
        return
    smallest = stack.minimum()
    index = stack.index_of(smallest)
    if index <= len(stack) // 2:
        while next(iter(stack)) != smallest:
            ra(stack)
    else:
        while next(iter(stack)) != smallest:
            rra(stack)