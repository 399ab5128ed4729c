"""The two stacks of the puzzle and the operations that move elements between them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

__all__ = [
    "Element",
    "Stacks",
    "assign_indexes",
    "is_sorted",
    "min_index",
    "max_index",
    "get_index_position",
]


@dataclass
class Element:
    """A value on a stack together with its rank among all values."""

    value: int
    index: int = -1


def assign_indexes(values: Sequence[int]) -> list[int]:
    """Return the rank of each value; equal values are ranked in order of appearance."""
    order = sorted(range(len(values)), key=lambda position: values[position])
    ranks = [0] * len(values)
    for rank, position in enumerate(order):
        ranks[position] = rank
    return ranks


def is_sorted(elements: Iterable[Element]) -> bool:
    """Tell whether the indexes never decrease from top to bottom."""
    indexes = [element.index for element in elements]
    return all(first <= second for first, second in zip(indexes, indexes[1:]))


def min_index(elements: Iterable[Element]) -> int:
    """Return the smallest index in the stack; raise ValueError if it is empty."""
    indexes = [element.index for element in elements]
    if not indexes:
        raise ValueError("stack is empty")
    return min(indexes)


def max_index(elements: Iterable[Element]) -> int:
    """Return the largest index in the stack; raise ValueError if it is empty."""
    indexes = [element.index for element in elements]
    if not indexes:
        raise ValueError("stack is empty")
    return max(indexes)


def get_index_position(elements: Iterable[Element], index: int) -> int:
    """Return the distance from the top of the element with the given index."""
    for position, element in enumerate(elements):
        if element.index == index:
            return position
    raise ValueError(f"index {index} is not on the stack")


class Stacks:
    """Stacks a and b; every operation that acts is recorded in ``operations``."""

    def __init__(self, values: Iterable[int]) -> None:
        values = list(values)
        self.a: deque[Element] = deque(
            Element(value, index)
            for value, index in zip(values, assign_indexes(values))
        )
        self.b: deque[Element] = deque()
        self.operations: list[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={self.a_indexes()}, b={self.b_indexes()})"

    def a_indexes(self) -> list[int]:
        """Indexes on stack a, top first."""
        return [element.index for element in self.a]

    def b_indexes(self) -> list[int]:
        """Indexes on stack b, top first."""
        return [element.index for element in self.b]

    def _record(self, name: str) -> None:
        self.operations.append(name)

    @staticmethod
    def _swap(stack: deque[Element]) -> bool:
        if len(stack) < 2:
            return False
        stack[0], stack[1] = stack[1], stack[0]
        return True

    @staticmethod
    def _rotate(stack: deque[Element], steps: int) -> bool:
        if len(stack) < 2:
            return False
        stack.rotate(steps)
        return True

    def sa(self) -> None:
        """Swap the two top elements of a."""
        if self._swap(self.a):
            self._record("sa")

    def sb(self) -> None:
        """Swap the two top elements of b."""
        if self._swap(self.b):
            self._record("sb")

    def ss(self) -> None:
        """Swap on both stacks, naming the combined move after the ones that acted."""
        did_sa = len(self.a) >= 2
        did_sb = len(self.b) >= 2
        if did_sa:
            self.sa()
        if did_sb:
            self.sb()
        if did_sa and did_sb:
            self._record("ss")
        elif did_sa:
            self._record("sa")
        elif did_sb:
            self._record("sb")

    def pa(self) -> None:
        """Move the top of b onto a."""
        if not self.b:
            return
        self.a.appendleft(self.b.popleft())
        self._record("pa")

    def pb(self) -> None:
        """Move the top of a onto b."""
        if not self.a:
            return
        self.b.appendleft(self.a.popleft())
        self._record("pb")

    def ra(self) -> None:
        """Send the top of a to its bottom."""
        if self._rotate(self.a, -1):
            self._record("ra")

    def rb(self) -> None:
        """Send the top of b to its bottom."""
        if self._rotate(self.b, -1):
            self._record("rb")

    def rr(self) -> None:
        """Rotate both stacks."""
        self.ra()
        self.rb()
        self._record("rr")

    def rra(self) -> None:
        """Bring the bottom of a to its top."""
        if self._rotate(self.a, 1):
            self._record("rra")

    def rrb(self) -> None:
        """Bring the bottom of b to its top."""
        if self._rotate(self.b, 1):
            self._record("rrb")

    def rrr(self) -> None:
        """Reverse-rotate both stacks."""
        self.rra()
        self.rrb()
        self._record("rrr")