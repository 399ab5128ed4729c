"""Strategies that sort stack a using the puzzle's operations."""

from __future__ import annotations

from collections.abc import Iterable

from .stacks import Stacks, get_index_position, is_sorted, max_index, min_index

__all__ = [
    "sort_three",
    "sort_four",
    "sort_five",
    "chunk_sort",
    "smart_push_back",
    "rotate_to_min",
    "sort_stack",
    "solve",
]


def sort_three(stacks: Stacks) -> None:
    """Sort the three elements of a with at most two operations."""
    first, second, third = (element.index for element in list(stacks.a)[:3])
    if first > second and second < third and first < third:
        stacks.sa()
    elif first > second and second > third:
        stacks.sa()
        stacks.rra()
    elif first > second and second < third and first > third:
        stacks.ra()
    elif first < second and second > third and first < third:
        stacks.sa()
        stacks.ra()
    elif first < second and second > third and first > third:
        stacks.rra()


def _bring_min_to_top(stacks: Stacks, forward_limit: int) -> None:
    target = min_index(stacks.a)
    if get_index_position(stacks.a, target) <= forward_limit:
        while stacks.a[0].index != target:
            stacks.ra()
    else:
        while stacks.a[0].index != target:
            stacks.rra()


def sort_four(stacks: Stacks) -> None:
    """Park the minimum on b, sort the remaining three, and bring it back."""
    _bring_min_to_top(stacks, 1)
    stacks.pb()
    sort_three(stacks)
    stacks.pa()


def sort_five(stacks: Stacks) -> None:
    """Park the minimum on b, sort the remaining four, and bring it back."""
    _bring_min_to_top(stacks, 2)
    stacks.pb()
    sort_four(stacks)
    stacks.pa()


def _push_chunk(stacks: Stacks, start: int, end: int) -> None:
    middle = (start + end) // 2
    for _ in range(len(stacks.a)):
        if start <= stacks.a[0].index < end:
            stacks.pb()
            if stacks.b[0].index < middle:
                stacks.rb()
        else:
            stacks.ra()


def chunk_sort(stacks: Stacks) -> None:
    """Move every element of a onto b, one range of indexes at a time."""
    size = len(stacks.a)
    chunks = 5 if size <= 100 else 11
    chunk_size = size // chunks + 1
    for chunk in range(chunks):
        _push_chunk(stacks, chunk * chunk_size, (chunk + 1) * chunk_size)


def smart_push_back(stacks: Stacks) -> None:
    """Return elements from b to a, largest first, rotating b the shorter way."""
    while stacks.b:
        target = max_index(stacks.b)
        position = get_index_position(stacks.b, target)
        if position <= len(stacks.b) // 2:
            while stacks.b[0].index != target:
                stacks.rb()
        else:
            while stacks.b[0].index != target:
                stacks.rrb()
        stacks.pa()


def rotate_to_min(stacks: Stacks) -> None:
    """Rotate a the shorter way until its smallest element is on top."""
    _bring_min_to_top(stacks, len(stacks.a) // 2)


def sort_stack(stacks: Stacks) -> None:
    """Sort a, choosing a strategy by its size."""
    if is_sorted(stacks.a):
        return
    size = len(stacks.a)
    if size == 2:
        stacks.sa()
    elif size == 3:
        sort_three(stacks)
    elif size == 4:
        sort_four(stacks)
    elif size == 5:
        sort_five(stacks)
    else:
        chunk_sort(stacks)
        smart_push_back(stacks)
        rotate_to_min(stacks)


def solve(values: Iterable[int]) -> list[str]:
    """Return the operations that sort the given values."""
    stacks = Stacks(values)
    sort_stack(stacks)
    return stacks.operations