"""String puzzles: U-shaped layout, digit concatenation, palindromes, filtering."""

from __future__ import annotations

from collections.abc import Iterable
from functools import cmp_to_key


def u_shape(text: str) -> list[str]:
    """Lay ``text`` out as a U: down the left, along the bottom, up the right."""
    if not text:
        raise ValueError("text must not be empty")
    length = len(text)
    bottom_width = (length + 2) // 3 + (length + 2) % 3
    side_height = (length + 2 - bottom_width) // 2
    gap = " " * (bottom_width - 2)
    lines = [
        text[row] + gap + text[length - 1 - row]
        for row in range(side_height - 1)
    ]
    lines.append(text[side_height - 1:side_height - 1 + bottom_width])
    return lines


def _concat_order(a: str, b: str) -> int:
    first, second = a + b, b + a
    return (first > second) - (first < second)


def smallest_number(segments: Iterable[str]) -> str:
    """Join number segments into the smallest number, without leading zeros."""
    joined = "".join(sorted(segments, key=cmp_to_key(_concat_order)))
    return joined.lstrip("0") or "0"


def longest_palindrome(text: str) -> int:
    """Return the length of the longest palindromic substring of ``text``."""
    left_end, right_end = object(), object()
    marked: list[object] = [left_end, "#"]
    for char in text:
        marked.extend((char, "#"))
    marked.append(right_end)

    radius = [0] * len(marked)
    center = right_edge = 0
    for i in range(1, len(marked) - 1):
        if right_edge > i:
            radius[i] = min(right_edge - i, radius[2 * center - i])
        while marked[i + radius[i] + 1] == marked[i - radius[i] - 1]:
            radius[i] += 1
        if i + radius[i] > right_edge:
            center, right_edge = i, i + radius[i]
    return max(radius, default=0)


def subtract_chars(s1: str, s2: str) -> str:
    """Remove from ``s1`` every character that appears in ``s2``."""
    removed = set(s2)
    return "".join(char for char in s1 if char not in removed)