"""Puzzles over sequences of numbers: sums, medians, pairings and tournaments."""

from __future__ import annotations

import heapq
import math
from collections import Counter
from collections.abc import Iterable, Iterator, Sequence
from itertools import accumulate, islice

_BET_LETTERS = "WTL"


def max_subsequence(sequence: Iterable[int]) -> tuple[int, int, int]:
    """Return the largest contiguous sum and the first and last values of its run.

    When every value is negative the sum is 0 and the first and last values
    of the whole sequence are returned instead.
    """
    values = list(sequence)
    if not values:
        raise ValueError("sequence must not be empty")
    best = values[0]
    best_first = best_last = 0
    running = 0
    start = 0
    for index, value in enumerate(values):
        if running < 0:
            running, start = value, index
        else:
            running += value
        if running > best:
            best, best_first, best_last = running, start, index
    if best < 0:
        return 0, values[0], values[-1]
    return best, values[best_first], values[best_last]


def elevator_time(floors: Iterable[int]) -> int:
    """Total seconds for an elevator starting at floor 0 to serve ``floors`` in order.

    Going up takes 6 seconds a floor, going down 4, and each stop 5.
    """
    total = 0
    current = 0
    for floor in floors:
        diff = floor - current
        total += diff * (6 if diff > 0 else -4) + 5
        current = floor
    return total


def world_cup_betting(odds: Iterable[Sequence[float]]) -> tuple[list[str], float]:
    """Pick the best of W/T/L odds for each game and return the picks and profit."""
    picks = []
    product = 1.0
    for row in odds:
        if len(row) != 3:
            raise ValueError("each game needs exactly three odds")
        best = max(range(3), key=row.__getitem__)
        picks.append(_BET_LETTERS[best])
        product *= row[best]
    return picks, (product * 0.65 - 1.0) * 2


def median_of_two(a: Sequence[int], b: Sequence[int]) -> int:
    """Return the median of two sorted sequences taken together (lower median)."""
    total = len(a) + len(b)
    if total == 0:
        raise ValueError("both sequences are empty")
    index = (total + 1) // 2 - 1
    return next(islice(heapq.merge(a, b), index, None))


def magic_coupon(coupons: Iterable[int], products: Iterable[int]) -> int:
    """Return the most money to be had by pairing coupons with products."""
    coupons = sorted(coupons)
    products = sorted(products)
    total = 0
    for coupon, product in zip(coupons, products):
        if coupon >= 0 or coupon * product <= 0:
            break
        total += coupon * product
    for coupon, product in zip(reversed(coupons), reversed(products)):
        if coupon <= 0 or coupon * product <= 0:
            break
        total += coupon * product
    return total


def first_unique(numbers: Iterable[int]) -> int | None:
    """Return the first number that occurs exactly once, or ``None``."""
    numbers = list(numbers)
    counts = Counter(numbers)
    return next((number for number in numbers if counts[number] == 1), None)


def shopping_in_mars(diamonds: Sequence[int], pay: int) -> list[tuple[int, int]]:
    """Return the 1-based ranges whose sum is ``pay``, or failing that the least over it."""
    if pay <= 0:
        raise ValueError("pay must be positive")
    if any(value <= 0 for value in diamonds):
        raise ValueError("diamond values must be positive")
    candidates: list[tuple[int, int, int]] = []
    end = 0
    total = 0
    for start, value in enumerate(diamonds):
        while end < len(diamonds) and total < pay:
            total += diamonds[end]
            end += 1
        if total < pay:
            break
        candidates.append((total, start + 1, end))
        total -= value
    if not candidates:
        return []
    best = min(total for total, _, _ in candidates)
    return [(first, last) for total, first, last in candidates if total == best]


def favorite_color_stripe(favorites: Sequence[int], stripe: Iterable[int]) -> int:
    """Longest part of ``stripe`` whose colours follow the order of ``favorites``."""
    order = {color: position for position, color in enumerate(favorites, start=1)}
    best_up_to = [0] * (len(favorites) + 1)
    for color in stripe:
        position = order.get(color)
        if position is None:
            continue
        best_up_to[position] = max(best_up_to[: position + 1]) + 1
    return max(best_up_to)


def exit_distances(distances: Sequence[int], queries: Iterable[tuple[int, int]]) -> list[int]:
    """Shortest distances between 1-based exits on a circular highway."""
    prefix = list(accumulate(distances, initial=0))
    total = prefix[-1]
    count = len(distances)
    results = []
    for a, b in queries:
        if not (1 <= a <= count and 1 <= b <= count):
            raise ValueError(f"exit out of range: {a}, {b}")
        direct = abs(prefix[a - 1] - prefix[b - 1])
        results.append(min(direct, total - direct))
    return results


def find_coins(values: Iterable[int], pay: int) -> tuple[int, int] | None:
    """Return two coins summing to ``pay`` with the smallest first coin, or ``None``."""
    coins = sorted(values)
    low, high = 0, len(coins) - 1
    while low < high:
        total = coins[low] + coins[high]
        if total > pay:
            high -= 1
        elif total < pay:
            low += 1
        else:
            return coins[low], coins[high]
    return None


def dominant_color(colors: Iterable[int]) -> int:
    """Return the colour that takes more than half of ``colors``."""
    candidate = None
    count = 0
    for color in colors:
        if count == 0:
            candidate, count = color, 1
        elif color == candidate:
            count += 1
        else:
            count -= 1
    if candidate is None:
        raise ValueError("no colours given")
    return candidate


def _chunks(items: Sequence[int], size: int) -> Iterator[Sequence[int]]:
    for start in range(0, len(items), size):
        yield items[start:start + size]


def mouse_ranks(weights: Sequence[int], order: Sequence[int], group_size: int) -> list[int]:
    """Rank contestants in a knockout of groups; the heaviest of each group advances."""
    count = len(weights)
    if count == 0:
        raise ValueError("no contestants")
    if sorted(order) != list(range(count)):
        raise ValueError("order must hold each contestant id exactly once")
    if count > 1 and group_size < 2:
        raise ValueError("group size must be at least 2")
    ranks = [0] * count
    current = list(order)
    while len(current) > 1:
        rank = math.ceil(len(current) / group_size) + 1
        winners = []
        for group in _chunks(current, group_size):
            for contestant in group:
                ranks[contestant] = rank
            winners.append(max(group, key=weights.__getitem__))
        current = winners
    ranks[current[0]] = 1
    return ranks