"""Bank queue simulations: windows behind a yellow line, and average waiting time."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable, Sequence

_OPEN_HOUR = 8
_SERVICE_MINUTES = (17 - 8) * 60
_OPEN_SECONDS = 8 * 60 * 60
_CLOSE_SECONDS = 17 * 60 * 60


def _clock(minutes_after_open: int) -> str:
    hours, minutes = divmod(minutes_after_open, 60)
    return f"{hours + _OPEN_HOUR:02d}:{minutes:02d}"


def _seconds(text: str) -> int:
    parts = text.strip().split(":")
    if len(parts) != 3:
        raise ValueError(f"expected HH:MM:SS, got {text!r}")
    try:
        hours, minutes, seconds = (int(part) for part in parts)
    except ValueError as exc:
        raise ValueError(f"expected HH:MM:SS, got {text!r}") from exc
    return hours * 3600 + minutes * 60 + seconds


def waiting_in_line(
    window_count: int,
    capacity: int,
    processing_times: Sequence[int],
    queries: Iterable[int],
) -> list[str]:
    """Return when each queried customer (1-based) is done, as ``HH:MM`` or ``Sorry``.

    Each window has room for ``capacity`` customers inside the yellow line;
    the rest wait outside and step in as soon as a line has room.  A customer
    who cannot start before 17:00 is not served.
    """
    if window_count < 1:
        raise ValueError("there must be at least one window")
    if capacity < 1:
        raise ValueError("the yellow line must hold at least one customer")
    if any(time < 0 for time in processing_times):
        raise ValueError("processing times must not be negative")

    count = len(processing_times)
    waiting = deque(range(count))
    lines: list[deque[int]] = [deque() for _ in range(window_count)]
    for _ in range(capacity):
        for line in lines:
            if not waiting:
                break
            line.append(waiting.popleft())

    finish = [0] * count
    windows: list[tuple[int, int]] = []
    for window, line in enumerate(lines):
        if line:
            customer = line[0]
            finish[customer] = processing_times[customer]
            heapq.heappush(windows, (finish[customer], window))

    while windows:
        now, window = heapq.heappop(windows)
        if now >= _SERVICE_MINUTES:
            break
        line = lines[window]
        line.popleft()
        if waiting:
            line.append(waiting.popleft())
        if line:
            customer = line[0]
            finish[customer] = now + processing_times[customer]
            heapq.heappush(windows, (finish[customer], window))

    results = []
    for query in queries:
        if not 1 <= query <= count:
            raise ValueError(f"customer {query} is out of range 1..{count}")
        done = finish[query - 1]
        results.append(_clock(done) if done else "Sorry")
    return results


def average_waiting_minutes(
    customers: Iterable[tuple[str, int]], window_count: int
) -> float:
    """Return the average wait in minutes of the customers the bank serves.

    Each customer is ``(arrival HH:MM:SS, processing minutes)``.  The bank
    opens at 08:00:00; whoever arrives after 17:00:00 is turned away.
    """
    if window_count < 1:
        raise ValueError("there must be at least one window")
    arrivals = sorted(
        (_seconds(arrival), minutes * 60) for arrival, minutes in customers
    )
    served = [(arrival, length) for arrival, length in arrivals if arrival <= _CLOSE_SECONDS]
    if not served:
        raise ValueError("no customer is served")

    free_at = [_OPEN_SECONDS] * window_count
    total_wait = 0
    for arrival, length in served:
        start = max(heapq.heappop(free_at), arrival)
        total_wait += start - arrival
        heapq.heappush(free_at, start + length)
    return total_wait / len(served) / 60