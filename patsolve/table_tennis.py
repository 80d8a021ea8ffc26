"""Table tennis club simulation with VIP tables and VIP players."""

from __future__ import annotations

import heapq
from collections.abc import Iterable
from dataclasses import dataclass

from sortedcontainers import SortedList

_OPEN = 8 * 3600
_CLOSE = 21 * 3600
_MAX_PLAY = 2 * 3600


@dataclass(frozen=True)
class Serving:
    """A pair of players getting a table."""

    arrival: str
    served: str
    wait_minutes: int


def _seconds(text: str) -> int:
    parts = text.strip().split(":")
    if len(parts) != 3:
        raise ValueError(f"expected HH:MM:SS, got {text!r}")
    try:
        hours, minutes, seconds = (int(part) for part in parts)
    except ValueError as exc:
        raise ValueError(f"expected HH:MM:SS, got {text!r}") from exc
    return hours * 3600 + minutes * 60 + seconds


def _clock(seconds: int) -> str:
    hours, rest = divmod(seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def simulate_tables(
    pairs: Iterable[tuple[str, int, bool]],
    table_count: int,
    vip_tables: Iterable[int],
) -> tuple[list[Serving], list[int]]:
    """Run the club from 08:00:00 to 21:00:00.

    Each pair is ``(arrival HH:MM:SS, playing minutes, is_vip)``; tables are
    numbered from 1 and ``vip_tables`` lists the VIP ones.  A free VIP table
    goes first to the earliest waiting VIP pair; otherwise the earliest pair
    takes the free table with the smallest number.  Play is capped at two
    hours.  Returns the servings in order and the pairs each table served.
    """
    if table_count < 0:
        raise ValueError("table count must not be negative")
    players = []
    for arrival, minutes, vip in pairs:
        if minutes < 0:
            raise ValueError("playing time must not be negative")
        players.append((_seconds(arrival), minutes * 60, bool(vip)))
    vip_ids = set(vip_tables)
    for table in vip_ids:
        if not 1 <= table <= table_count:
            raise ValueError(f"table {table} is out of range 1..{table_count}")

    waiting = [(arrival, index) for index, (arrival, _, _) in enumerate(players)]
    heapq.heapify(waiting)
    waiting_vip = SortedList(
        (arrival, index) for index, (arrival, _, vip) in enumerate(players) if vip
    )
    free = list(range(1, table_count + 1))
    free_vip = set(vip_ids)
    playing: list[tuple[int, int]] = []
    counts = [0] * (table_count + 1)
    servings: list[Serving] = []

    def seat(index: int, table: int, now: int) -> None:
        arrival, length, _ = players[index]
        counts[table] += 1
        heapq.heappush(playing, (now + min(length, _MAX_PLAY), table))
        servings.append(
            Serving(_clock(arrival), _clock(now), (now - arrival + 30) // 60)
        )

    now = _OPEN
    while now < _CLOSE and (playing or waiting):
        while playing and playing[0][0] == now:
            _, table = heapq.heappop(playing)
            heapq.heappush(free, table)
            if table in vip_ids:
                free_vip.add(table)

        while free_vip and waiting_vip and now >= waiting_vip[0][0]:
            table = min(free_vip)
            free_vip.remove(table)
            _, index = waiting_vip.pop(0)
            seat(index, table, now)

        while free and waiting and now >= waiting[0][0]:
            entry = waiting[0]
            table = free[0]
            index = entry[1]
            is_vip_pair = players[index][2]
            if is_vip_pair and entry not in waiting_vip:
                heapq.heappop(waiting)
                continue
            if table in vip_ids and table not in free_vip:
                heapq.heappop(free)
                continue
            if is_vip_pair:
                waiting_vip.remove(entry)
            free_vip.discard(table)
            heapq.heappop(waiting)
            heapq.heappop(free)
            seat(index, table, now)
        now += 1

    return servings, counts[1:]