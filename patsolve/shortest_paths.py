"""Shortest-path puzzles on weighted undirected road maps."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Iterator, Sequence


def _check_city(city: int, count: int, what: str) -> None:
    if not 0 <= city < count:
        raise ValueError(f"{what} {city} is not a city of the map")


def emergency(
    teams: Sequence[int],
    roads: Iterable[tuple[int, int, int]],
    source: int,
    target: int,
) -> tuple[int, int]:
    """Count the shortest routes from ``source`` to ``target``.

    ``teams[i]`` is the number of rescue teams in city ``i``; each road is
    ``(city_a, city_b, length)``.  Returns the number of shortest routes and
    the most teams that can be gathered along one of them.
    """
    count = len(teams)
    _check_city(source, count, "source")
    _check_city(target, count, "target")
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(count)]
    for a, b, length in roads:
        _check_city(a, count, "road end")
        _check_city(b, count, "road end")
        adjacency[a].append((b, length))
        adjacency[b].append((a, length))

    distance = [math.inf] * count
    gathered = [0] * count
    routes = [0] * count
    settled = [False] * count
    distance[source] = 0
    gathered[source] = teams[source]
    routes[source] = 1
    heap = [(0, -teams[source], source)]
    while heap:
        _, _, city = heapq.heappop(heap)
        if settled[city]:
            continue
        settled[city] = True
        for neighbour, length in reversed(adjacency[city]):
            if settled[neighbour]:
                continue
            new_distance = distance[city] + length
            new_teams = gathered[city] + teams[neighbour]
            if new_distance < distance[neighbour]:
                distance[neighbour] = new_distance
                gathered[neighbour] = new_teams
                routes[neighbour] = routes[city]
                heapq.heappush(heap, (new_distance, -new_teams, neighbour))
            elif new_distance == distance[neighbour]:
                routes[neighbour] += routes[city]
                if new_teams > gathered[neighbour]:
                    gathered[neighbour] = new_teams
                    heapq.heappush(heap, (new_distance, -new_teams, neighbour))
    return routes[target], gathered[target]


def _routes_from_centre(
    station: int, predecessors: Sequence[Sequence[int]]
) -> Iterator[list[int]]:
    if station == 0:
        yield [0]
        return
    for previous in predecessors[station]:
        for route in _routes_from_centre(previous, predecessors):
            yield route + [station]


def bike_management(
    capacity: int,
    bikes: Sequence[int],
    problem_station: int,
    roads: Iterable[tuple[int, int, int]],
) -> tuple[int, list[int], int]:
    """Plan the trip from the centre (station 0) to ``problem_station``.

    ``bikes[i]`` holds the bikes at station ``i + 1``; each road is
    ``(station_a, station_b, minutes)``.  Among the quickest routes the one
    needing the fewest bikes sent, then the fewest brought back, is chosen.
    Returns ``(bikes_sent, route, bikes_brought_back)``.
    """
    count = len(bikes) + 1
    _check_city(problem_station, count, "problem station")
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(count)]
    for a, b, minutes in roads:
        _check_city(a, count, "road end")
        _check_city(b, count, "road end")
        adjacency[a].append((b, minutes))
        adjacency[b].append((a, minutes))

    distance = [math.inf] * count
    predecessors: list[list[int]] = [[] for _ in range(count)]
    settled = [False] * count
    distance[0] = 0
    heap = [(0, 0)]
    while heap:
        _, station = heapq.heappop(heap)
        if settled[station]:
            continue
        settled[station] = True
        for neighbour, minutes in reversed(adjacency[station]):
            if settled[neighbour]:
                continue
            new_distance = distance[station] + minutes
            if new_distance < distance[neighbour]:
                predecessors[neighbour] = [station]
                distance[neighbour] = new_distance
                heapq.heappush(heap, (new_distance, neighbour))
            elif new_distance == distance[neighbour]:
                predecessors[neighbour].append(station)
                heapq.heappush(heap, (new_distance, neighbour))

    half = capacity // 2
    candidates = []
    for route in _routes_from_centre(problem_station, predecessors):
        send = back = 0
        for station in route[1:]:
            need = half - bikes[station - 1]
            if need > 0:
                send += max(need - back, 0)
                back = max(back - need, 0)
            else:
                back -= need
        candidates.append((send, route, back))
    if not candidates:
        raise ValueError(f"station {problem_station} cannot be reached")
    return min(candidates, key=lambda candidate: (candidate[0], candidate[2]))


def travel_plan(
    city_count: int,
    highways: Iterable[tuple[int, int, int, int]],
    source: int,
    target: int,
) -> tuple[list[int], int, int]:
    """Find the shortest, then cheapest, route between two cities.

    Each highway is ``(city_a, city_b, distance, cost)``.  Returns the route
    as a list of cities, its total distance and its total cost.
    """
    _check_city(source, city_count, "source")
    _check_city(target, city_count, "target")
    adjacency: list[list[tuple[int, int, int]]] = [[] for _ in range(city_count)]
    for a, b, length, cost in highways:
        _check_city(a, city_count, "highway end")
        _check_city(b, city_count, "highway end")
        adjacency[a].append((b, length, cost))
        adjacency[b].append((a, length, cost))

    best: list[tuple[float, float]] = [(math.inf, math.inf)] * city_count
    previous: list[int | None] = [None] * city_count
    settled = [False] * city_count
    best[source] = (0, 0)
    heap = [(0, 0, source)]
    while heap:
        _, _, city = heapq.heappop(heap)
        if settled[city]:
            continue
        settled[city] = True
        if city == target:
            break
        distance, cost = best[city]
        for neighbour, length, price in reversed(adjacency[city]):
            if settled[neighbour]:
                continue
            candidate = (distance + length, cost + price)
            if candidate < best[neighbour]:
                best[neighbour] = candidate
                previous[neighbour] = city
                heapq.heappush(heap, (*candidate, neighbour))

    if not settled[target]:
        raise ValueError(f"city {target} cannot be reached from {source}")
    route = []
    city: int | None = target
    while city is not None:
        route.append(city)
        city = previous[city]
    distance, cost = best[target]
    return route[::-1], int(distance), int(cost)