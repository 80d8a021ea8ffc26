"""Connectivity puzzles: cut cities, deepest tree roots, gangs in call logs."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


class DisconnectedGraphError(ValueError):
    """The graph falls apart into more than one component."""

    def __init__(self, components: int) -> None:
        super().__init__(f"Error: {components} components")
        self.components = components


def _check_node(node: int, low: int, high: int) -> None:
    if not low <= node <= high:
        raise ValueError(f"node {node} is out of range {low}..{high}")


def roads_to_repair(
    city_count: int,
    highways: Iterable[tuple[int, int]],
    concerned: Iterable[int],
) -> list[int]:
    """For each lost city, count the highways needed to reconnect the rest.

    Cities are numbered from 1 to ``city_count``.
    """
    neighbours: list[set[int]] = [set() for _ in range(city_count + 1)]
    for a, b in highways:
        _check_node(a, 1, city_count)
        _check_node(b, 1, city_count)
        neighbours[a].add(b)
        neighbours[b].add(a)

    results = []
    for lost in concerned:
        seen = {lost}
        components = 0
        for city in range(1, city_count + 1):
            if city in seen:
                continue
            components += 1
            seen.add(city)
            pending = [city]
            while pending:
                current = pending.pop()
                for neighbour in neighbours[current] - seen:
                    seen.add(neighbour)
                    pending.append(neighbour)
        results.append(components - 1)
    return results


def _find(parent: list[int], node: int) -> int:
    while parent[node] != node:
        parent[node] = parent[parent[node]]
        node = parent[node]
    return node


def _deepest_from(start: int, neighbours: list[list[int]]) -> set[int]:
    depth = {start: 0}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for neighbour in neighbours[node]:
            if neighbour not in depth:
                depth[neighbour] = depth[node] + 1
                queue.append(neighbour)
    deepest = max(depth.values())
    return {node for node, level in depth.items() if level == deepest}


def deepest_roots(node_count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return, in increasing order, the roots giving the tallest tree.

    Nodes are numbered from 1.  Raises :class:`DisconnectedGraphError` when
    the graph is not connected.
    """
    if node_count < 1:
        raise ValueError("the graph needs at least one node")
    neighbours: list[list[int]] = [[] for _ in range(node_count + 1)]
    parent = list(range(node_count + 1))
    for a, b in edges:
        _check_node(a, 1, node_count)
        _check_node(b, 1, node_count)
        neighbours[a].append(b)
        neighbours[b].append(a)
        parent[_find(parent, a)] = _find(parent, b)

    components = sum(1 for node in range(1, node_count + 1) if _find(parent, node) == node)
    if components > 1:
        raise DisconnectedGraphError(components)

    first = _deepest_from(1, neighbours)
    second = _deepest_from(min(first), neighbours)
    return sorted(first | second)


def find_gangs(calls: Iterable[tuple[str, str, int]], threshold: int) -> list[tuple[str, int]]:
    """Find gangs in a phone log and return ``(head, member_count)`` by head name.

    A gang is a connected group of more than two people whose total call time
    exceeds ``threshold``; its head is the member with the most call time.
    """
    weight: dict[str, int] = {}
    neighbours: dict[str, list[str]] = {}
    for first, second, minutes in calls:
        for person, other in ((first, second), (second, first)):
            weight[person] = weight.get(person, 0) + minutes
            neighbours.setdefault(person, []).append(other)

    visited: set[str] = set()
    gangs = []
    for start in sorted(weight):
        if start in visited:
            continue
        head: str | None = None
        head_weight = 0
        members = 0
        double_total = 0

        def visit(person: str) -> None:
            nonlocal head, head_weight, members, double_total
            visited.add(person)
            members += 1
            double_total += weight[person]
            if weight[person] > head_weight:
                head, head_weight = person, weight[person]

        visit(start)
        stack = [reversed(neighbours[start])]
        while stack:
            for person in stack[-1]:
                if person not in visited:
                    visit(person)
                    stack.append(reversed(neighbours[person]))
                    break
            else:
                stack.pop()
        if members > 2 and double_total > threshold * 2 and head is not None:
            gangs.append((head, members))
    return sorted(gangs)