"""Planning the cheapest refuelling along a highway."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def cheapest_trip(
    tank_capacity: float,
    distance: int,
    distance_per_unit: float,
    stations: Iterable[tuple[float, int]],
) -> tuple[bool, float]:
    """Plan refuelling for a car that starts with an empty tank.

    Each station is ``(unit_price, position)``.  Returns ``(True, cost)``
    when the destination is reached, otherwise ``(False, farthest_distance)``.
    """
    if tank_capacity <= 0:
        raise ValueError("tank capacity must be positive")
    if distance_per_unit <= 0:
        raise ValueError("distance per unit of gas must be positive")
    if distance < 0:
        raise ValueError("distance must not be negative")
    points = [(float(price), position) for price, position in stations]
    if any(position < 0 for _, position in points):
        raise ValueError("station positions must not be negative")
    points.append((0.0, distance))
    points.sort(key=lambda station: station[1])
    prices = [price for price, _ in points]
    positions = [position for _, position in points]
    last = len(points) - 1
    full_range = tank_capacity * distance_per_unit

    def ahead(start: int, limit: float) -> Iterator[int]:
        for j in range(start + 1, last + 1):
            if positions[j] > limit:
                return
            yield j

    if positions[0] > 0:
        return False, 0.0

    tank = 0.0
    cost = 0.0
    travelled = 0.0
    i = 0
    while i < last:
        if positions[i + 1] > travelled + full_range:
            travelled += full_range
            break

        within_tank = ahead(i, travelled + tank * distance_per_unit)
        cheapest = min([i, *within_tank], key=prices.__getitem__)
        if cheapest != i:
            tank -= (positions[cheapest] - positions[i]) / distance_per_unit
            i = cheapest
            travelled = positions[i]
            continue

        in_reach = list(ahead(i, travelled + full_range))
        cheaper = next((j for j in in_reach if prices[j] < prices[i]), None)
        if cheaper is not None:
            needed = (positions[cheaper] - positions[i]) / distance_per_unit
            cost += (needed - tank) * prices[i]
            tank = 0.0
            i = cheaper
            travelled = positions[i]
            continue

        target = min(in_reach, key=prices.__getitem__)
        cost += (tank_capacity - tank) * prices[i]
        tank = tank_capacity - (positions[target] - positions[i]) / distance_per_unit
        i = target
        travelled = positions[i]

    if travelled < distance:
        return False, float(travelled)
    return True, cost