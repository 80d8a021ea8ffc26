import pytest

from patsolve.shortest_paths import bike_management, emergency, travel_plan

EMERGENCY_ROADS = [(0, 1, 1), (0, 2, 2), (0, 3, 1), (1, 2, 1), (2, 4, 1), (3, 4, 1)]
TRAVEL_HIGHWAYS = [(0, 1, 1, 20), (1, 3, 2, 30), (0, 3, 4, 10), (0, 2, 2, 20), (2, 3, 1, 20)]


def test_emergency_sample():
    assert emergency([1, 2, 1, 5, 3], EMERGENCY_ROADS, 0, 2) == (2, 4)


def test_emergency_same_city():
    teams = [4, 7, 9]
    assert emergency(teams, [(0, 1, 3), (1, 2, 3)], 1, 1) == (1, teams[1])


def test_emergency_single_route_gathers_every_team():
    teams = [1, 2, 3, 4]
    roads = [(0, 1, 5), (1, 2, 5), (2, 3, 5)]
    count, gathered = emergency(teams, roads, 0, 3)
    assert count == 1
    assert gathered == sum(teams)


def test_emergency_is_symmetric_in_count():
    teams = [1, 2, 1, 5, 3]
    forward = emergency(teams, EMERGENCY_ROADS, 0, 4)
    backward = emergency(teams, EMERGENCY_ROADS, 4, 0)
    assert forward[0] == backward[0]
    assert forward[1] == backward[1]


def test_emergency_rejects_bad_city():
    with pytest.raises(ValueError):
        emergency([1, 1], [(0, 1, 1)], 0, 5)


def test_bike_management_sample():
    roads = [(0, 1, 1), (0, 2, 1), (0, 3, 3), (1, 3, 1), (2, 3, 1)]
    assert bike_management(10, [6, 7, 0], 3, roads) == (3, [0, 2, 3], 0)


def test_bike_management_collects_surplus():
    capacity = 10
    surplus = 3
    send, route, back = bike_management(capacity, [capacity // 2 + surplus], 1, [(0, 1, 4)])
    assert route == [0, 1]
    assert back == surplus
    assert send == back - surplus


def test_bike_management_route_ends():
    roads = [(0, 1, 2), (1, 2, 2), (0, 2, 5)]
    _, route, _ = bike_management(10, [1, 9], 2, roads)
    assert route[0] == 0
    assert route[-1] == 2


def test_bike_management_unreachable():
    with pytest.raises(ValueError):
        bike_management(10, [5, 5], 2, [(0, 1, 1)])


def test_travel_plan_sample():
    assert travel_plan(4, TRAVEL_HIGHWAYS, 0, 3) == ([0, 2, 3], 3, 40)


def test_travel_plan_totals_match_route():
    route, distance, cost = travel_plan(4, TRAVEL_HIGHWAYS, 1, 2)
    edges = {}
    for a, b, length, price in TRAVEL_HIGHWAYS:
        edges[(a, b)] = edges[(b, a)] = (length, price)
    steps = [edges[pair] for pair in zip(route, route[1:])]
    assert route[0] == 1 and route[-1] == 2
    assert distance == sum(step[0] for step in steps)
    assert cost == sum(step[1] for step in steps)


def test_travel_plan_same_city():
    assert travel_plan(3, [(0, 1, 2, 2)], 2, 2) == ([2], 0, 0)


def test_travel_plan_unreachable():
    with pytest.raises(ValueError):
        travel_plan(3, [(0, 1, 2, 2)], 0, 2)