import pytest

from patsolve.table_tennis import Serving, simulate_tables

EXAMPLE_PAIRS = [
    ("20:52:00", 10, 0),
    ("08:00:00", 20, 0),
    ("08:02:00", 30, 0),
    ("20:51:00", 10, 0),
    ("08:10:00", 5, 0),
    ("08:12:00", 10, 1),
    ("20:50:00", 10, 0),
    ("08:01:30", 15, 1),
    ("20:53:00", 10, 1),
]


def test_worked_example():
    servings, counts = simulate_tables(EXAMPLE_PAIRS, 3, [2])
    assert servings == [
        Serving("08:00:00", "08:00:00", 0),
        Serving("08:01:30", "08:01:30", 0),
        Serving("08:02:00", "08:02:00", 0),
        Serving("08:12:00", "08:16:30", 5),
        Serving("08:10:00", "08:20:00", 10),
        Serving("20:50:00", "20:50:00", 0),
        Serving("20:51:00", "20:51:00", 0),
        Serving("20:52:00", "20:52:00", 0),
    ]
    assert counts == [3, 3, 2]


def test_counts_match_servings():
    servings, counts = simulate_tables(EXAMPLE_PAIRS, 3, [2])
    assert sum(counts) == len(servings)


def test_vip_pair_jumps_the_queue_for_vip_table():
    pairs = [
        ("08:00:00", 30, 0),
        ("08:00:00", 30, 0),
        ("08:10:00", 30, 0),
        ("08:20:00", 30, 1),
    ]
    servings, counts = simulate_tables(pairs, 2, [1])
    assert [s.arrival for s in servings] == ["08:00:00", "08:00:00", "08:20:00", "08:10:00"]
    assert servings[2].served == servings[3].served


def test_play_is_capped_at_two_hours():
    pairs = [("08:00:00", 300, 0), ("08:00:00", 10, 0)]
    servings, _ = simulate_tables(pairs, 1, [])
    assert servings[1].wait_minutes == 120


def test_arrival_at_closing_is_not_served():
    servings, counts = simulate_tables([("21:00:00", 10, 0)], 1, [])
    assert servings == []
    assert counts == [0]


def test_no_tables():
    servings, counts = simulate_tables([("09:00:00", 10, 0)], 0, [])
    assert servings == []
    assert counts == []


def test_vip_table_out_of_range():
    with pytest.raises(ValueError):
        simulate_tables([("09:00:00", 10, 0)], 2, [3])


def test_bad_time():
    with pytest.raises(ValueError):
        simulate_tables([("nine", 10, 0)], 1, [])