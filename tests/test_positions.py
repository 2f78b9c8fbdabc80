from datetime import datetime, timedelta

from kanbanify.positions import POSITION_GAP, dense_positions, next_position, position_for_slot, sort_key


def test_next_position_starts_at_gap_and_appends_past_max():
    assert next_position([]) == POSITION_GAP
    assert next_position([None]) == 1000
    assert next_position([1000, 3000, 2000]) == 4000

    positions = []
    for _ in range(4):
        positions.append(next_position(positions))
    assert positions == [1000, 2000, 3000, 4000]


def test_position_for_slot_takes_occupant_position():
    siblings = [1000, 2000, 3000]
    assert position_for_slot(siblings, 0) == 1000
    assert position_for_slot(siblings, 2) == 3000
    assert position_for_slot(siblings, 3) == 4000
    assert position_for_slot(siblings, -5) == 1000
    assert position_for_slot([], 0) == 1000


def test_dense_positions_renumbers_in_order():
    assert dense_positions(["c", "a", "b"]) == [("c", 1000), ("a", 2000), ("b", 3000)]
    assert dense_positions([]) == []


def test_sort_key_breaks_ties_by_creation_then_id():
    now = datetime(2024, 1, 1)
    items = [
        (1000, now + timedelta(seconds=1), "a"),
        (1000, now, "z"),
        (500, now + timedelta(days=1), "m"),
        (1000, now, "b"),
    ]
    ordered = sorted(items, key=lambda item: sort_key(*item))
    assert [item[2] for item in ordered] == ["m", "b", "z", "a"]
