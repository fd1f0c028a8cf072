import re

import pytest

from oslabkit.philosophers import dine, main

_LINE = re.compile(r"Philosopher (\d+) (has entered the room|is eating|has finished eating)")


def _run(count, seats=None):
    messages = []
    order = dine(count, seats, 0.005, messages.append)
    return order, messages


def _parse(messages):
    events = []
    for message in messages:
        match = _LINE.fullmatch(message)
        assert match is not None
        events.append((int(match.group(1)), match.group(2)))
    return events


def test_every_philosopher_finishes_once():
    order, _ = _run(5)
    assert sorted(order) == [0, 1, 2, 3, 4]


def test_each_philosopher_reports_in_order():
    _, messages = _run(5)
    events = _parse(messages)
    assert len(events) == 15
    for number in range(5):
        own = [kind for who, kind in events if who == number]
        assert own == ["has entered the room", "is eating", "has finished eating"]


def test_neighbours_never_eat_together():
    count = 5
    _, messages = _run(count)
    eating = set()
    for who, kind in _parse(messages):
        if kind == "is eating":
            assert (who - 1) % count not in eating
            assert (who + 1) % count not in eating
            eating.add(who)
        elif kind == "has finished eating":
            eating.discard(who)
    assert eating == set()


@pytest.mark.parametrize("seats", [1, 2, 4])
def test_room_never_exceeds_seats(seats):
    _, messages = _run(5, seats)
    inside = 0
    peak = 0
    for _, kind in _parse(messages):
        if kind == "has entered the room":
            inside += 1
            peak = max(peak, inside)
        elif kind == "has finished eating":
            inside -= 1
    assert peak <= seats
    assert inside == 0


def test_finish_order_matches_reports():
    order, messages = _run(4)
    finished = [who for who, kind in _parse(messages) if kind == "has finished eating"]
    assert finished == order


@pytest.mark.parametrize("count,seats", [(1, None), (5, 5), (5, 0), (3, 7)])
def test_invalid_configuration(count, seats):
    with pytest.raises(ValueError):
        dine(count, seats, 0, lambda _: None)


def test_negative_eat_time():
    with pytest.raises(ValueError):
        dine(3, None, -1, lambda _: None)


def test_main_prints_all_events(capsys):
    assert main(["--count", "3", "--eat-time", "0"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 9
    assert sum("is eating" in line for line in lines) == 3


def test_main_rejects_bad_seats(capsys):
    assert main(["--count", "3", "--seats", "3", "--eat-time", "0"]) == 1
    assert "error" in capsys.readouterr().err