import io

import pytest

from oslabkit.banker import main, safe_sequence

ALLOCATION = [[0, 1, 0], [2, 0, 0], [3, 0, 2], [2, 1, 1], [0, 0, 2]]
MAXIMUM = [[7, 5, 3], [3, 2, 2], [9, 0, 2], [2, 2, 2], [4, 3, 3]]
AVAILABLE = [3, 3, 2]


def test_textbook_example():
    assert safe_sequence(ALLOCATION, MAXIMUM, AVAILABLE) == [1, 3, 4, 0, 2]


def test_sequence_is_permutation_and_replays_safely():
    order = safe_sequence(ALLOCATION, MAXIMUM, AVAILABLE)
    assert sorted(order) == list(range(len(ALLOCATION)))
    work = list(AVAILABLE)
    for index in order:
        need = [m - a for m, a in zip(MAXIMUM[index], ALLOCATION[index])]
        assert all(n <= w for n, w in zip(need, work))
        work = [w + a for w, a in zip(work, ALLOCATION[index])]


def test_unsafe_state_returns_none():
    assert safe_sequence([[1], [1]], [[3], [3]], [1]) is None


def test_no_processes_is_trivially_safe():
    assert safe_sequence([], [], [1, 2]) == []


def test_inputs_are_not_modified():
    available = list(AVAILABLE)
    safe_sequence(ALLOCATION, MAXIMUM, available)
    assert available == AVAILABLE


def test_mismatched_process_count_raises():
    with pytest.raises(ValueError):
        safe_sequence([[0]], [[1], [1]], [1])


def test_mismatched_resource_width_raises():
    with pytest.raises(ValueError):
        safe_sequence([[0, 0]], [[1, 1]], [1])


def _feed(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


def test_main_prints_safe_sequence(monkeypatch, capsys):
    lines = ["5", "3"]
    lines += [" ".join(map(str, row)) for row in ALLOCATION]
    lines += [" ".join(map(str, row)) for row in MAXIMUM]
    lines.append(" ".join(map(str, AVAILABLE)))
    _feed(monkeypatch, "\n".join(lines) + "\n")
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Following is the SAFE Sequence:" in out
    assert "P1 -> P3 -> P4 -> P0 -> P2" in out


def test_main_reports_unsafe(monkeypatch, capsys):
    _feed(monkeypatch, "1 1\n1\n3\n1\n")
    assert main([]) == 0
    assert "The following system is not safe" in capsys.readouterr().out


def test_main_rejects_truncated_input(monkeypatch):
    _feed(monkeypatch, "2 2\n1 0\n")
    assert main([]) == 1