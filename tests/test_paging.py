import io

import pytest

from oslabkit.paging import fifo_replace, main, page_faults

BELADY = [1, 2, 3, 4, 1, 2, 5, 1, 2, 3, 4, 5]


def test_belady_reference_string():
    assert page_faults(BELADY, 3) == 9


def test_belady_anomaly_more_frames_more_faults():
    assert page_faults(BELADY, 4) > page_faults(BELADY, 3)


def test_repeated_page_is_a_hit():
    steps = fifo_replace([7, 7, 7], 2)
    assert [s.fault for s in steps] == [True, False, False]


def test_oldest_page_is_evicted_first():
    steps = fifo_replace([1, 2, 3, 4], 3)
    assert 1 not in steps[-1].frames
    assert set(steps[-1].frames) == {2, 3, 4}


def test_empty_frames_are_none_until_filled():
    steps = fifo_replace([5], 3)
    assert steps[0].frames.count(None) == 2
    assert 5 in steps[0].frames


def test_invariants():
    steps = fifo_replace(BELADY, 3)
    assert [s.page for s in steps] == BELADY
    for step in steps:
        assert len(step.frames) == 3
        assert step.page in step.frames
    assert len(set(BELADY)) <= page_faults(BELADY, 3) <= len(BELADY)


def test_faults_equal_distinct_pages_when_all_fit():
    pages = [3, 1, 3, 2, 1]
    assert page_faults(pages, len(set(pages))) == len(set(pages))


def test_no_frames_raises():
    with pytest.raises(ValueError):
        fifo_replace([1], 0)


def test_main_prints_trace(monkeypatch, capsys):
    text = "3\n12\n" + " ".join(map(str, BELADY)) + "\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Page Nos.\t Frame 1\t Frame 2\t Frame 3" in out
    assert "\nTotal Page Faults:\t9\n" in out


def test_main_rejects_zero_frames(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n1\n1\n"))
    assert main([]) == 1