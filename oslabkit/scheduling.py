"""CPU scheduling: first-come first-served, round robin and shortest remaining time next."""

from __future__ import annotations

import argparse
import itertools
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

MAX_FCFS_PROCESSES = 100
MAX_RR_PROCESSES = 10


@dataclass(frozen=True)
class Process:
    """A job to schedule: its number, arrival time and CPU burst."""

    pid: int
    arrival: int
    burst: int


@dataclass(frozen=True)
class ScheduleEntry:
    """A finished process and the time at which it completed."""

    process: Process
    completion: int

    @property
    def turnaround(self) -> int:
        return self.completion - self.process.arrival

    @property
    def waiting(self) -> int:
        return self.turnaround - self.process.burst


def _arrival_order(processes: Iterable[Process]) -> list[Process]:
    # Exchange sort on arrival time; its tie-breaking decides which of
    # several simultaneous arrivals runs first, so it is kept as is.
    ordered = list(processes)
    for i in range(len(ordered) - 1):
        for j in range(i + 1, len(ordered)):
            if ordered[i].arrival > ordered[j].arrival:
                ordered[i], ordered[j] = ordered[j], ordered[i]
    return ordered


def _require_positive_bursts(processes: Sequence[Process]) -> None:
    for proc in processes:
        if proc.burst < 1:
            raise ValueError(f"process P{proc.pid} needs a burst of at least 1")


def fcfs(processes: Iterable[Process]) -> list[ScheduleEntry]:
    """Run processes to completion in order of arrival."""
    now = 0
    entries: list[ScheduleEntry] = []
    for proc in _arrival_order(processes):
        now = max(now, proc.arrival) + proc.burst
        entries.append(ScheduleEntry(proc, now))
    return entries


def round_robin(processes: Iterable[Process], quantum: int) -> list[ScheduleEntry]:
    """Cycle through processes in input order, giving each at most one quantum per turn.

    Entries are returned in order of completion.
    """
    if quantum < 1:
        raise ValueError("time quantum must be at least 1")
    procs = list(processes)
    _require_positive_bursts(procs)
    if not procs:
        return []

    remaining = [proc.burst for proc in procs]
    finished: list[ScheduleEntry] = []
    now = 0
    for index in itertools.cycle(range(len(procs))):
        if len(finished) == len(procs):
            break
        proc = procs[index]
        if remaining[index] > 0 and proc.arrival <= now:
            step = min(remaining[index], quantum)
            now += step
            remaining[index] -= step
            if remaining[index] == 0:
                finished.append(ScheduleEntry(proc, now))
        else:
            pending = [p.arrival for p, left in zip(procs, remaining) if left > 0]
            if pending:
                now = max(now, min(pending))
    return finished


def srtn(processes: Iterable[Process]) -> list[ScheduleEntry]:
    """Preemptive shortest-remaining-time-next, one time unit at a time.

    Ties go to the earlier process in the input; entries are in completion order.
    """
    procs = list(processes)
    _require_positive_bursts(procs)
    remaining = [proc.burst for proc in procs]
    finished: list[ScheduleEntry] = []
    now = 0
    while len(finished) < len(procs):
        ready = [
            (left, index)
            for index, (proc, left) in enumerate(zip(procs, remaining))
            if proc.arrival <= now and left > 0
        ]
        now += 1
        if not ready:
            continue
        _, chosen = min(ready)
        remaining[chosen] -= 1
        if remaining[chosen] == 0:
            finished.append(ScheduleEntry(procs[chosen], now))
    return finished


def averages(entries: Iterable[ScheduleEntry]) -> tuple[float, float]:
    """Return the mean waiting time and mean turnaround time."""
    items = list(entries)
    if not items:
        raise ValueError("no processes to average over")
    waiting = sum(entry.waiting for entry in items) / len(items)
    turnaround = sum(entry.turnaround for entry in items) / len(items)
    return waiting, turnaround


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str]) -> int:
    try:
        token = next(tokens)
    except StopIteration:
        raise EOFError("unexpected end of input") from None
    return int(token)


def _prompt(text: str) -> None:
    print(text, end="", flush=True)


def _run_fcfs(tokens: Iterator[str]) -> int:
    _prompt(f"Enter the number of processes (max {MAX_FCFS_PROCESSES}): ")
    count = _read_int(tokens)
    if count > MAX_FCFS_PROCESSES:
        print(
            "Error: Number of processes exceeds the maximum limit of "
            f"{MAX_FCFS_PROCESSES}."
        )
        return 1
    processes = []
    for pid in range(1, count + 1):
        _prompt(f"Enter arrival time and burst time for process P{pid}: ")
        arrival = _read_int(tokens)
        burst = _read_int(tokens)
        processes.append(Process(pid, arrival, burst))

    print("\nProcess\tArrival\tBurst\tCompletion\tTurnaround\tWaiting")
    for entry in fcfs(processes):
        proc = entry.process
        print(
            f"P{proc.pid}\t{proc.arrival}\t{proc.burst}\t{entry.completion}"
            f"\t\t{entry.turnaround}\t\t{entry.waiting}"
        )
    return 0


def _run_round_robin(tokens: Iterator[str]) -> int:
    _prompt(f"Enter total number of processes (max {MAX_RR_PROCESSES}): ")
    count = _read_int(tokens)
    if count > MAX_RR_PROCESSES:
        raise ValueError(f"at most {MAX_RR_PROCESSES} processes are supported")
    processes = []
    for pid in range(1, count + 1):
        _prompt(f"Enter Arrival Time and Burst Time for Process {pid}: ")
        arrival = _read_int(tokens)
        burst = _read_int(tokens)
        processes.append(Process(pid, arrival, burst))
    _prompt("Enter Time Quantum: ")
    quantum = _read_int(tokens)

    entries = round_robin(processes, quantum)
    waiting, turnaround = averages(entries)
    print("\nProcess\tBurst\tTAT\tWaiting")
    for entry in entries:
        print(
            f"P{entry.process.pid}\t{entry.process.burst}"
            f"\t{entry.turnaround}\t{entry.waiting}"
        )
    print(f"\nAverage Waiting Time: {waiting:.2f}", end="")
    print(f"\nAverage Turnaround Time: {turnaround:.2f}")
    return 0


def _run_srtn(tokens: Iterator[str]) -> int:
    _prompt("Enter number of processes: ")
    count = _read_int(tokens)
    processes = []
    for pid in range(1, count + 1):
        _prompt(f"Enter arrival time for Process P{pid}: ")
        arrival = _read_int(tokens)
        _prompt(f"Enter burst time for Process P{pid}: ")
        burst = _read_int(tokens)
        processes.append(Process(pid, arrival, burst))

    entries = srtn(processes)
    waiting, turnaround = averages(entries)
    print("\nProcess\t| Turnaround Time | Waiting Time")
    for entry in entries:
        print(f"P[{entry.process.pid}]\t|\t{entry.turnaround}\t|\t{entry.waiting}")
    print(f"\nAverage Waiting Time: {waiting:.2f}")
    print(f"Average Turnaround Time: {turnaround:.2f}")
    return 0


_RUNNERS = {"fcfs": _run_fcfs, "rr": _run_round_robin, "srtn": _run_srtn}


def main(argv: Sequence[str] | None = None) -> int:
    """Read processes from standard input and print the chosen schedule."""
    parser = argparse.ArgumentParser(
        prog="schedule", description="CPU scheduling simulations."
    )
    parser.add_argument(
        "algorithm",
        choices=sorted(_RUNNERS),
        help="fcfs: first come first served, rr: round robin, "
        "srtn: shortest remaining time next",
    )
    args = parser.parse_args(argv)
    try:
        return _RUNNERS[args.algorithm](_tokens(sys.stdin))
    except (EOFError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())