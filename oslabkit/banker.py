"""Banker's algorithm: find a safe order in which processes can finish."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import TextIO


def safe_sequence(
    allocation: Sequence[Sequence[int]],
    maximum: Sequence[Sequence[int]],
    available: Sequence[int],
) -> list[int] | None:
    """Return process indices in a safe completion order, or None if the state is unsafe.

    Each pass scans the processes in index order and lets every one whose
    remaining need fits into the free resources finish and release what it holds.
    """
    if len(allocation) != len(maximum):
        raise ValueError("allocation and maximum must describe the same processes")
    width = len(available)
    for row in (*allocation, *maximum):
        if len(row) != width:
            raise ValueError(f"every row must have {width} resource columns")

    need = [
        [most - held for most, held in zip(max_row, alloc_row)]
        for max_row, alloc_row in zip(maximum, allocation)
    ]
    work = list(available)
    finished = [False] * len(allocation)
    order: list[int] = []

    for _ in allocation:
        for index, (need_row, alloc_row) in enumerate(zip(need, allocation)):
            if finished[index] or any(n > w for n, w in zip(need_row, work)):
                continue
            order.append(index)
            work = [w + held for w, held in zip(work, alloc_row)]
            finished[index] = True

    return order if all(finished) else None


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str]) -> int:
    try:
        token = next(tokens)
    except StopIteration:
        raise EOFError("unexpected end of input") from None
    return int(token)


def _read_matrix(tokens: Iterator[str], rows: int, cols: int) -> list[list[int]]:
    return [[_read_int(tokens) for _ in range(cols)] for _ in range(rows)]


def _prompt(text: str) -> None:
    print(text, end="", flush=True)


def main(argv: Sequence[str] | None = None) -> int:
    """Read the system state from standard input and print a safe sequence."""
    parser = argparse.ArgumentParser(
        prog="banker", description="Check a resource allocation state for safety."
    )
    parser.parse_args(argv)
    stream: TextIO = sys.stdin
    tokens = _tokens(stream)

    try:
        _prompt("Enter number of processes: ")
        processes = _read_int(tokens)
        _prompt("Enter number of resources: ")
        resources = _read_int(tokens)
        print(f"Enter allocation matrix alloc[{processes}][{resources}]:")
        allocation = _read_matrix(tokens, processes, resources)
        print(f"Enter maximum matrix max[{processes}][{resources}]:")
        maximum = _read_matrix(tokens, processes, resources)
        print(f"Enter available resources matrix avail[{resources}]:")
        available = [_read_int(tokens) for _ in range(resources)]
    except (EOFError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    order = safe_sequence(allocation, maximum, available)
    if order is None:
        print("The following system is not safe")
    else:
        print("Following is the SAFE Sequence:")
        print(" -> ".join(f"P{index}" for index in order))
    return 0


if __name__ == "__main__":
    sys.exit(main())