"""First-in first-out page replacement."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class PageStep:
    """Frame contents after a page reference; None marks an empty frame."""

    page: int
    frames: tuple[int | None, ...]
    fault: bool


def fifo_replace(pages: Iterable[int], frames: int) -> list[PageStep]:
    """Simulate FIFO replacement and return the state after every reference."""
    if frames < 1:
        raise ValueError("at least one frame is required")
    memory: list[int | None] = [None] * frames
    oldest = 0
    steps: list[PageStep] = []
    for page in pages:
        fault = page not in memory
        if fault:
            memory[oldest] = page
            oldest = (oldest + 1) % frames
        steps.append(PageStep(page, tuple(memory), fault))
    return steps


def page_faults(pages: Iterable[int], frames: int) -> int:
    """Number of page faults FIFO replacement incurs."""
    return sum(step.fault for step in fifo_replace(pages, frames))


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


def main(argv: Sequence[str] | None = None) -> int:
    """Read a reference string from standard input and print the FIFO trace."""
    parser = argparse.ArgumentParser(
        prog="fifo-paging", description="FIFO page replacement simulation."
    )
    parser.parse_args(argv)
    tokens = _tokens(sys.stdin)

    try:
        _prompt("Enter number of frames: ")
        frames = _read_int(tokens)
        _prompt("Enter number of pages: ")
        count = _read_int(tokens)
        _prompt("Enter page numbers: ")
        pages = [_read_int(tokens) for _ in range(count)]
        steps = fifo_replace(pages, frames)
    except (EOFError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    header = "Page Nos." + "".join(f"\t Frame {k}" for k in range(1, frames + 1))
    print(f"\n{header}")
    for step in steps:
        cells = "".join(
            f"{'-' if value is None else value}\t\t" for value in step.frames
        )
        print(f"\n{step.page}\t\t{cells}", end="")
    print(f"\nTotal Page Faults:\t{sum(step.fault for step in steps)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())