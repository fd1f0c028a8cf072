"""Best-fit allocation of files into fixed memory blocks."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

MAX_FRAGMENT = 10000
"""Leftover space at or above this size is never considered a fit."""


@dataclass(frozen=True)
class Allocation:
    """Placement of one file; block fields are None when it did not fit."""

    file_index: int
    file_size: int
    block_index: int | None = None
    block_size: int | None = None

    @property
    def allocated(self) -> bool:
        return self.block_index is not None

    @property
    def fragment(self) -> int | None:
        """Space left unused in the chosen block."""
        if self.block_size is None:
            return None
        return self.block_size - self.file_size


def best_fit(blocks: Sequence[int], files: Sequence[int]) -> list[Allocation]:
    """Give each file, in order, the free block that leaves the least space over."""
    taken: set[int] = set()
    result: list[Allocation] = []
    for file_index, size in enumerate(files):
        candidates = [
            (block - size, index)
            for index, block in enumerate(blocks)
            if index not in taken and 0 <= block - size < MAX_FRAGMENT
        ]
        if not candidates:
            result.append(Allocation(file_index, size))
            continue
        _, chosen = min(candidates)
        taken.add(chosen)
        result.append(Allocation(file_index, size, chosen, blocks[chosen]))
    return result


def format_table(allocations: Iterable[Allocation]) -> str:
    """Render allocations as a tab-separated table with one-based numbers."""
    lines = ["File No\tFile Size\tBlock No\tBlock Size\tFragment"]
    for item in allocations:
        number = item.file_index + 1
        if item.allocated:
            lines.append(
                f"{number}\t\t{item.file_size}\t\t{item.block_index + 1}"
                f"\t\t{item.block_size}\t\t{item.fragment}"
            )
        else:
            lines.append(f"{number}\t\t{item.file_size}\t\tNot Allocated")
    return "\n".join(lines)


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
    """Read block and file sizes from standard input and print the allocation."""
    parser = argparse.ArgumentParser(
        prog="best-fit", description="Best-fit memory allocation."
    )
    parser.parse_args(argv)
    tokens = _tokens(sys.stdin)

    try:
        print("\nMemory Management Scheme - Best Fit")
        _prompt("Enter the number of blocks: ")
        block_count = _read_int(tokens)
        _prompt("Enter the number of files: ")
        file_count = _read_int(tokens)
        print("\nEnter the size of the blocks:")
        blocks = []
        for number in range(1, block_count + 1):
            _prompt(f"Block {number}: ")
            blocks.append(_read_int(tokens))
        print("\nEnter the size of the files:")
        files = []
        for number in range(1, file_count + 1):
            _prompt(f"File {number}: ")
            files.append(_read_int(tokens))
    except (EOFError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print()
    print(format_table(best_fit(blocks, files)))
    return 0


if __name__ == "__main__":
    sys.exit(main())