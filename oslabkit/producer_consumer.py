"""A bounded circular buffer driven by an interactive producer/consumer menu."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from typing import Generic, TypeVar

T = TypeVar("T")

BUFFER_SIZE = 3


class BufferFullError(Exception):
    """Raised when producing into a full buffer."""


class BufferEmptyError(Exception):
    """Raised when consuming from an empty buffer."""


class BoundedBuffer(Generic[T]):
    """First-in first-out buffer with a fixed capacity."""

    def __init__(self, capacity: int = BUFFER_SIZE) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: deque[T] = deque()

    def __len__(self) -> int:
        return len(self._items)

    @property
    def full(self) -> bool:
        return len(self._items) >= self.capacity

    @property
    def empty(self) -> bool:
        return not self._items

    def produce(self, item: T) -> None:
        """Append an item, raising BufferFullError if there is no room."""
        if self.full:
            raise BufferFullError("buffer is full")
        self._items.append(item)

    def consume(self) -> T:
        """Remove and return the oldest item, raising BufferEmptyError if none."""
        if self.empty:
            raise BufferEmptyError("buffer is empty")
        return self._items.popleft()


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _prompt(text: str) -> None:
    print(text, end="", flush=True)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the produce/consume menu on standard input until exit or end of input."""
    parser = argparse.ArgumentParser(
        prog="producer-consumer", description="Bounded buffer simulation."
    )
    parser.parse_args(argv)
    tokens = _tokens(sys.stdin)
    buffer: BoundedBuffer[int] = BoundedBuffer()

    print("Producer-Consumer Problem (Using Semaphores)")
    print("1. Produce\n2. Consume\n3. Exit")

    while True:
        _prompt("\nEnter choice: ")
        token = next(tokens, None)
        if token is None:
            print()
            return 0
        try:
            choice = int(token)
        except ValueError:
            choice = 0

        if choice == 1:
            if buffer.full:
                print("Buffer is full! Producer is waiting...")
                continue
            _prompt("Enter item to produce: ")
            token = next(tokens, None)
            if token is None:
                print()
                return 0
            try:
                item = int(token)
            except ValueError:
                print("Invalid item! Try again.")
                continue
            buffer.produce(item)
            print(f"Produced: {item}")
        elif choice == 2:
            if buffer.empty:
                print("Buffer is empty! Consumer is waiting...")
                continue
            print(f"Consumed: {buffer.consume()}")
        elif choice == 3:
            return 0
        else:
            print("Invalid choice! Try again.")


if __name__ == "__main__":
    sys.exit(main())