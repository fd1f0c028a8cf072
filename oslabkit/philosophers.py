"""Dining philosophers, kept deadlock-free by limiting how many sit at once."""

from __future__ import annotations

import argparse
import sys
import threading
import time
from collections.abc import Callable, Sequence


def dine(
    count: int = 5,
    seats: int | None = None,
    eat_time: float = 1.0,
    report: Callable[[str], object] | None = None,
) -> list[int]:
    """Let each philosopher eat once and return the order in which they finished.

    At most ``seats`` philosophers (default ``count - 1``) are in the room at a
    time, so at least one of them can always pick up both chopsticks.
    """
    if count < 2:
        raise ValueError("at least two philosophers are required")
    if seats is None:
        seats = count - 1
    if not 1 <= seats < count:
        raise ValueError(f"seats must be between 1 and {count - 1}")
    if eat_time < 0:
        raise ValueError("eat_time must not be negative")

    emit = print if report is None else report
    room = threading.Semaphore(seats)
    chopsticks = [threading.Lock() for _ in range(count)]
    output = threading.Lock()
    finished: list[int] = []

    def say(message: str) -> None:
        with output:
            emit(message)

    def philosopher(number: int) -> None:
        left = chopsticks[number]
        right = chopsticks[(number + 1) % count]
        with room:
            say(f"Philosopher {number} has entered the room")
            with left, right:
                say(f"Philosopher {number} is eating")
                time.sleep(eat_time)
                with output:
                    emit(f"Philosopher {number} has finished eating")
                    finished.append(number)

    threads = [
        threading.Thread(target=philosopher, args=(number,), name=f"philosopher-{number}")
        for number in range(count)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return finished


def main(argv: Sequence[str] | None = None) -> int:
    """Run the dining philosophers simulation and print what happens."""
    parser = argparse.ArgumentParser(
        prog="philosophers", description="Dining philosophers simulation."
    )
    parser.add_argument("--count", type=int, default=5, help="number of philosophers")
    parser.add_argument(
        "--seats", type=int, default=None, help="room capacity (default: count - 1)"
    )
    parser.add_argument(
        "--eat-time", type=float, default=1.0, help="seconds each philosopher eats"
    )
    args = parser.parse_args(argv)
    try:
        dine(args.count, args.seats, args.eat_time, lambda line: print(line, flush=True))
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())