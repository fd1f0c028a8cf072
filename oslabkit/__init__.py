"""Banker's algorithm, best-fit allocation, FIFO paging, a bounded buffer, CPU scheduling and dining philosophers."""

__version__ = "0.1.0"