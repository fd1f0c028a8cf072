# oslabkit

Classic operating-system algorithms, usable as a library and from the command
line. The package has no runtime dependencies.

| Topic | Module | Command |
|---|---|---|
| Banker's algorithm (deadlock avoidance) | `oslabkit.banker` | `oslabkit-banker` |
| Best-fit memory allocation | `oslabkit.memory` | `oslabkit-bestfit` |
| FIFO page replacement | `oslabkit.paging` | `oslabkit-fifo` |
| Bounded producer/consumer buffer | `oslabkit.producer_consumer` | `oslabkit-buffer` |
| CPU scheduling: FCFS, Round Robin, SRTN | `oslabkit.scheduling` | `oslabkit-schedule` |
| Dining philosophers | `oslabkit.philosophers` | `oslabkit-philosophers` |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

Most commands prompt for their input on standard input and print a table or a
sequence. Malformed or missing input is reported on standard error with exit
status 1.

```
oslabkit-banker                 # find a safe sequence, or report an unsafe state
oslabkit-bestfit                # place files into memory blocks by best fit
oslabkit-fifo                   # trace FIFO page replacement and count page faults
oslabkit-buffer                 # produce/consume menu over a three-slot buffer
oslabkit-schedule fcfs          # first come, first served (at most 100 processes)
oslabkit-schedule rr            # round robin (at most 10 processes), asks for a quantum
oslabkit-schedule srtn          # shortest remaining time next
oslabkit-philosophers           # five philosophers, four seats, one second of eating
```

`oslabkit-buffer` shows a menu (1 produce, 2 consume, 3 exit) and runs until
`3` is chosen or input ends.

`oslabkit-philosophers` takes no input; it accepts `--count`, `--seats`
(default: count − 1) and `--eat-time` (seconds, default 1.0).

## Library

### Banker's algorithm

`oslabkit.banker.safe_sequence(allocation, maximum, available)` takes the
allocation matrix, the maximum-demand matrix and the available-resources
vector. It returns a list of process indices in an order in which all of them
can finish, or `None` if the state is unsafe. Processes are scanned in index
order on every pass. Rows of the wrong width, or matrices with different
numbers of processes, raise `ValueError`.

### Best-fit allocation

`oslabkit.memory.best_fit(blocks, files)` gives each file, in order, the free
block that leaves the least space over, and returns one `Allocation` per file.
An `Allocation` has `file_index`, `file_size`, `block_index` and `block_size`
(both `None` when the file did not fit), plus the properties `allocated` and
`fragment`. Leftover space of 10000 or more is never counted as a fit.
`format_table(allocations)` renders the result as a tab-separated table with
one-based file and block numbers.

### FIFO page replacement

`oslabkit.paging.fifo_replace(pages, frames)` returns a list of `PageStep`
records, one per page reference, each holding the `page`, the `frames` tuple
after that reference (`None` for an empty frame) and whether it was a `fault`.
`page_faults(pages, frames)` returns the number of faults. Fewer than one
frame raises `ValueError`.

### Producer and consumer

`oslabkit.producer_consumer.BoundedBuffer(capacity=3)` is a first-in,
first-out buffer of fixed capacity with `full` and `empty` properties and
`len()` support. `produce(item)` raises `BufferFullError` when there is no
room; `consume()` returns the oldest item or raises `BufferEmptyError`.

### CPU scheduling

`oslabkit.scheduling` describes each job as a `Process(pid, arrival, burst)`
and returns one `ScheduleEntry(process, completion)` per finished process,
with `turnaround` and `waiting` properties:

- `fcfs(processes)` — runs processes to completion in order of arrival;
- `round_robin(processes, quantum)` — cycles through processes in input order,
  at most one quantum per turn; entries come in order of completion;
- `srtn(processes)` — preemptive shortest remaining time next, one time unit
  at a time, ties going to the earlier process; entries in completion order.

`round_robin` and `srtn` raise `ValueError` for a burst below 1, and
`round_robin` for a quantum below 1. `averages(entries)` returns the mean
waiting time and mean turnaround time, raising `ValueError` when there are no
entries.

### Dining philosophers

`oslabkit.philosophers.dine(count=5, seats=None, eat_time=1.0, report=None)`
starts one thread per philosopher. Each enters the room, takes both
neighbouring chopsticks, eats for `eat_time` seconds and leaves; at most
`seats` (default `count - 1`) are in the room at once, so the meal cannot
deadlock. Every event is passed to `report` (default: `print`), and the list
of philosophers in the order they finished eating is returned. Invalid
counts, seat numbers or a negative eating time raise `ValueError`.

## Limitations

- Each philosopher eats exactly once; the simulation does not loop.
- The producer/consumer command is a single-threaded menu over the buffer; it
  does not run separate producer and consumer threads.
- Commands read plain whitespace-separated integers from standard input; there
  is no file or option-based input apart from the philosophers' options.