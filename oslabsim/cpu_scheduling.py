"""CPU scheduling for processes that all arrive at time zero."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Sequence

# A priority value at or above this never gets selected by the scheduler.
PRIORITY_CEILING = 9999


@dataclass(frozen=True)
class ProcessTiming:
    """Timing of one process in a schedule (pids are 1-based)."""

    pid: int
    burst: int
    waiting: int
    turnaround: int
    priority: int | None = None


@dataclass(frozen=True)
class Schedule:
    """Processes with their timings, in the order they are reported."""

    processes: tuple[ProcessTiming, ...]

    def average_waiting(self) -> float:
        """Mean waiting time over all processes."""
        return sum(p.waiting for p in self.processes) / len(self.processes)

    def average_turnaround(self) -> float:
        """Mean turnaround time over all processes."""
        return sum(p.turnaround for p in self.processes) / len(self.processes)

    def format_table(self) -> str:
        """Render the schedule as a tab-separated table with averages."""
        with_priority = any(p.priority is not None for p in self.processes)
        if with_priority:
            lines = ["Process\tBurst\tPriority\tWaiting\tTurnaround"]
            lines.extend(
                f"{p.pid}\t{p.burst}\t{p.priority}\t\t{p.waiting}\t{p.turnaround}"
                for p in self.processes
            )
        else:
            lines = ["Process\tBurst\tWaiting\tTurnaround"]
            lines.extend(
                f"{p.pid}\t{p.burst}\t{p.waiting}\t{p.turnaround}"
                for p in self.processes
            )
        lines.append("")
        lines.append(f"Average Waiting Time = {self.average_waiting():.2f}")
        lines.append(f"Average Turnaround Time = {self.average_turnaround():.2f}")
        return "\n".join(lines)


def _as_bursts(bursts: Iterable[int]) -> list[int]:
    values = list(bursts)
    if not values:
        raise ValueError("at least one process is required")
    return values


def _require_positive(bursts: Sequence[int]) -> None:
    if any(b <= 0 for b in bursts):
        raise ValueError("burst times must be positive")


def _run_in_order(order: Iterable[tuple[int, int]]) -> tuple[ProcessTiming, ...]:
    clock = 0
    timings = []
    for pid, burst in order:
        timings.append(ProcessTiming(pid, burst, clock, clock + burst))
        clock += burst
    return tuple(timings)


def fcfs(bursts: Iterable[int]) -> Schedule:
    """First come, first served, in the order given."""
    values = _as_bursts(bursts)
    return Schedule(_run_in_order(enumerate(values, start=1)))


def sjf(bursts: Iterable[int]) -> Schedule:
    """Non-preemptive shortest job first; equal bursts keep their input order."""
    values = _as_bursts(bursts)
    order = sorted(enumerate(values, start=1), key=lambda item: item[1])
    return Schedule(_run_in_order(order))


def priority_preemptive(bursts: Iterable[int], priorities: Iterable[int]) -> Schedule:
    """Preemptive priority scheduling; a lower number is a higher priority.

    Results are reported in input order.
    """
    values = _as_bursts(bursts)
    ranks = list(priorities)
    if len(ranks) != len(values):
        raise ValueError("one priority is required per process")
    _require_positive(values)
    if any(r >= PRIORITY_CEILING for r in ranks):
        raise ValueError(f"priorities must be below {PRIORITY_CEILING}")

    # With every process present from the start, the chosen process keeps the
    # CPU until it finishes, so the run order is a stable sort by priority.
    finish: dict[int, int] = {}
    clock = 0
    for index in sorted(range(len(values)), key=ranks.__getitem__):
        clock += values[index]
        finish[index] = clock

    return Schedule(
        tuple(
            ProcessTiming(
                pid=index + 1,
                burst=burst,
                waiting=finish[index] - burst,
                turnaround=finish[index],
                priority=rank,
            )
            for index, (burst, rank) in enumerate(zip(values, ranks))
        )
    )


def round_robin(bursts: Iterable[int], quantum: int) -> Schedule:
    """Round robin with a fixed time quantum, reported in input order."""
    values = _as_bursts(bursts)
    _require_positive(values)
    if quantum <= 0:
        raise ValueError("time quantum must be positive")

    remaining = list(values)
    finish: dict[int, int] = {}
    pending = deque(range(len(values)))
    clock = 0
    while pending:
        index = pending.popleft()
        if remaining[index] <= quantum:
            clock += remaining[index]
            remaining[index] = 0
            finish[index] = clock
        else:
            clock += quantum
            remaining[index] -= quantum
            pending.append(index)

    return Schedule(
        tuple(
            ProcessTiming(index + 1, burst, finish[index] - burst, finish[index])
            for index, burst in enumerate(values)
        )
    )