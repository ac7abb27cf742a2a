"""Command line front end reading whitespace-separated integers from stdin."""

from __future__ import annotations

import argparse
import sys
from itertools import islice
from typing import Iterator, Sequence

from oslabsim.bankers import format_need, need_matrix, safe_sequence
from oslabsim.cpu_scheduling import fcfs


class _Numbers:
    """Pulls integers from a token stream, complaining when it runs dry."""

    def __init__(self, text: str) -> None:
        try:
            values = [int(token) for token in text.split()]
        except ValueError as exc:
            raise ValueError("input must be whitespace-separated integers") from exc
        self._values: Iterator[int] = iter(values)

    def take(self, count: int) -> list[int]:
        chunk = list(islice(self._values, count))
        if len(chunk) < count:
            raise ValueError("not enough input values")
        return chunk


def _truncating_mean(total: int, count: int) -> int:
    quotient = abs(total) // count
    return quotient if total >= 0 else -quotient


def _bankers(numbers: _Numbers) -> None:
    processes, resources = numbers.take(2)
    if processes < 1 or resources < 1:
        raise ValueError("processes and resources must be positive")
    allocation = [numbers.take(resources) for _ in range(processes)]
    maximum = [numbers.take(resources) for _ in range(processes)]
    available = numbers.take(resources)

    print()
    print("Need Matrix:")
    sys.stdout.write(format_need(need_matrix(allocation, maximum)))

    sequence = safe_sequence(allocation, maximum, available)
    if sequence is None:
        print("System is not in a safe state.")
    else:
        print()
        print("System is in a safe state.")
        print("Safe sequence: " + "".join(f"P{index} " for index in sequence))


def _fcfs(numbers: _Numbers) -> None:
    (count,) = numbers.take(1)
    if count < 1:
        raise ValueError("at least one process is required")
    schedule = fcfs(numbers.take(count))
    timings = schedule.processes
    waiting = _truncating_mean(sum(p.waiting for p in timings), len(timings))
    turnaround = _truncating_mean(sum(p.turnaround for p in timings), len(timings))
    print(f"The average waiting time = {waiting}")
    print(f"The average turnaround time = {turnaround}")


_COMMANDS = {"bankers": _bankers, "fcfs": _fcfs}


def main(argv: Sequence[str] | None = None) -> int:
    """Run a simulation named on the command line with input from stdin."""
    parser = argparse.ArgumentParser(
        prog="oslabsim",
        description="Operating-system simulations fed with integers on stdin.",
    )
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser(
        "bankers",
        help="safety check: processes, resources, allocation, maximum, available",
    )
    commands.add_parser(
        "fcfs", help="first come first served averages: count, then burst times"
    )
    args = parser.parse_args(argv)

    try:
        _COMMANDS[args.command](_Numbers(sys.stdin.read()))
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())