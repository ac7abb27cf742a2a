"""Banker's algorithm safety check."""

from __future__ import annotations

from typing import Sequence

Matrix = Sequence[Sequence[int]]


def _check_shapes(allocation: Matrix, maximum: Matrix, resources: int | None) -> None:
    if len(allocation) != len(maximum):
        raise ValueError("allocation and maximum need the same number of processes")
    if resources is None and allocation:
        resources = len(allocation[0])
    for alloc_row, max_row in zip(allocation, maximum):
        if len(alloc_row) != resources or len(max_row) != resources:
            raise ValueError("every row needs one entry per resource")


def need_matrix(allocation: Matrix, maximum: Matrix) -> list[list[int]]:
    """Remaining need of each process: maximum minus allocation."""
    _check_shapes(allocation, maximum, None)
    return [
        [most - held for held, most in zip(alloc_row, max_row)]
        for alloc_row, max_row in zip(allocation, maximum)
    ]


def safe_sequence(
    allocation: Matrix, maximum: Matrix, available: Sequence[int]
) -> list[int] | None:
    """Return a safe order of 0-based process indices, or None if unsafe.

    Each pass scans the processes in order and lets every process whose need
    fits the current work vector finish at once.
    """
    _check_shapes(allocation, maximum, len(available))
    need = need_matrix(allocation, maximum)
    work = list(available)
    finished = [False] * len(allocation)
    sequence: list[int] = []

    while len(sequence) < len(allocation):
        progressed = False
        for index, (row_need, row_alloc) in enumerate(zip(need, allocation)):
            if finished[index]:
                continue
            if all(wanted <= free for wanted, free in zip(row_need, work)):
                work = [free + held for free, held in zip(work, row_alloc)]
                finished[index] = True
                sequence.append(index)
                progressed = True
        if not progressed:
            return None
    return sequence


def format_need(need: Matrix) -> str:
    """Render a need matrix with a tab after every value, one row per line."""
    return "".join("".join(f"{value}\t" for value in row) + "\n" for row in need)