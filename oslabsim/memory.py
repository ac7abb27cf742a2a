"""Contiguous memory allocation: first, best and worst fit."""

from __future__ import annotations

from typing import Callable, Iterable, Sequence

Allocation = list[int | None]


def _variable_partition(
    blocks: Iterable[int],
    processes: Iterable[int],
    choose: Callable[[list[int], list[int]], int],
) -> Allocation:
    """Place each process in a block picked by ``choose``, shrinking that block."""
    free = list(blocks)
    allocation: Allocation = []
    for size in processes:
        fitting = [index for index, room in enumerate(free) if room >= size]
        if not fitting:
            allocation.append(None)
            continue
        chosen = choose(fitting, free)
        free[chosen] -= size
        allocation.append(chosen)
    return allocation


def first_fit(blocks: Iterable[int], processes: Iterable[int]) -> Allocation:
    """Give each process the lowest-numbered block with enough room left.

    Returns 0-based block indices, or None for a process that did not fit.
    A block's remaining room shrinks by each process placed in it.
    """
    return _variable_partition(blocks, processes, lambda fitting, free: fitting[0])


def best_fit(blocks: Iterable[int], processes: Iterable[int]) -> Allocation:
    """Give each process the smallest block that still has enough room.

    Ties go to the lowest-numbered block.
    """
    return _variable_partition(
        blocks, processes, lambda fitting, free: min(fitting, key=free.__getitem__)
    )


def worst_fit(blocks: Iterable[int], processes: Iterable[int]) -> Allocation:
    """Give each process the largest block that has enough room.

    Ties go to the lowest-numbered block.
    """
    return _variable_partition(
        blocks, processes, lambda fitting, free: max(fitting, key=free.__getitem__)
    )


def fixed_partition_first_fit(
    blocks: Iterable[int], processes: Iterable[int]
) -> Allocation:
    """First fit where each block holds at most one process, whatever its size."""
    sizes = list(blocks)
    taken = [False] * len(sizes)
    allocation: Allocation = []
    for size in processes:
        chosen = next(
            (
                index
                for index, room in enumerate(sizes)
                if not taken[index] and room >= size
            ),
            None,
        )
        if chosen is not None:
            taken[chosen] = True
        allocation.append(chosen)
    return allocation


def format_allocation(processes: Sequence[int], allocation: Sequence[int | None]) -> str:
    """Render a process/size/block table with 1-based numbering."""
    if len(processes) != len(allocation):
        raise ValueError("one allocation entry is required per process")
    lines = ["Process\tSize\tBlock"]
    for number, (size, block) in enumerate(zip(processes, allocation), start=1):
        placed = "Not Allocated" if block is None else str(block + 1)
        lines.append(f"{number}\t{size}\t{placed}")
    return "\n".join(lines)