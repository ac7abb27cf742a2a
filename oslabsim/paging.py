"""Page replacement: FIFO, least recently used and optimal."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass(frozen=True)
class PageStep:
    """One reference: the frame contents after it and whether it faulted."""

    step: int
    page: int
    frames: tuple[int | None, ...]
    fault: bool


def _check_frames(frames: int) -> None:
    if frames < 1:
        raise ValueError("at least one frame is required")


def fifo(reference: Iterable[int], frames: int) -> list[PageStep]:
    """Replace the page that has been resident the longest."""
    _check_frames(frames)
    memory: list[int | None] = [None] * frames
    position = 0
    steps = []
    for step, page in enumerate(reference, start=1):
        fault = page not in memory
        if fault:
            memory[position] = page
            position = (position + 1) % frames
        steps.append(PageStep(step, page, tuple(memory), fault))
    return steps


def lru(reference: Iterable[int], frames: int) -> list[PageStep]:
    """Replace the page whose last use lies furthest in the past."""
    _check_frames(frames)
    memory: list[int | None] = [None] * frames
    last_used = [0] * frames
    steps = []
    for step, page in enumerate(reference, start=1):
        fault = page not in memory
        if fault:
            victim = min(range(frames), key=last_used.__getitem__)
            memory[victim] = page
            last_used[victim] = step
        else:
            last_used[memory.index(page)] = step
        steps.append(PageStep(step, page, tuple(memory), fault))
    return steps


def _optimal_victim(memory: Sequence[int | None], future: list[int]) -> int:
    farthest = 0
    victim = None
    for slot, page in enumerate(memory):
        try:
            upcoming = future.index(page)
        except ValueError:
            return slot
        if upcoming > farthest:
            farthest = upcoming
            victim = slot
    return 0 if victim is None else victim


def optimal(reference: Iterable[int], frames: int) -> list[PageStep]:
    """Replace the page not needed for the longest time ahead.

    While fewer references than frames have been seen, a faulting page goes
    into the frame numbered like its position in the reference string.
    """
    _check_frames(frames)
    pages = list(reference)
    memory: list[int | None] = [None] * frames
    steps = []
    for index, page in enumerate(pages):
        fault = page not in memory
        if fault:
            if index < frames:
                memory[index] = page
            else:
                memory[_optimal_victim(memory, pages[index + 1:])] = page
        steps.append(PageStep(index + 1, page, tuple(memory), fault))
    return steps


def count_faults(steps: Iterable[PageStep]) -> int:
    """Number of steps that caused a page fault."""
    return sum(1 for step in steps if step.fault)


def format_trace(steps: Sequence[PageStep]) -> str:
    """Render a step-by-step table followed by the fault total."""
    lines = ["Step\tPage\tFrames\tFault"]
    for step in steps:
        frames = "".join("- " if f is None else f"{f} " for f in step.frames)
        verdict = "Yes" if step.fault else "No"
        lines.append(f"{step.step}\t{step.page}\t{frames}\t{verdict}")
    lines.append("")
    lines.append(f"Total page faults = {count_faults(steps)}")
    return "\n".join(lines)