"""Disk head scheduling: FCFS, SCAN and C-SCAN."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class SeekResult:
    """Tracks visited in order, the total head movement and the request count."""

    sequence: tuple[int, ...]
    total: int
    requests: int
    end_marker: bool = False

    def average(self) -> float:
        """Mean head movement per request."""
        return self.total / self.requests

    def format_sequence(self) -> str:
        """Render the visiting order as ``a -> b -> ...``."""
        text = " -> ".join(str(track) for track in self.sequence)
        return f"{text} -> END" if self.end_marker else text


def _requests(requests: Iterable[int]) -> list[int]:
    values = list(requests)
    if not values:
        raise ValueError("at least one request is required")
    return values


def _check_tracks(tracks: Iterable[int], disk_size: int) -> None:
    if disk_size < 1:
        raise ValueError("disk size must be positive")
    for track in tracks:
        if not 0 <= track < disk_size:
            raise ValueError(f"track {track} is outside 0..{disk_size - 1}")


def _sweep_layout(requests: list[int], head: int, disk_size: int) -> tuple[list[int], int]:
    """All stops sorted, with both disk ends, and the index of the head."""
    ordered = sorted([*requests, head, 0, disk_size - 1])
    return ordered, ordered.index(head)


def fcfs(requests: Iterable[int], head: int) -> SeekResult:
    """Serve requests in arrival order."""
    values = _requests(requests)
    sequence = (head, *values)
    total = sum(abs(b - a) for a, b in zip(sequence, sequence[1:]))
    return SeekResult(sequence, total, len(values))


def scan(requests: Iterable[int], head: int, disk_size: int, upward: bool) -> SeekResult:
    """Elevator: run to one end of the disk, then reverse."""
    values = _requests(requests)
    _check_tracks([*values, head], disk_size)
    ordered, pos = _sweep_layout(values, head, disk_size)
    last = disk_size - 1
    if upward:
        sequence = ordered[pos:] + ordered[:pos][::-1]
        total = (last - head) + (last - ordered[0])
    else:
        sequence = ordered[: pos + 1][::-1] + ordered[pos + 1:]
        total = head + (last - ordered[0])
    return SeekResult(tuple(sequence), total, len(values), end_marker=True)


def cscan(requests: Iterable[int], head: int, disk_size: int) -> SeekResult:
    """Circular scan: sweep upward, jump to track 0 and continue upward."""
    values = _requests(requests)
    _check_tracks([*values, head], disk_size)
    ordered, pos = _sweep_layout(values, head, disk_size)
    last = disk_size - 1
    wrapped_to = ordered[pos - 1] if pos else 0
    total = (last - head) + last + wrapped_to
    sequence = ordered[pos:] + ordered[:pos]
    return SeekResult(tuple(sequence), total, len(values), end_marker=True)