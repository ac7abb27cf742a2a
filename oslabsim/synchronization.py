"""Classic synchronisation problems: mutex, readers-writers, producer-consumer."""

from __future__ import annotations

import threading
from collections import deque
from typing import Iterable, Iterator

BUFFER_SIZE = 5


class BufferFullError(Exception):
    """The bounded buffer has no free slot."""


class BufferEmptyError(Exception):
    """The bounded buffer holds no item."""


class MutexResource:
    """A counter that processes update one at a time under a lock."""

    def __init__(self) -> None:
        self.value = 0
        self._lock = threading.Lock()

    def access(self, process: int) -> int:
        """Enter the critical section for ``process``, increment, return the value."""
        if not self._lock.acquire(blocking=False):
            raise RuntimeError(f"Resource busy. Process {process} waiting...")
        try:
            self.value += 1
            return self.value
        finally:
            self._lock.release()


class ReaderWriterResource:
    """A counter that readers inspect and a writer bumps when no one reads."""

    def __init__(self) -> None:
        self.value = 0
        self.readers = 0

    def read(self) -> int:
        """Read the resource as one reader and return its value."""
        self.readers += 1
        try:
            return self.value
        finally:
            self.readers -= 1

    def write(self) -> int:
        """Increment the resource; refused while readers are active."""
        if self.readers:
            raise RuntimeError("Resource busy with readers. Writer waiting...")
        self.value += 1
        return self.value


class BoundedBuffer:
    """A first-in, first-out buffer with a fixed number of slots."""

    def __init__(self, capacity: int = BUFFER_SIZE) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: deque[int] = deque()

    def produce(self, item: int) -> None:
        """Append an item; raise BufferFullError when every slot is taken."""
        if len(self._items) >= self.capacity:
            raise BufferFullError("Buffer is FULL! Cannot produce.")
        self._items.append(item)

    def consume(self) -> int:
        """Remove and return the oldest item; raise BufferEmptyError if none."""
        if not self._items:
            raise BufferEmptyError("Buffer is EMPTY! Cannot consume.")
        return self._items.popleft()

    def contents(self) -> list[int]:
        """Items currently held, oldest first."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)


def producer_consumer_run(count: int, capacity: int = BUFFER_SIZE) -> list[str]:
    """Produce items 1..count (at most ``capacity``), then consume them all.

    Returns the log lines of the run.
    """
    buffer = BoundedBuffer(capacity)
    total = max(0, min(count, capacity))
    log = []
    for item in range(1, total + 1):
        buffer.produce(item)
        log.append(f"Produced item: {item} | Buffer size: {len(buffer)}")
    for _ in range(total):
        size = len(buffer)
        log.append(f"Consumed item: {buffer.consume()} | Buffer size before consuming: {size}")
    return log


def dining_philosophers(philosophers: int = 5, rounds: int = 3) -> Iterator[str]:
    """Yield the lines of a round-based dining philosophers run."""
    yield "Simulating Dining Philosophers Problem:"
    yield ""
    for round_number in range(1, rounds + 1):
        yield f"Round {round_number}:"
        for seat in range(1, philosophers + 1):
            yield f"Philosopher {seat} is thinking"
        for seat in range(1, philosophers + 1):
            yield f"Philosopher {seat} is eating"
        yield ""
    yield "All philosophers finished eating."


def sequential_threads_demo() -> list[str]:
    """Lines of two tasks run one after the other, illustrating threads."""
    lines = ["Illustrating the concept of multithreading:", "", "Thread 1 starts:"]
    lines.extend(f"Thread 1: Number {n}" for n in range(1, 6))
    lines.extend(["Thread 1 finished", "", "Thread 2 starts:"])
    lines.extend(f"Thread 2: Letter {chr(ord('A') + n)}" for n in range(5))
    lines.extend(["Thread 2 finished", "", "Main program: all threads completed"])
    return lines


def run_threads(ids: Iterable[int]) -> list[str]:
    """Run one thread per id and return their greetings in id order."""
    identifiers = list(ids)
    greetings: list[str] = [""] * len(identifiers)

    def greet(slot: int, thread_id: int) -> None:
        greetings[slot] = f"Hello from thread {thread_id}"

    threads = [
        threading.Thread(target=greet, args=(slot, thread_id))
        for slot, thread_id in enumerate(identifiers)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return greetings