"""Inter-thread communication through shared memory and a message queue."""

from __future__ import annotations

import mmap
import queue
import threading

SEGMENT_SIZE = 64
MESSAGE_SIZE = 100


def shared_memory_exchange(message: str) -> str:
    """Have a writer thread store ``message`` in a shared segment; read it back.

    The message is stored NUL-terminated, so it must fit the 64-byte segment.
    """
    payload = message.encode() + b"\0"
    if len(payload) > SEGMENT_SIZE:
        raise ValueError(f"message does not fit in {SEGMENT_SIZE} bytes")

    with mmap.mmap(-1, SEGMENT_SIZE) as segment:

        def writer() -> None:
            segment.seek(0)
            segment.write(payload)

        thread = threading.Thread(target=writer)
        thread.start()
        thread.join()
        raw = segment[:]
    return raw.split(b"\0", 1)[0].decode()


def message_queue_exchange(message: str, msg_type: int = 1) -> str:
    """Send ``message`` from a sender thread and receive it by message type."""
    if msg_type <= 0:
        raise ValueError("message type must be positive")
    if len(message.encode()) >= MESSAGE_SIZE:
        raise ValueError(f"message must be shorter than {MESSAGE_SIZE} bytes")

    channel: queue.Queue[tuple[int, str]] = queue.Queue()
    sender = threading.Thread(target=channel.put, args=((msg_type, message),))
    sender.start()
    sender.join()

    while True:
        kind, text = channel.get_nowait()
        if kind == msg_type:
            return text