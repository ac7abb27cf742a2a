"""Disk block allocation: sequential, indexed and linked."""

from __future__ import annotations

from typing import Iterable

MAX_INDEXED_BLOCKS = 20


class AllocationError(Exception):
    """A requested set of blocks cannot be allocated."""


class Disk:
    """A disk of numbered blocks, each either free or allocated."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("disk size must be positive")
        self.size = size
        self._allocated = [False] * size
        self._links: dict[int, int] = {}
        self.index_blocks: dict[int, tuple[int, ...]] = {}

    def _check_block(self, block: int) -> None:
        if not 0 <= block < self.size:
            raise ValueError(f"block {block} is outside 0..{self.size - 1}")

    def _valid_and_free(self, block: int) -> bool:
        return 0 <= block < self.size and not self._allocated[block]

    def is_allocated(self, block: int) -> bool:
        """Whether the given block is in use."""
        self._check_block(block)
        return self._allocated[block]

    def allocate_sequential(self, start: int, length: int) -> range:
        """Allocate ``length`` consecutive blocks beginning at ``start``."""
        if start < 0 or length < 1:
            raise AllocationError("start must be non-negative and length positive")
        if start + length > self.size:
            raise AllocationError("Not enough blocks on disk")
        blocks = range(start, start + length)
        if any(self._allocated[b] for b in blocks):
            raise AllocationError("Blocks already allocated, cannot place file")
        for block in blocks:
            self._allocated[block] = True
        return blocks

    def allocate_indexed(self, index_block: int, blocks: Iterable[int]) -> tuple[int, ...]:
        """Allocate an index block and the data blocks it lists."""
        if not 0 <= index_block < self.size:
            raise AllocationError("Invalid index block")
        if self._allocated[index_block]:
            raise AllocationError("Index block already allocated")
        data = tuple(blocks)
        if len(data) > MAX_INDEXED_BLOCKS:
            raise AllocationError(f"Maximum {MAX_INDEXED_BLOCKS} blocks allowed")
        seen = {index_block}
        for block in data:
            if not 0 <= block < self.size:
                raise AllocationError(f"Invalid block number {block}")
            if self._allocated[block] or block in seen:
                raise AllocationError(f"Block {block} already allocated")
            seen.add(block)
        for block in seen:
            self._allocated[block] = True
        self.index_blocks[index_block] = data
        return data

    def allocate_linked(self, blocks: Iterable[int]) -> tuple[int, ...]:
        """Allocate blocks as a chain, the first one being the start."""
        chain = tuple(blocks)
        if not chain:
            raise AllocationError("Invalid number of blocks")
        if not self._valid_and_free(chain[0]):
            raise AllocationError("Invalid or already allocated starting block")
        if len(chain) > self.size:
            raise AllocationError("Invalid number of blocks")
        seen: set[int] = set()
        for block in chain:
            if not self._valid_and_free(block) or block in seen:
                raise AllocationError(f"Block {block} is invalid or already allocated")
            seen.add(block)
        for block in chain:
            self._allocated[block] = True
        for current, following in zip(chain, chain[1:]):
            self._links[current] = following
        self._links.pop(chain[-1], None)
        return chain

    def chain(self, start: int) -> list[int]:
        """Blocks reached by following links from ``start``."""
        self._check_block(start)
        if not self._allocated[start]:
            raise ValueError(f"block {start} is not allocated")
        blocks = [start]
        while blocks[-1] in self._links:
            blocks.append(self._links[blocks[-1]])
        return blocks

    def format_status(self) -> str:
        """Render ``block:state`` pairs, eight to a line."""
        return "".join(
            f"{block}:{int(used)}  " + ("\n" if (block + 1) % 8 == 0 else "")
            for block, used in enumerate(self._allocated)
        )