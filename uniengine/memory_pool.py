"""A fixed-size pool of equally sized chunks handed out as integer handles."""

from __future__ import annotations

ALIGNMENT = 16


class PoolExhaustedError(MemoryError):
    """Raised when a pool has no free chunk left."""


class MemoryPool:
    """A fixed number of chunks of one size, reused last-freed first."""

    def __init__(self, chunk_size: int, chunk_count: int) -> None:
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        if chunk_count < 1:
            raise ValueError(f"chunk_count must be positive, got {chunk_count}")
        self.chunk_size = (chunk_size + ALIGNMENT - 1) & ~(ALIGNMENT - 1)
        self.chunk_count = chunk_count
        # Top of the stack is the end of the list, so chunk 0 comes out first.
        self._free = list(range(chunk_count - 1, -1, -1))
        self._free_set = set(self._free)

    def allocate(self) -> int:
        """Take a free chunk and return its handle."""
        if not self._free:
            raise PoolExhaustedError("no free chunks left in pool")
        chunk = self._free.pop()
        self._free_set.discard(chunk)
        return chunk

    def deallocate(self, chunk: int) -> None:
        """Return a chunk to the pool; it is the next one handed out."""
        if not 0 <= chunk < self.chunk_count:
            raise ValueError(f"chunk {chunk} does not belong to this pool")
        if chunk in self._free_set:
            raise ValueError(f"chunk {chunk} is already free")
        self._free.append(chunk)
        self._free_set.add(chunk)

    def free_count(self) -> int:
        """Return how many chunks are free."""
        return len(self._free)