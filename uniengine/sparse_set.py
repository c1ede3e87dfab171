"""A sparse set mapping non-negative integer ids to values."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")

_EMPTY = -1


class SparseSet(Generic[T]):
    """Maps non-negative integer ids to values, keeping the ids densely packed.

    Removal swaps the last entry into the freed slot, so the order of
    :meth:`ids` is insertion order only until something is removed.
    """

    def __init__(self) -> None:
        self._sparse: list[int] = []
        self._dense: list[int] = []
        self._data: list[T] = []

    def insert(self, id: int, data: T) -> None:
        """Store ``data`` under ``id``, replacing any value already there."""
        if id < 0:
            raise ValueError(f"id must be non-negative, got {id}")
        if id >= len(self._sparse):
            self._sparse.extend([_EMPTY] * (id + 1 - len(self._sparse)))
        slot = self._sparse[id]
        if slot == _EMPTY:
            self._sparse[id] = len(self._dense)
            self._dense.append(id)
            self._data.append(data)
        else:
            self._data[slot] = data

    def remove(self, id: int) -> None:
        """Remove ``id`` if present; absent ids are ignored."""
        if not self.has_index(id):
            return
        index = self._sparse[id]
        last_id = self._dense[-1]

        self._dense[index] = last_id
        self._sparse[last_id] = index
        self._dense.pop()

        self._data[index] = self._data[-1]
        self._data.pop()

        self._sparse[id] = _EMPTY

    def has_index(self, id: int) -> bool:
        """Return whether ``id`` holds a value."""
        return 0 <= id < len(self._sparse) and self._sparse[id] != _EMPTY

    def _slot(self, id: int) -> int:
        if not self.has_index(id):
            raise KeyError(id)
        return self._sparse[id]

    def get(self, id: int) -> T:
        """Return the value stored under ``id``; raise KeyError if absent."""
        return self._data[self._slot(id)]

    def set(self, id: int, data: T) -> None:
        """Replace the value stored under an existing ``id``; raise KeyError if absent."""
        self._data[self._slot(id)] = data

    def ids(self) -> list[int]:
        """Return the stored ids in dense order."""
        return list(self._dense)

    def __len__(self) -> int:
        return len(self._dense)

    def __contains__(self, id: object) -> bool:
        return isinstance(id, int) and self.has_index(id)