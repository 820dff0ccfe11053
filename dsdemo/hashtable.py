"""A chained hash table mapping names to grade point averages."""

from __future__ import annotations

from dataclasses import dataclass

_MASK_64 = (1 << 64) - 1
_NAME_MAX = 31


def hash_function(key: str, size: int) -> int:
    """Return the djb2 hash of ``key`` reduced to a bucket index."""
    if size <= 0:
        raise ValueError("table size must be positive")
    value = 5381
    for byte in key.encode("utf-8"):
        signed = byte - 256 if byte > 127 else byte
        value = (value * 33 + signed) & _MASK_64
    return value % size


@dataclass
class HashEntry:
    """A name and its grade point average."""

    name: str
    gpa: float


class HashTable:
    """A fixed-size hash table with separate chaining; newest entries first."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("table size must be positive")
        self.size = size
        self._buckets: list[list[HashEntry]] = [[] for _ in range(size)]

    def _bucket(self, name: str) -> list[HashEntry]:
        return self._buckets[hash_function(name, self.size)]

    def insert(self, name: str, gpa: float) -> None:
        """Add a name, or update its GPA if it is already stored."""
        bucket = self._bucket(name)
        for entry in bucket:
            if entry.name == name:
                entry.gpa = gpa
                return
        bucket.insert(0, HashEntry(name[:_NAME_MAX], gpa))

    def search(self, name: str) -> HashEntry | None:
        """Return the entry for a name, or None if it is absent."""
        return next((entry for entry in self._bucket(name) if entry.name == name), None)

    def delete(self, name: str) -> bool:
        """Remove a name; return False if it was absent."""
        bucket = self._bucket(name)
        for index, entry in enumerate(bucket):
            if entry.name == name:
                del bucket[index]
                return True
        return False

    def buckets(self) -> list[tuple[HashEntry, ...]]:
        """Return the entries of every bucket, in chain order."""
        return [tuple(bucket) for bucket in self._buckets]

    def format(self) -> str:
        """Render every bucket with its chain on one line."""
        return "".join(
            f"Bucket {index}: "
            + "".join(f"[{entry.name}: {entry.gpa:.2f}] -> " for entry in bucket)
            + "NULL\n"
            for index, bucket in enumerate(self._buckets)
        )

    def clear(self) -> None:
        """Remove every entry, keeping the size."""
        for bucket in self._buckets:
            bucket.clear()