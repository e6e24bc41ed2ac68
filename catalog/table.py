"""Fixed-size hash table of courses with separate chaining.

Each bucket is anchored by a node that never holds a course; real entries are
linked from `anchor.next`. The table never resizes, so chains grow with the
load factor. Use `catalog.report` to see how the entries are spread.
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Tuple

from .hashing import DEFAULT_TABLE_SIZE, char_sum_hash
from .record import Course

LOGGER = logging.getLogger(__name__)

EMPTY_KEY = -1


class ChainNode:
    """One slot in a bucket chain."""

    __slots__ = ("course", "key_tag", "next", "__weakref__")

    def __init__(self, course: Optional[Course] = None, key_tag: int = EMPTY_KEY) -> None:
        self.course = course
        self.key_tag = key_tag
        self.next: Optional[ChainNode] = None

    @property
    def occupied(self) -> bool:
        return self.key_tag != EMPTY_KEY

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        number = self.course.number if self.course is not None else None
        return f"ChainNode(number={number!r}, key_tag={self.key_tag})"


class CourseTable:
    """Indexes `Course` records by course number."""

    def __init__(self, size: int = DEFAULT_TABLE_SIZE) -> None:
        if size <= 0:
            raise ValueError(f"Table size must be positive, got {size}")
        self.table_size = size
        self._buckets: List[ChainNode] = [ChainNode() for _ in range(size)]

    def bucket_for(self, number: str) -> int:
        return char_sum_hash(number, self.table_size)

    def insert(self, course: Course) -> None:
        """Add `course`, or replace the stored record with the same number."""
        key = self.bucket_for(course.number)
        previous = self._buckets[key]
        entry = previous.next

        while entry is not None and entry.course.number != course.number:
            previous = entry
            entry = entry.next

        if entry is not None:
            entry.course = course.model_copy(deep=True)
            LOGGER.debug("Updated %s in bucket %d", course.number, key)
            return

        previous.next = ChainNode(course.model_copy(deep=True), key)
        LOGGER.debug("Inserted %s into bucket %d", course.number, key)

    def search(self, number: str, default: Optional[Course] = None) -> Optional[Course]:
        """Return a copy of the course stored under `number`, or `default` when absent."""
        entry = self._buckets[self.bucket_for(number)].next
        while entry is not None:
            if entry.course.number == number:
                return entry.course.model_copy(deep=True)
            entry = entry.next
        return default

    def remove(self, number: str) -> bool:
        """Unlink the course stored under `number`. Missing numbers are a no-op."""
        key = self.bucket_for(number)
        previous = self._buckets[key]
        entry = previous.next

        while entry is not None and entry.course.number != number:
            previous = entry
            entry = entry.next

        if entry is None:
            return False

        previous.next = entry.next
        entry.next = None
        LOGGER.debug("Removed %s from bucket %d", number, key)
        return True

    def size(self) -> int:
        """Count occupied nodes by walking every chain."""
        return sum(self.chain_lengths())

    def items(self) -> Iterator[Tuple[str, str]]:
        """Yield ``(number, title)`` pairs in bucket order, then chain order."""
        for anchor in self._buckets:
            for entry in self._occupied(anchor):
                yield entry.course.number, entry.course.title

    def chain_lengths(self) -> List[int]:
        """Number of courses in each bucket, indexed by bucket."""
        return [sum(1 for _ in self._occupied(anchor)) for anchor in self._buckets]

    def chains(self) -> Iterator[List[Course]]:
        """Yield copies of the courses of each bucket, one list per bucket index."""
        for anchor in self._buckets:
            yield [entry.course.model_copy(deep=True) for entry in self._occupied(anchor)]

    @staticmethod
    def _occupied(anchor: ChainNode) -> Iterator[ChainNode]:
        entry = anchor.next
        while entry is not None:
            if entry.occupied:
                yield entry
            entry = entry.next

    def clear(self) -> int:
        """Release every chain node and return how many were released."""
        released = 0
        for anchor in self._buckets:
            entry = anchor.next
            anchor.next = None
            while entry is not None:
                following = entry.next
                entry.next = None
                entry.course = None
                released += 1
                entry = following
        if released:
            LOGGER.debug("Released %d chain node(s)", released)
        return released

    @property
    def load_factor(self) -> float:
        return self.size() / self.table_size

    def __iter__(self) -> Iterator[Course]:
        for chain in self.chains():
            yield from chain

    def __contains__(self, number: object) -> bool:
        return isinstance(number, str) and self.search(number) is not None

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"CourseTable(table_size={self.table_size}, size={self.size()})"
