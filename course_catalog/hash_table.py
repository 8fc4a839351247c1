import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from course_catalog.course import Course

logger = logging.getLogger(__name__)

DEFAULT_SIZE = 179
HASH_BASE = 31


@dataclass
class _Slot:
    key: int
    head: Course
    chain: List[Course] = field(default_factory=list)

    def entries(self) -> Iterator[Course]:
        yield self.head
        yield from self.chain


class HashTable:
    """Fixed-size table of courses keyed by course number.

    Each position is either empty (None) or a slot holding a head course and
    an overflow chain for the numbers that collide on it. The table never
    grows; collisions depend only on the size chosen at construction.

    Duplicate numbers are allowed: inserting a number that is already stored
    appends another entry, and remove/search act on the first match only.
    """

    def __init__(self, size: int = DEFAULT_SIZE):
        if size < 1:
            raise ValueError(f"table size must be at least 1, got {size}")
        self.size = size
        self._slots: List[Optional[_Slot]] = [None] * size
        self._count = 0

    def __len__(self):
        return self._count

    def __contains__(self, number):
        return self.search(number) is not None

    def __iter__(self):
        for slot in self._slots:
            if slot is not None:
                yield from slot.entries()

    def __repr__(self):
        return f"HashTable(size={self.size}, courses={self._count})"

    def hash(self, number: str) -> int:
        total = 0
        for i, ch in enumerate(number):
            total += (ord(ch) * pow(HASH_BASE, i, self.size)) % self.size
        return total % self.size

    def insert(self, course: Course) -> None:
        key = self.hash(course.number)
        slot = self._slots[key]
        if slot is None:
            self._slots[key] = _Slot(key, course)
        else:
            slot.chain.append(course)
        self._count += 1

    def remove(self, number: str) -> None:
        key = self.hash(number)
        slot = self._slots[key]
        if slot is None:
            logger.debug("remove: no course %s in table", number)
            return

        if slot.head.number == number:
            if slot.chain:
                slot.head = slot.chain.pop(0)
            else:
                self._slots[key] = None
            self._count -= 1
            return

        for i, course in enumerate(slot.chain):
            if course.number == number:
                del slot.chain[i]
                self._count -= 1
                return
        logger.debug("remove: no course %s in table", number)

    def search(self, number: str) -> Optional[Course]:
        slot = self._slots[self.hash(number)]
        if slot is None:
            return None
        for course in slot.entries():
            if course.number == number:
                return course
        return None

    def export(self) -> List[Course]:
        # bucket order, not sorted
        return list(self)
