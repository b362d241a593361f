"""StudentPriorityQueue class."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from studentqueue.models.student import Student
from studentqueue.strategies import DefaultStudentStrategy, PriorityStrategy

logger = logging.getLogger(__name__)


def _parent(i: int) -> int:
    return (i - 1) // 2


def _left(i: int) -> int:
    return 2 * i + 1


def _right(i: int) -> int:
    return 2 * i + 2


class StudentPriorityQueue:
    """
    A max-heap of students: the student the strategy ranks highest is popped first.

    The strategy is chosen at construction and cannot be changed afterwards.
    Not thread safe; serialize access when sharing a queue between threads.
    """

    _heap: list[Student]

    def __init__(self, strategy: PriorityStrategy | None = None) -> None:
        """
        Initialize this object.

        :param strategy: Ordering to use. The default strategy if not given.
        """
        self._heap: list[Student] = []
        self._strategy = strategy if strategy is not None else DefaultStudentStrategy()

    @property
    def strategy(self) -> PriorityStrategy:
        """The strategy ordering this queue."""
        return self._strategy

    def size(self) -> int:
        """
        Get the number of students in the queue.

        :returns: The number of students in the queue.
        """
        return len(self._heap)

    def is_empty(self) -> bool:
        """
        Check if the queue is empty.

        :returns: Whether the queue is empty.
        """
        return len(self._heap) == 0

    def peek(self) -> Student | None:
        """
        Look at the highest priority student without removing it.

        :returns: The highest priority student, or None if the queue is empty.
        """
        return self._heap[0] if self._heap else None

    def insert(self, student: Student) -> bool:
        """
        Add a student to the queue.

        :param student: The student to add.
        :returns: True.
        :raises TypeError: If ``student`` is None.
        """
        if student is None:
            raise TypeError("student must not be None")
        self._heap.append(student)
        self._sift_up(len(self._heap) - 1)
        logger.debug("Inserted %s (size=%d)", student, len(self._heap))
        return True

    def extract_max(self) -> Student | None:
        """
        Get and remove the highest priority student.

        :returns: The removed student, or None if the queue is empty.
        """
        if not self._heap:
            return None
        top = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        logger.debug("Extracted %s (size=%d)", top, len(self._heap))
        return top

    def remove(self, student: object) -> bool:
        """
        Remove a specific student, matched by red id.

        :param student: The student to remove.
        :returns: Whether the student was found and removed.
        """
        if not isinstance(student, Student):
            return False
        try:
            index = self._heap.index(student)
        except ValueError:
            return False

        last_index = len(self._heap) - 1
        self._swap(index, last_index)
        self._heap.pop()
        if index < len(self._heap):
            self._sift_up(index)
            self._sift_down(index)
        logger.debug("Removed %s (size=%d)", student, len(self._heap))
        return True

    def to_array(self) -> tuple[Student, ...]:
        """
        Snapshot the students in heap order (not sorted order).

        :returns: The students in their current heap positions.
        """
        return tuple(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def __contains__(self, student: object) -> bool:
        return student in self._heap

    def __iter__(self) -> PriorityOrderIterator:
        """Iterate from highest to lowest priority without modifying the queue."""
        return PriorityOrderIterator(self._heap, self._strategy)

    def __str__(self) -> str:
        return "[" + ", ".join(str(student) for student in self._heap) + "]"

    def __repr__(self) -> str:
        return f"StudentPriorityQueue(strategy={self._strategy!r}, size={len(self._heap)})"

    # heap helpers

    def _outranks(self, i: int, j: int) -> bool:
        return self._strategy.compare(self._heap[i], self._heap[j]) < 0

    def _swap(self, i: int, j: int) -> None:
        self._heap[i], self._heap[j] = self._heap[j], self._heap[i]

    def _sift_up(self, i: int) -> None:
        while i > 0:
            parent = _parent(i)
            if not self._outranks(i, parent):
                break
            self._swap(i, parent)
            i = parent

    def _sift_down(self, i: int) -> None:
        size = len(self._heap)
        while True:
            left, right = _left(i), _right(i)
            largest = i
            if left < size and self._outranks(left, largest):
                largest = left
            if right < size and self._outranks(right, largest):
                largest = right
            if largest == i:
                break
            self._swap(i, largest)
            i = largest


class PriorityOrderIterator(Iterator[Student]):
    """
    Iterator over a snapshot of a queue, highest priority first.

    The snapshot is heap-sorted when the iterator is created, so later changes to the
    queue are never seen and separate iterators do not interfere.
    """

    def __init__(self, heap: list[Student], strategy: PriorityStrategy) -> None:
        self._items = list(heap)
        self._strategy = strategy
        self._heap_sort()
        # heap sort leaves the highest priority student at the end
        self._index = len(self._items) - 1

    def _heap_sort(self) -> None:
        n = len(self._items)
        for i in range(n // 2 - 1, -1, -1):
            self._heapify(n, i)
        for end in range(n - 1, 0, -1):
            self._items[0], self._items[end] = self._items[end], self._items[0]
            self._heapify(end, 0)

    def _heapify(self, n: int, i: int) -> None:
        items, compare = self._items, self._strategy.compare
        while True:
            left, right = _left(i), _right(i)
            largest = i
            if left < n and compare(items[left], items[largest]) < 0:
                largest = left
            if right < n and compare(items[right], items[largest]) < 0:
                largest = right
            if largest == i:
                return
            items[i], items[largest] = items[largest], items[i]
            i = largest

    def has_next(self) -> bool:
        """
        Check if another student is available.

        :returns: Whether ``next()`` will return a student.
        """
        return self._index >= 0

    def __next__(self) -> Student:
        if self._index < 0:
            raise StopIteration
        student = self._items[self._index]
        self._index -= 1
        return student

    def __length_hint__(self) -> int:
        return self._index + 1
