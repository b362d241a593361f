"""Ordering strategies for the student priority queue."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from studentqueue.errors import ConfigError

if TYPE_CHECKING:
    from studentqueue.models import Student

EPS = 1e-9


def _compare_descending(a: float, b: float) -> int:
    """Three-way compare where the larger value ranks first."""
    if abs(a - b) <= EPS:
        return 0
    return -1 if a > b else 1


def _compare_ascending(a, b) -> int:
    return (a > b) - (a < b)


class PriorityStrategy(ABC):
    """
    A total order over students.

    ``compare(a, b)`` is negative when ``a`` ranks ahead of ``b`` (leaves the queue first),
    zero when they are equal and positive otherwise.
    """

    name: str

    @abstractmethod
    def compare(self, a: Student, b: Student) -> int:
        """
        Compare two students.

        :param a: The first student.
        :param b: The second student.
        :returns: Negative, zero or positive.
        """

    def __call__(self, a: Student, b: Student) -> int:
        return self.compare(a, b)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class DefaultStudentStrategy(PriorityStrategy):
    """Weighted score (70% units, 30% GPA), then GPA, then name, then red id."""

    name = "default"

    def compare(self, a: Student, b: Student) -> int:
        return (
            _compare_descending(a.priority_score(), b.priority_score())
            or _compare_descending(a.gpa, b.gpa)
            or _compare_ascending(a.name, b.name)
            or _compare_ascending(a.red_id, b.red_id)
        )


class GPAFirstStrategy(PriorityStrategy):
    """GPA, then units, then name, then red id."""

    name = "gpa-first"

    def compare(self, a: Student, b: Student) -> int:
        return (
            _compare_descending(a.gpa, b.gpa)
            or _compare_ascending(b.units, a.units)
            or _compare_ascending(a.name, b.name)
            or _compare_ascending(a.red_id, b.red_id)
        )


STRATEGIES: dict[str, type[PriorityStrategy]] = {
    DefaultStudentStrategy.name: DefaultStudentStrategy,
    GPAFirstStrategy.name: GPAFirstStrategy,
}


def get_strategy(name: str) -> PriorityStrategy:
    """
    Look up a strategy by its registered name.

    :param name: Strategy name, e.g. ``"default"`` or ``"gpa-first"``.
    :returns: A new strategy instance.
    :raises ConfigError: If no strategy is registered under ``name``.
    """
    try:
        return STRATEGIES[name]()
    except KeyError as e:
        raise ConfigError(
            f"Unknown strategy '{name}'. Choose one of: {', '.join(STRATEGIES)}."
        ) from e
