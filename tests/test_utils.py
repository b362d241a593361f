from pathlib import Path

import pytest

from studentqueue.models import Roster, Student
from studentqueue.priority_queue import StudentPriorityQueue
from studentqueue.utils import (
    ROSTER,
    _generic_load_yaml,
    _get_roster,
    format_details,
    format_priority_order,
    format_with_score,
    get_example_roster,
)


def test_get_example_roster():
    assert len(get_example_roster()) > 0


def test_valid_example_roster():
    roster = _generic_load_yaml(get_example_roster(), Roster)

    assert isinstance(roster, Roster)


def test_get_roster(tmp_path):
    (tmp_path / ROSTER).write_text(get_example_roster())

    assert len(_get_roster(tmp_path).students) == 14


def test_get_roster_missing(tmp_path):
    with pytest.raises(FileNotFoundError, match="Roster not found"):
        _get_roster(Path(tmp_path))


def test_format_priority_order():
    queue = StudentPriorityQueue()
    queue.insert(Student("Alex Kim", "R2000001", "alex.kim@university.edu", 3.2, 96))
    queue.insert(Student("MaxBoth", "R103", "max.both@university.edu", 4.0, 150))

    assert format_priority_order(queue) == (
        "Priority Order (highest first):\n"
        " 1. R103  -  MaxBoth\n"
        " 2. R2000001  -  Alex Kim"
    )


def test_format_priority_order_empty():
    assert format_priority_order(StudentPriorityQueue()) == "Priority Order (highest first):"


def test_format_student_lines():
    student = Student("MaxBoth", "R103", "max.both@university.edu", 4.0, 150)

    assert format_with_score(student) == "R103  -  MaxBoth  (score=1.00000)"
    assert format_details(student) == "R103: MaxBoth (Units: 150, GPA: 4.0, Score: 1.00000)"
