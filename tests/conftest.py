"""Test configuration that is ran for every test."""

import pytest

from studentqueue.models import Student


@pytest.fixture
def tmp_file(tmp_path):
    file = tmp_path / "test.yaml"
    file.touch()
    return file


@pytest.fixture
def make_student():
    """Build a student from units, GPA and id, deriving name and email from the id."""

    def _make(units: int, gpa: float, red_id: str, name: str | None = None) -> Student:
        return Student(name or f"Name{red_id}", red_id, f"{red_id}@university.edu", gpa, units)

    return _make
