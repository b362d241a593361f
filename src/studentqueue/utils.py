from __future__ import annotations

from functools import lru_cache
from importlib.resources import files
from pathlib import Path
from typing import TYPE_CHECKING

import yaml
from pydantic import BaseModel

if TYPE_CHECKING:
    from collections.abc import Iterable

    from studentqueue.models import Roster, Student

ROSTER = "roster.yaml"


def load_static_file(name: str) -> str:
    """Load static file from the ``studentqueue/static`` directory by file name."""
    return (files("studentqueue") / "static" / name).read_text(encoding="utf-8")


@lru_cache(None)
def get_example_roster() -> str:
    """Get the example roster file."""
    return load_static_file(ROSTER)


def _generic_load_yaml(data: str, model: type[BaseModel]) -> BaseModel:
    """Load a yaml string into a pydantic model."""
    return model.model_validate(yaml.safe_load(data))


def _get_roster(roster_dir: Path) -> Roster:
    """Load Roster object from yaml config file in `roster_dir`."""
    from studentqueue.models import Roster

    file_path = roster_dir.joinpath(ROSTER)
    try:
        return Roster.from_yaml(file_path)
    except FileNotFoundError as e:
        raise FileNotFoundError(f'Roster not found. Save it to "{file_path}".') from e


def format_priority_order(students: Iterable[Student]) -> str:
    """
    Render students as a ranked listing, one per line.

    :param students: Students in the order to rank them, e.g. a queue.
    :returns: The listing, headed by ``Priority Order (highest first):``.
    """
    lines = ["Priority Order (highest first):"]
    for rank, student in enumerate(students, start=1):
        lines.append(f"{rank:2d}. {student.red_id}  -  {student.name}")
    return "\n".join(lines)


def format_with_score(student: Student) -> str:
    return f"{student.red_id}  -  {student.name}  (score={student.priority_score():.5f})"


def format_details(student: Student) -> str:
    return (
        f"{student.red_id}: {student.name} (Units: {student.units}, GPA: {student.gpa}, "
        f"Score: {student.priority_score():.5f})"
    )
