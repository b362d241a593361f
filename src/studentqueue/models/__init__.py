"""Pydantic models and data classes describing students and rosters (i.e., in the roster files)."""

from .roster import Roster
from .student import MAX_GPA, MAX_UNITS, Student

__all__ = [
    "MAX_GPA",
    "MAX_UNITS",
    "Roster",
    "Student",
]
