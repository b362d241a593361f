"""A priority queue of students, ordered by a pluggable strategy, with an undoable command layer."""

from importlib.metadata import version as _version

from .models import Roster, Student
from .priority_queue import PriorityOrderIterator, StudentPriorityQueue
from .strategies import DefaultStudentStrategy, GPAFirstStrategy, PriorityStrategy
from .undo import AddStudentCommand, Command, RemoveTopCommand, UndoManager

try:
    __version__ = _version("studentqueue")
except Exception:
    # Local copy or not installed with setuptools
    __version__ = "unknown"

__all__ = [
    "AddStudentCommand",
    "Command",
    "DefaultStudentStrategy",
    "GPAFirstStrategy",
    "PriorityOrderIterator",
    "PriorityStrategy",
    "RemoveTopCommand",
    "Roster",
    "Student",
    "StudentPriorityQueue",
    "UndoManager",
    "__version__",
]
