"""Undoable commands on a StudentPriorityQueue and the manager keeping their history."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING

from studentqueue.errors import CommandStateError, NothingToUndoError

if TYPE_CHECKING:
    from studentqueue.models import Student
    from studentqueue.priority_queue import StudentPriorityQueue

logger = logging.getLogger(__name__)


class CommandState(Enum):
    """Lifecycle of a command."""

    CREATED = "CREATED"
    EXECUTED = "EXECUTED"
    UNDONE = "UNDONE"


class Command(ABC):
    """
    A reversible operation on a queue.

    A command is executed once and can then be undone once. Subclasses implement
    ``_execute`` and ``_undo``; ``execute`` and ``undo`` enforce the order.
    """

    def __init__(self, queue: StudentPriorityQueue) -> None:
        self._queue = queue
        self._state = CommandState.CREATED

    @property
    def state(self) -> CommandState:
        return self._state

    @property
    @abstractmethod
    def name(self) -> str:
        """Human readable description of the command."""

    def execute(self) -> None:
        """
        Run the command.

        :raises CommandStateError: If the command was already executed.
        """
        if self._state is not CommandState.CREATED:
            raise CommandStateError(f"Cannot execute '{self.name}': it is {self._state.value}.")
        self._execute()
        self._state = CommandState.EXECUTED

    def undo(self) -> None:
        """
        Reverse the command.

        :raises CommandStateError: If the command is not in the executed state.
        """
        if self._state is not CommandState.EXECUTED:
            raise CommandStateError(f"Cannot undo '{self.name}': it is {self._state.value}.")
        self._undo()
        self._state = CommandState.UNDONE

    @abstractmethod
    def _execute(self) -> None: ...

    @abstractmethod
    def _undo(self) -> None: ...

    def __str__(self) -> str:
        return self.name


class AddStudentCommand(Command):
    """Insert a student; undo removes it again."""

    def __init__(self, queue: StudentPriorityQueue, student: Student) -> None:
        super().__init__(queue)
        self._student = student

    @property
    def student(self) -> Student:
        return self._student

    @property
    def name(self) -> str:
        return f"Add Student: {self._student.name} ({self._student.red_id})"

    def _execute(self) -> None:
        self._queue.insert(self._student)

    def _undo(self) -> None:
        self._queue.remove(self._student)


class RemoveTopCommand(Command):
    """Extract the highest priority student; undo puts it back."""

    def __init__(self, queue: StudentPriorityQueue) -> None:
        super().__init__(queue)
        self._removed: Student | None = None

    @property
    def removed(self) -> Student | None:
        """The student taken off the queue, None if it was empty or not executed yet."""
        return self._removed

    @property
    def name(self) -> str:
        if self._removed is None:
            return "Remove Top: None"
        return f"Remove Top: {self._removed.name} ({self._removed.red_id})"

    def _execute(self) -> None:
        self._removed = self._queue.extract_max()

    def _undo(self) -> None:
        if self._removed is not None:
            self._queue.insert(self._removed)


class UndoManager:
    """Executes commands and keeps a LIFO history to undo them."""

    def __init__(self) -> None:
        self._history: list[Command] = []

    def execute(self, command: Command) -> None:
        """
        Execute a command and push it onto the history.

        :param command: The command to execute.
        :raises TypeError: If ``command`` is None.
        """
        if command is None:
            raise TypeError("command must not be None")
        command.execute()
        self._history.append(command)
        logger.debug("Executed '%s' (history=%d)", command.name, len(self._history))

    def can_undo(self) -> bool:
        """
        Check if there is a command to undo.

        :returns: Whether the history is non-empty.
        """
        return bool(self._history)

    def undo(self) -> Command:
        """
        Undo the most recent command.

        :returns: The command that was undone.
        :raises NothingToUndoError: If the history is empty.
        """
        if not self._history:
            raise NothingToUndoError("Nothing to undo")
        command = self._history.pop()
        command.undo()
        logger.debug("Undid '%s' (history=%d)", command.name, len(self._history))
        return command

    def history_size(self) -> int:
        """
        Get the number of commands that can be undone.

        :returns: The history depth.
        """
        return len(self._history)

    def __len__(self) -> int:
        return len(self._history)
