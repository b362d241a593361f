"""Roster class."""

from __future__ import annotations

from pathlib import Path

import pydantic
import yaml

from studentqueue.priority_queue import StudentPriorityQueue
from studentqueue.strategies import STRATEGIES, PriorityStrategy, get_strategy

from .student import Student


class Roster(pydantic.BaseModel):
    """A set of students and the name of the strategy to order them by."""

    strategy: str = "default"
    students: list[Student] = pydantic.Field(default_factory=list)

    model_config = pydantic.ConfigDict(extra="forbid")

    @pydantic.field_validator("strategy")
    def _validate_strategy(cls, value: str) -> str:
        if value not in STRATEGIES:
            raise ValueError(
                f"unknown strategy '{value}', expected one of: {', '.join(STRATEGIES)}"
            )
        return value

    @pydantic.model_validator(mode="after")
    def _check_unique_red_ids(self) -> Roster:
        seen: set[str] = set()
        duplicates = []
        for student in self.students:
            if student.red_id in seen:
                duplicates.append(student.red_id)
            seen.add(student.red_id)
        if duplicates:
            raise ValueError(f"duplicate red_id(s): {', '.join(duplicates)}")
        return self

    def to_yaml(self, file_path: str | Path) -> None:
        """
        Write roster to yaml file.

        :param file_path: Path to the file to write to.
        """
        with open(file_path, "w") as file:
            yaml.safe_dump(self.model_dump(), file, sort_keys=False)

    @classmethod
    def from_yaml(cls, file_path: str | Path) -> Roster:
        """
        Load roster from yaml file.

        :param file_path: Path to the file to load from.
        :returns: The roster.
        """
        with open(file_path) as file:
            data = yaml.safe_load(file)
        return Roster(**data)

    def get_strategy(self) -> PriorityStrategy:
        """
        Get the strategy named in this roster.

        :returns: A new instance of the strategy.
        """
        return get_strategy(self.strategy)

    def build_queue(self, strategy: PriorityStrategy | None = None) -> StudentPriorityQueue:
        """
        Create a queue holding every student on the roster.

        :param strategy: Overrides the roster's own strategy when given.
        :returns: The populated queue.
        """
        queue = StudentPriorityQueue(strategy or self.get_strategy())
        for student in self.students:
            queue.insert(student)
        return queue
