"""Student class. See class description."""

from dataclasses import dataclass

MAX_UNITS = 150
MAX_GPA = 4.0


@dataclass(frozen=True, eq=False)
class Student:
    """
    An immutable student record.

    Equality and hashing use ``red_id`` only, so two records with the same id are the same student.
    """

    name: str
    red_id: str
    email: str
    gpa: float
    units: int

    def __post_init__(self) -> None:
        """
        Verify this student has valid fields.

        :raises ValueError: If a field is not valid. The message names the field.
        """
        if self.name is None or not self.name.strip():
            raise ValueError("name must be non-empty")
        if self.red_id is None or not self.red_id.strip():
            raise ValueError("red_id must be non-empty")
        if self.email is None or "@" not in self.email:
            raise ValueError("email must contain '@'")
        if self.gpa is None or not 0.0 <= self.gpa <= MAX_GPA:
            raise ValueError(f"gpa must be in [0.0, {MAX_GPA}]")
        if self.units is None or not 0 <= self.units <= MAX_UNITS:
            raise ValueError(f"units must be in [0, {MAX_UNITS}]")

    def priority_score(self) -> float:
        """
        Weighted score used by the default strategy.

        70% normalized units, 30% normalized GPA.

        :returns: A score between 0.0 and 1.0.
        """
        return 0.7 * (self.units / MAX_UNITS) + 0.3 * (self.gpa / MAX_GPA)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self.red_id == other.red_id

    def __hash__(self) -> int:
        return hash(self.red_id)

    def __str__(self) -> str:
        return f"Student{{{self.red_id}, {self.name}, gpa={self.gpa}, units={self.units}}}"
