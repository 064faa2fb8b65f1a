from dataclasses import dataclass, replace
from typing import Optional, Union

from gradepoint.core.credits import check_credits, parse_credits
from gradepoint.core.grades import UnknownGradeError, is_grade
from gradepoint.state.subject_row import SubjectRow


@dataclass(frozen=True)
class SetName:
    name: str

    def apply(self, row: SubjectRow) -> SubjectRow:
        return replace(row, name=self.name)


@dataclass(frozen=True)
class SetGrade:
    grade: str

    def __post_init__(self) -> None:
        if not is_grade(self.grade):
            raise UnknownGradeError(f"Unsupported letter grade: {self.grade}")

    def apply(self, row: SubjectRow) -> SubjectRow:
        return replace(row, grade=self.grade)


@dataclass(frozen=True)
class SetCredits:
    credits: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "credits", check_credits(self.credits))

    def apply(self, row: SubjectRow) -> SubjectRow:
        return replace(row, credits=self.credits)


RowUpdate = Union[SetName, SetGrade, SetCredits]


def update_for_field(field: str, value) -> Optional[RowUpdate]:
    """
    Map a field-keyed edit onto its update; None for fields that are not editable.
    Credits go through the same coercion as typed input.
    """
    if field == "name":
        return SetName(value)
    if field == "grade":
        return SetGrade(value)
    if field == "credits":
        return SetCredits(parse_credits(value))
    return None
