from types import MappingProxyType
from typing import List, Mapping, Tuple


class UnknownGradeError(ValueError):
    pass


GRADES: Tuple[str, ...] = ("A+", "A", "A-", "B+", "B", "B-", "C+", "C", "D", "F")

GRADE_POINTS: Mapping[str, float] = MappingProxyType(
    {
        "A+": 4.00,
        "A": 3.75,
        "A-": 3.50,
        "B+": 3.25,
        "B": 3.00,
        "B-": 2.75,
        "C+": 2.50,
        "C": 2.25,
        "D": 2.00,
        "F": 0.00,
    }
)

DEFAULT_GRADE = GRADES[0]


def is_grade(value: object) -> bool:
    return isinstance(value, str) and value in GRADE_POINTS


def points_of(grade: str) -> float:
    try:
        return GRADE_POINTS[grade]
    except KeyError as exc:
        raise UnknownGradeError(f"Unsupported letter grade: {grade}") from exc


def grade_reference() -> List[Tuple[str, str]]:
    """(symbol, points) pairs in table order, points formatted to 2 places."""
    return [(grade, f"{GRADE_POINTS[grade]:.2f}") for grade in GRADES]
