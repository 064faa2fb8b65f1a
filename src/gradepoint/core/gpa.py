from dataclasses import dataclass
from typing import Iterable

from gradepoint.core.grades import points_of
from gradepoint.state.subject_row import SubjectRow

GOOD_STANDING = "Good Standing"
ACADEMIC_WARNING = "Academic Warning"
GOOD_STANDING_MIN_CGPA = 2.0


@dataclass(frozen=True)
class Summary:
    cgpa: float
    cgpa_display: str
    total_points: float
    total_credits: float
    total_subjects: int
    status: str


def standing_for(cgpa: float) -> str:
    return GOOD_STANDING if cgpa >= GOOD_STANDING_MIN_CGPA else ACADEMIC_WARNING


def aggregate(rows: Iterable[SubjectRow]) -> Summary:
    """
    CGPA = Σ(grade_point * credits) / Σ(credits), 0 when no credits.
    Standing is judged on the 2-place value that is shown to the user.
    """
    total_points = 0.0
    total_credits = 0.0
    total_subjects = 0

    for row in rows:
        total_points += points_of(row.grade) * row.credits
        total_credits += row.credits
        total_subjects += 1

    raw = total_points / total_credits if total_credits > 0 else 0.0
    display = f"{raw:.2f}"
    cgpa = float(display)

    return Summary(
        cgpa=cgpa,
        cgpa_display=display,
        total_points=total_points,
        total_credits=total_credits,
        total_subjects=total_subjects,
        status=standing_for(cgpa),
    )
