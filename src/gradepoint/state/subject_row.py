import uuid
from dataclasses import dataclass, field

from gradepoint.core.credits import DEFAULT_CREDITS
from gradepoint.core.grades import DEFAULT_GRADE


def new_row_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class SubjectRow:
    id: str = field(default_factory=new_row_id)
    name: str = ""
    grade: str = DEFAULT_GRADE
    credits: float = DEFAULT_CREDITS
