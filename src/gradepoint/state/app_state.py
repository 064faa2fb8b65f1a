import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from gradepoint.core.credits import parse_credits
from gradepoint.core.gpa import Summary, aggregate
from gradepoint.state import row_store
from gradepoint.state.row_store import Rows
from gradepoint.state.subject_row import SubjectRow
from gradepoint.state.updates import RowUpdate, SetCredits, SetGrade, SetName

logger = logging.getLogger("gradepoint.state")


@dataclass
class AppState:
    """
    Owns the subject rows for one calculator session.

    Every write goes through row_store and swaps in the new tuple, then
    notifies on_change with a freshly computed summary.
    """

    rows: Rows = field(default_factory=row_store.reset_rows)
    on_change: Optional[Callable[[Summary], None]] = None

    @property
    def summary(self) -> Summary:
        return aggregate(self.rows)

    def find_row(self, row_id: str) -> Optional[SubjectRow]:
        return next((row for row in self.rows if row.id == row_id), None)

    def _commit(self, rows: Rows, action: str) -> None:
        self.rows = rows
        logger.debug("%s -> %d row(s)", action, len(rows))
        if self.on_change is not None:
            self.on_change(self.summary)

    def add_subject(self) -> None:
        self._commit(row_store.add_row(self.rows), "add")

    def remove_subject(self, row_id: str) -> None:
        self._commit(row_store.remove_row(self.rows, row_id), f"remove {row_id}")

    def apply(self, row_id: str, update: RowUpdate) -> None:
        self._commit(row_store.update_row(self.rows, row_id, update), f"{type(update).__name__} {row_id}")

    def update(self, row_id: str, field_name: str, value) -> None:
        self._commit(row_store.update_field(self.rows, row_id, field_name, value), f"update {field_name} {row_id}")

    def set_name(self, row_id: str, name: str) -> None:
        self.apply(row_id, SetName(name))

    def set_grade(self, row_id: str, grade: str) -> None:
        self.apply(row_id, SetGrade(grade))

    def set_credits(self, row_id: str, credits: float) -> None:
        self.apply(row_id, SetCredits(credits))

    def set_credits_text(self, row_id: str, raw: Optional[str]) -> None:
        self.set_credits(row_id, parse_credits(raw))

    def reset(self) -> None:
        self._commit(row_store.reset_rows(), "reset")
