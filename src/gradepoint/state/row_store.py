from typing import Tuple

from gradepoint.state.subject_row import SubjectRow
from gradepoint.state.updates import RowUpdate, update_for_field

Rows = Tuple[SubjectRow, ...]


def reset_rows() -> Rows:
    return (SubjectRow(),)


def add_row(rows: Rows) -> Rows:
    return (*rows, SubjectRow())


def remove_row(rows: Rows, row_id: str) -> Rows:
    # The last row is replaced with a fresh one, never dropped.
    if len(rows) <= 1:
        return reset_rows()
    return tuple(row for row in rows if row.id != row_id)


def update_row(rows: Rows, row_id: str, update: RowUpdate) -> Rows:
    if not any(row.id == row_id for row in rows):
        return rows
    return tuple(update.apply(row) if row.id == row_id else row for row in rows)


def update_field(rows: Rows, row_id: str, field: str, value) -> Rows:
    update = update_for_field(field, value)
    if update is None:
        return rows
    return update_row(rows, row_id, update)
