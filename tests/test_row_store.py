import unittest

from gradepoint.core.credits import InvalidCreditsError
from gradepoint.core.grades import UnknownGradeError
from gradepoint.state import row_store
from gradepoint.state.subject_row import SubjectRow
from gradepoint.state.updates import SetCredits, SetGrade, SetName


def _is_default(row):
    return (row.name, row.grade, row.credits) == ("", "A+", 3)


class RowStoreTests(unittest.TestCase):
    def setUp(self):
        self.rows = (
            SubjectRow(name="Physics", grade="B", credits=4),
            SubjectRow(name="History", grade="A-", credits=2),
        )

    def test_reset_gives_one_default_row(self):
        rows = row_store.reset_rows()
        self.assertEqual(len(rows), 1)
        self.assertTrue(_is_default(rows[0]))

    def test_add_appends_default_row(self):
        rows = row_store.add_row(self.rows)
        self.assertEqual(len(rows), 3)
        self.assertEqual(rows[:2], self.rows)
        self.assertTrue(_is_default(rows[2]))
        self.assertEqual(len({row.id for row in rows}), 3)

    def test_remove_keeps_order(self):
        rows = row_store.add_row(self.rows)
        rows = row_store.remove_row(rows, self.rows[1].id)
        self.assertEqual([row.name for row in rows], ["Physics", ""])

    def test_remove_unknown_id(self):
        self.assertEqual(row_store.remove_row(self.rows, "missing"), self.rows)

    def test_remove_last_row_resets_it(self):
        only = (SubjectRow(name="Chemistry", grade="C", credits=5),)
        rows = row_store.remove_row(only, only[0].id)
        self.assertEqual(len(rows), 1)
        self.assertTrue(_is_default(rows[0]))
        self.assertNotEqual(rows[0].id, only[0].id)

    def test_remove_sole_row_with_unknown_id_still_resets(self):
        only = (SubjectRow(name="Chemistry", grade="C", credits=5),)
        rows = row_store.remove_row(only, "missing")
        self.assertEqual(len(rows), 1)
        self.assertTrue(_is_default(rows[0]))
        self.assertNotEqual(rows[0].id, only[0].id)

    def test_update(self):
        target = self.rows[0]
        rows = row_store.update_row(self.rows, target.id, SetName("Quantum Physics"))
        rows = row_store.update_row(rows, target.id, SetGrade("A+"))
        rows = row_store.update_row(rows, target.id, SetCredits(1.5))
        self.assertEqual(rows[0].id, target.id)
        self.assertEqual((rows[0].name, rows[0].grade, rows[0].credits), ("Quantum Physics", "A+", 1.5))
        self.assertIs(rows[1], self.rows[1])

    def test_update_unknown_id(self):
        rows = row_store.update_row(self.rows, "missing", SetName("x"))
        self.assertIs(rows, self.rows)

    def test_update_field(self):
        target = self.rows[1]
        rows = row_store.update_field(self.rows, target.id, "credits", 6)
        self.assertEqual(rows[1].credits, 6)
        rows = row_store.update_field(rows, target.id, "grade", "F")
        self.assertEqual(rows[1].grade, "F")

    def test_update_field_ignores_unknown_field(self):
        self.assertIs(row_store.update_field(self.rows, self.rows[0].id, "id", "hijack"), self.rows)
        self.assertIs(row_store.update_field(self.rows, self.rows[0].id, "colour", "red"), self.rows)

    def test_update_field_coerces_credits(self):
        target = self.rows[0].id
        self.assertEqual(row_store.update_field(self.rows, target, "credits", "abc")[0].credits, 0)
        self.assertEqual(row_store.update_field(self.rows, target, "credits", -3)[0].credits, 0)
        self.assertEqual(row_store.update_field(self.rows, target, "credits", "4.5")[0].credits, 4.5)

    def test_set_credits_rejects_invalid_values(self):
        for value in (-3, float("nan"), float("inf"), "abc", None, True):
            with self.assertRaises(InvalidCreditsError):
                SetCredits(value)
        self.assertEqual(SetCredits(2).credits, 2.0)

    def test_set_grade_rejects_unknown_symbol(self):
        with self.assertRaises(UnknownGradeError):
            SetGrade("E")


if __name__ == "__main__":
    unittest.main()
