# tests/test_date_progression.py
import unittest
from datetime import date, datetime

from weighted_trie.core.date_progression import DateProgression, date_range


class DateProgressionTests(unittest.TestCase):
    def test_weekly_steps(self):
        prog = DateProgression(date(2019, 8, 7), date(2019, 10, 11)).step(7)
        got = ",".join(d.isoformat() for d in prog)
        self.assertEqual(
            got,
            "2019-08-07,2019-08-14,2019-08-21,2019-08-28,2019-09-04,"
            "2019-09-11,2019-09-18,2019-09-25,2019-10-02,2019-10-09",
        )
        self.assertEqual(len(prog), 10)

    def test_restartable(self):
        prog = date_range(date(2020, 2, 27), date(2020, 3, 1))
        first = list(prog)
        self.assertEqual(first, list(prog))
        # leap year
        self.assertIn(date(2020, 2, 29), first)
        self.assertEqual(len(first), len(prog))

    def test_inclusive_end_and_empty(self):
        self.assertEqual(list(date_range(date(2021, 1, 1), date(2021, 1, 1))), [date(2021, 1, 1)])
        backwards = date_range(date(2021, 1, 2), date(2021, 1, 1))
        self.assertEqual(list(backwards), [])
        self.assertEqual(len(backwards), 0)

    def test_contains_checks_bounds(self):
        prog = date_range(date(2021, 1, 1), date(2021, 1, 31), 10)
        self.assertIn(date(2021, 1, 15), prog)
        self.assertNotIn(date(2021, 2, 1), prog)
        self.assertNotIn(datetime(2021, 1, 15, 12), prog)
        self.assertNotIn("2021-01-15", prog)

    def test_invalid_step(self):
        for bad in (0, -3, 1.5, True):
            with self.assertRaises(ValueError):
                DateProgression(date(2021, 1, 1), date(2021, 2, 1), bad)


if __name__ == "__main__":
    unittest.main()
