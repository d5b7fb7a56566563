# date_progression.py
# Closed date range that can be walked at a fixed day stride.
# Lazy and restartable: every iter() starts again from `start`.

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterator


class DateProgression:
    """
    Dates from `start` to `end_inclusive` every `step_days` days.

        >>> list(DateProgression(date(2019, 8, 7), date(2019, 8, 21), 7))
        [datetime.date(2019, 8, 7), datetime.date(2019, 8, 14), datetime.date(2019, 8, 21)]
    """

    __slots__ = ("start", "end_inclusive", "step_days")

    def __init__(self, start: date, end_inclusive: date, step_days: int = 1) -> None:
        if isinstance(step_days, bool) or not isinstance(step_days, int) or step_days <= 0:
            raise ValueError(f"step_days must be a positive int, got {step_days!r}")
        self.start = start
        self.end_inclusive = end_inclusive
        self.step_days = step_days

    def step(self, days: int) -> DateProgression:
        """Same bounds, different stride."""
        return DateProgression(self.start, self.end_inclusive, days)

    def __iter__(self) -> Iterator[date]:
        current = self.start
        stride = timedelta(days=self.step_days)
        while current <= self.end_inclusive:
            yield current
            current += stride

    def __len__(self) -> int:
        span = (self.end_inclusive - self.start).days
        if span < 0:
            return 0
        return span // self.step_days + 1

    def __contains__(self, day: object) -> bool:
        # bound check only, like a closed range
        if isinstance(day, datetime) or not isinstance(day, date):
            return False
        return self.start <= day <= self.end_inclusive

    def __repr__(self) -> str:
        return f"DateProgression({self.start.isoformat()}..{self.end_inclusive.isoformat()} step {self.step_days})"


def date_range(start: date, end_inclusive: date, step_days: int = 1) -> DateProgression:
    return DateProgression(start, end_inclusive, step_days)
