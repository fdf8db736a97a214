"""Reporting window deciding which events appear in output."""

from datetime import date, timedelta
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field, model_validator

if TYPE_CHECKING:
    from bulletin.models.event import CalendarEvent

# date.weekday() value for Thursday
THURSDAY = 3

DEFAULT_WINDOW_DAYS = 14


def next_thursday(today: date) -> date:
    """First Thursday on or after ``today``."""
    yesterday = today - timedelta(days=1)
    days_ahead = (THURSDAY - yesterday.weekday()) % 7 or 7
    return yesterday + timedelta(days=days_ahead)


class ReportingWindow(BaseModel):
    """Inclusive date range used to filter output.

    In include-all mode the window follows the earliest and latest dates
    of every event built during the run, so once parsing is finished
    nothing is filtered out.
    """

    start: date
    end: date
    include_all: bool = Field(default=False)

    @model_validator(mode="after")
    def validate_bounds(self):
        """Validate window ordering."""
        if self.end < self.start:
            raise ValueError("window end must be >= start")
        return self

    @classmethod
    def starting(
        cls,
        start: date,
        days: int = DEFAULT_WINDOW_DAYS,
        include_all: bool = False,
    ) -> "ReportingWindow":
        """Window of ``days`` days beginning on ``start``."""
        return cls(
            start=start,
            end=start + timedelta(days=days - 1),
            include_all=include_all,
        )

    @classmethod
    def default(
        cls,
        today: date | None = None,
        days: int = DEFAULT_WINDOW_DAYS,
        include_all: bool = False,
    ) -> "ReportingWindow":
        """Window beginning on the next Thursday."""
        today = today or date.today()
        return cls.starting(next_thursday(today), days, include_all)

    def observe(self, day: date) -> None:
        """Widen the window to cover ``day`` when including all dates."""
        if not self.include_all:
            return
        if day < self.start:
            self.start = day
        if day > self.end:
            self.end = day

    def includes(self, event: "CalendarEvent") -> bool:
        """True if the event overlaps the window."""
        if self.include_all:
            return True
        return event.start_date <= self.end and event.end_date >= self.start

    def header(self, dash: str) -> str:
        """Window dates for the bulletin header (e.g. "December 7 – December 20")."""
        return (
            f"{self.start:%B} {self.start.day}{dash}{self.end:%B} {self.end.day}"
        )
