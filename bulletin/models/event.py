"""Calendar event model with Pydantic v2 validation."""

from datetime import date, time, timedelta
from typing import Optional

from pydantic import BaseModel, computed_field, model_validator


class CalendarEvent(BaseModel):
    """A single calendar event, possibly spanning consecutive days.

    All-day events carry no start time. The end date only ever moves
    forward one day at a time through ``extend_to``, so once an event is
    multi-day it stays multi-day.
    """

    description: str
    start_date: date
    end_date: date
    start_time: Optional[time] = None

    @model_validator(mode="before")
    @classmethod
    def default_end_date(cls, data):
        """Single-day events end on the day they start."""
        if isinstance(data, dict) and data.get("end_date") is None:
            data = {**data, "end_date": data.get("start_date")}
        return data

    @model_validator(mode="after")
    def validate_dates(self):
        """Validate date ordering."""
        if self.end_date < self.start_date:
            raise ValueError("end_date must be >= start_date")
        return self

    @computed_field
    @property
    def all_day(self) -> bool:
        """True if the event has no time of day."""
        return self.start_time is None

    @computed_field
    @property
    def multi_day(self) -> bool:
        """True if end_date is after start_date."""
        return self.end_date > self.start_date

    def is_next_day(self, day: date) -> bool:
        """True if ``day`` is the day after this event's end date."""
        return self.end_date == day - timedelta(days=1)

    def extend_to(self, day: date) -> bool:
        """Extend the event to ``day`` if it is the next consecutive day.

        Returns:
            True if the end date was moved.
        """
        if not self.is_next_day(day):
            return False
        self.end_date = day
        return True
