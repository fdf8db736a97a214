"""Render event dates and times for output."""

from datetime import date

from bulletin.models.event import CalendarEvent
from bulletin.models.session import RunContext


def weekday_date(day: date) -> str:
    """e.g. "Thu, Dec 7"."""
    return f"{day:%a}, {day:%b} {day.day}"


def month_day(day: date) -> str:
    """e.g. "Dec 7"."""
    return f"{day:%b} {day.day}"


def numeric_date(day: date) -> str:
    """e.g. "12/7"."""
    return f"{day.month}/{day.day}"


class EventFormatter:
    """Formats events using the run's punctuation and date de-duplication."""

    def __init__(self, context: RunContext):
        self.context = context

    def date_string(self, event: CalendarEvent) -> str:
        """Bulletin date column.

        A single-day event shows its date only the first time that date
        appears in the current section, leaving later rows blank.
        """
        if event.multi_day:
            dash = self.context.punctuation.spaced_dash
            if event.start_date.month == event.end_date.month:
                end = str(event.end_date.day)
            else:
                end = month_day(event.end_date)
            return f"{weekday_date(event.start_date)}{dash}{end}"

        if event.start_date == self.context.last_date_printed:
            return ""

        self.context.last_date_printed = event.start_date
        return weekday_date(event.start_date)

    @staticmethod
    def time_string(event: CalendarEvent) -> str:
        """Bulletin time column, e.g. "7:00 PM"; empty for all-day events."""
        if event.all_day:
            return ""
        hour = event.start_time.hour % 12 or 12
        suffix = "AM" if event.start_time.hour < 12 else "PM"
        return f"{hour}:{event.start_time.minute:02d} {suffix}"

    def row(self, event: CalendarEvent) -> tuple[str, str, str]:
        """(date, time, description) triple for one bulletin row."""
        return (self.date_string(event), self.time_string(event), event.description)

    def text_line(self, event: CalendarEvent) -> str:
        """Bulletin row for plain-text output."""
        date_str, time_str, description = self.row(event)
        return f"{date_str:<16} {time_str:<10} {description}"

    def digest_date(self, event: CalendarEvent) -> str:
        """Digest date, e.g. "12/7", "12/7–8" or "11/30–12/1"."""
        start = numeric_date(event.start_date)
        if not event.multi_day:
            return start
        dash = self.context.punctuation.dash
        if event.start_date.month == event.end_date.month:
            return f"{start}{dash}{event.end_date.day}"
        return f"{start}{dash}{numeric_date(event.end_date)}"

    def digest_line(self, event: CalendarEvent) -> str:
        """e.g. "12/7–8 – Ward Temple Day"."""
        return (
            f"{self.digest_date(event)}{self.context.punctuation.spaced_dash}"
            f"{event.description}"
        )

    def header(self) -> str:
        """Window dates for the bulletin header."""
        return self.context.window.header(self.context.punctuation.spaced_dash)
