"""Tests for event date and time rendering."""

from datetime import date, time

from bulletin.models.event import CalendarEvent
from bulletin.output.formatter import EventFormatter


def all_day(day: int, description: str = "Temple Day", end: int | None = None):
    return CalendarEvent(
        description=description,
        start_date=date(2023, 12, day),
        end_date=date(2023, 12, end) if end else None,
    )


def test_single_day_date(december_context):
    formatter = EventFormatter(december_context)
    assert formatter.date_string(all_day(7)) == "Thu, Dec 7"


def test_repeated_date_is_blank_until_date_changes(december_context):
    formatter = EventFormatter(december_context)
    dates = [
        formatter.date_string(all_day(day, f"Event {i}"))
        for i, day in enumerate([7, 7, 7, 8, 8, 7])
    ]
    assert dates == ["Thu, Dec 7", "", "", "Fri, Dec 8", "", "Thu, Dec 7"]


def test_reset_section_restarts_deduplication(december_context):
    formatter = EventFormatter(december_context)
    assert formatter.date_string(all_day(7)) == "Thu, Dec 7"
    december_context.reset_section()
    assert formatter.date_string(all_day(7)) == "Thu, Dec 7"


def test_multi_day_same_month(december_context, plain_context):
    event = all_day(7, end=8)
    assert EventFormatter(december_context).date_string(event) == "Thu, Dec 7 – 8"
    assert EventFormatter(plain_context).date_string(event) == "Thu, Dec 7 - 8"


def test_multi_day_across_months(december_context):
    event = CalendarEvent(
        description="Youth Conference",
        start_date=date(2023, 11, 30),
        end_date=date(2023, 12, 2),
    )
    assert EventFormatter(december_context).date_string(event) == "Thu, Nov 30 – Dec 2"


def test_multi_day_does_not_affect_deduplication(december_context):
    formatter = EventFormatter(december_context)
    assert formatter.date_string(all_day(7)) == "Thu, Dec 7"
    assert formatter.date_string(all_day(7, "Conference", end=9)) == "Thu, Dec 7 – 9"
    assert formatter.date_string(all_day(7, "Dinner")) == ""


def test_time_string():
    def timed(tod: time) -> CalendarEvent:
        return CalendarEvent(
            description="Choir", start_date=date(2023, 12, 7), start_time=tod
        )

    assert EventFormatter.time_string(all_day(7)) == ""
    assert EventFormatter.time_string(timed(time(19, 0))) == "7:00 PM"
    assert EventFormatter.time_string(timed(time(9, 5))) == "9:05 AM"
    assert EventFormatter.time_string(timed(time(12, 30))) == "12:30 PM"
    assert EventFormatter.time_string(timed(time(0, 15))) == "12:15 AM"


def test_text_line_columns(plain_context):
    event = CalendarEvent(
        description="Stake Choir Practice",
        start_date=date(2023, 12, 7),
        start_time=time(19, 0),
    )
    line = EventFormatter(plain_context).text_line(event)
    assert line == "Thu, Dec 7       7:00 PM    Stake Choir Practice"


def test_digest_dates(december_context, plain_context):
    word = EventFormatter(december_context)
    plain = EventFormatter(plain_context)
    cross_month = CalendarEvent(
        description="Youth Conference",
        start_date=date(2023, 11, 30),
        end_date=date(2023, 12, 1),
    )

    assert word.digest_date(all_day(7)) == "12/7"
    assert word.digest_date(all_day(7, end=8)) == "12/7–8"
    assert plain.digest_date(all_day(7, end=8)) == "12/7-8"
    assert word.digest_date(cross_month) == "11/30–12/1"


def test_digest_line(december_context, plain_context):
    event = all_day(7, "Stake Temple Day", end=8)
    assert EventFormatter(december_context).digest_line(event) == "12/7–8 – Stake Temple Day"
    assert EventFormatter(plain_context).digest_line(event) == "12/7-8 - Stake Temple Day"


def test_header(december_context):
    assert EventFormatter(december_context).header() == "December 7 – December 20"
