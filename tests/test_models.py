"""Tests for Pydantic models and run state."""

from datetime import date, time

import pytest
from pydantic import ValidationError

from bulletin.models.event import CalendarEvent
from bulletin.models.ingestion import EventArena
from bulletin.models.session import Punctuation, RunContext
from bulletin.models.window import ReportingWindow


def test_event_creation_defaults_end_date():
    event = CalendarEvent(description="Temple Day", start_date=date(2023, 12, 7))
    assert event.end_date == date(2023, 12, 7)
    assert event.all_day is True
    assert event.multi_day is False


def test_timed_event_is_not_all_day():
    event = CalendarEvent(
        description="Choir", start_date=date(2023, 12, 7), start_time=time(19, 0)
    )
    assert event.all_day is False


def test_event_end_before_start_rejected():
    with pytest.raises(ValidationError):
        CalendarEvent(
            description="Temple Day",
            start_date=date(2023, 12, 7),
            end_date=date(2023, 12, 6),
        )


def test_extend_to_next_day_only():
    event = CalendarEvent(description="Temple Day", start_date=date(2023, 12, 7))
    assert event.extend_to(date(2023, 12, 9)) is False
    assert event.end_date == date(2023, 12, 7)

    assert event.extend_to(date(2023, 12, 8)) is True
    assert event.end_date == date(2023, 12, 8)
    assert event.multi_day is True

    assert event.extend_to(date(2023, 12, 8)) is False
    assert event.multi_day is True


def test_computed_fields_in_dump():
    event = CalendarEvent(
        description="Temple Day",
        start_date=date(2023, 12, 7),
        end_date=date(2023, 12, 8),
    )
    dumped = event.model_dump()
    assert dumped["all_day"] is True
    assert dumped["multi_day"] is True


def test_arena_resolves_indices_in_order():
    arena = EventArena()
    first = arena.append(CalendarEvent(description="A", start_date=date(2023, 12, 7)))
    second = arena.append(CalendarEvent(description="B", start_date=date(2023, 12, 8)))
    assert (first, second) == (0, 1)
    assert [e.description for e in arena.resolve([1, 0])] == ["B", "A"]


def test_punctuation_dashes():
    assert Punctuation.WORD.spaced_dash == " – "
    assert Punctuation.PLAIN.spaced_dash == " - "
    assert Punctuation.WORD.dash == "–"


def test_run_context_reset_section():
    context = RunContext(window=ReportingWindow.starting(date(2023, 12, 7)))
    assert context.punctuation is Punctuation.WORD
    context.last_date_printed = date(2023, 12, 7)
    context.reset_section()
    assert context.last_date_printed is None
