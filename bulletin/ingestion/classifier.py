"""Classify calendar text fragments as dates, times, or event descriptions.

Two input layouts are supported:

- Variant A (old style): separate paragraphs for the date ("12/7/2023"),
  the time ("7:00p" or "All Day") and the event description.
- Variant B (agenda view): a long-form header per day
  ("Thursday, December 7th, 2023") followed by
  "7:00pm - 9:00pm - Description" or "All Day - Description" lines.
"""

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime, time
from enum import Enum
from typing import Union

logger = logging.getLogger(__name__)

# Variant A patterns
DATE_PATTERN = re.compile(r"\d{1,2}/\d{1,2}/\d{4}")
TIME_PATTERN = re.compile(r"(All Day|\d{1,2}:\d{2}[ap])")

# Variant B patterns
DAY_DATE_PATTERN = re.compile(r"[A-Z][a-z]+, ([A-Z][a-z]+) (\d\d?)[a-z][a-z], (\d{4})")
TIME_EVENT_PATTERN = re.compile(
    r"(All Day|(\d{1,2}(:\d{2})?)(am|pm)? - \d{1,2}(:\d{2})?(am|pm)) - (.+)"
)

ALL_DAY = "All Day"


class InputFormat(str, Enum):
    """Layout of the pasted calendar text."""

    SEPARATE_LINES = "A"
    AGENDA = "B"


@dataclass(frozen=True)
class DateMarker:
    """A fragment setting the current date."""

    date: date


@dataclass(frozen=True)
class TimeMarker:
    """A fragment setting the current time; None means all day."""

    time: time | None


@dataclass(frozen=True)
class EventLine:
    """An event description tied to the current date and time."""

    description: str


@dataclass(frozen=True)
class TimedEntry:
    """An agenda line carrying its own start time and description."""

    time: time | None
    description: str


@dataclass(frozen=True)
class InvalidDate:
    """A date header that matches the layout but names no real date."""

    text: str


@dataclass(frozen=True)
class Unrecognized:
    """An agenda fragment matching neither a header nor an entry."""

    text: str


Fragment = Union[
    DateMarker, TimeMarker, EventLine, TimedEntry, InvalidDate, Unrecognized
]


def parse_numeric_date(text: str) -> date | None:
    """Parse "M/D/YYYY", returning None for impossible dates."""
    try:
        return datetime.strptime(text, "%m/%d/%Y").date()
    except ValueError:
        return None


def parse_short_time(text: str) -> time | None:
    """Parse "H:MMa" / "H:MMp" into a time of day."""
    suffix = "AM" if text.endswith("a") else "PM"
    return _parse_clock(f"{text[:-1]} {suffix}")


def _parse_clock(text: str) -> time | None:
    try:
        return datetime.strptime(text, "%I:%M %p").time()
    except ValueError:
        return None


def classify_line(text: str) -> Fragment:
    """Classify a variant A fragment.

    Anything that is not a well-formed date or time is an event line,
    including blank text and text that only looks like a date.
    """
    if DATE_PATTERN.fullmatch(text):
        parsed = parse_numeric_date(text)
        if parsed is not None:
            return DateMarker(parsed)
        logger.debug(f"Treating invalid date as description: {text!r}")

    elif TIME_PATTERN.fullmatch(text):
        if text == ALL_DAY:
            return TimeMarker(None)
        parsed = parse_short_time(text)
        if parsed is not None:
            return TimeMarker(parsed)
        logger.debug(f"Treating invalid time as description: {text!r}")

    return EventLine(text)


def classify_agenda(text: str) -> Fragment:
    """Classify a variant B fragment.

    A start time without minutes gets ":00"; a start time without am/pm
    borrows the suffix of the end time. For ranges crossing noon
    ("11 - 1:00pm") that yields a start later than intended; this is
    kept as-is.
    """
    day_match = DAY_DATE_PATTERN.fullmatch(text)
    if day_match:
        month, day, year = day_match.groups()
        try:
            return DateMarker(datetime.strptime(f"{month} {day} {year}", "%B %d %Y").date())
        except ValueError:
            return InvalidDate(text)

    event_match = TIME_EVENT_PATTERN.fullmatch(text)
    if event_match:
        span = event_match.group(1)
        start = event_match.group(2)
        start_suffix = event_match.group(4)
        end_suffix = event_match.group(6)
        description = event_match.group(7)

        if span == ALL_DAY:
            return TimedEntry(None, description)

        if ":" not in start:
            start += ":00"
        if start_suffix is None:
            start_suffix = end_suffix
        parsed = _parse_clock(f"{start} {start_suffix.upper()}")
        if parsed is None:
            logger.debug(f"Ignoring entry with invalid time: {text!r}")
            return Unrecognized(text)
        return TimedEntry(parsed, description)

    return Unrecognized(text)


def classify(text: str, input_format: InputFormat) -> Fragment:
    """Classify a fragment according to the input layout."""
    if input_format is InputFormat.SEPARATE_LINES:
        return classify_line(text)
    return classify_agenda(text)
