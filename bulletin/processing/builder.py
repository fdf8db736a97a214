"""Turn classified fragments into dated event candidates."""

import logging
from dataclasses import dataclass
from datetime import date, time

from bulletin.exceptions import FatalParseError
from bulletin.ingestion.classifier import (
    DateMarker,
    EventLine,
    Fragment,
    InvalidDate,
    TimedEntry,
    TimeMarker,
    Unrecognized,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EventCandidate:
    """A description anchored at a date and optional time."""

    date: date
    time: time | None
    description: str


class EventBuilder:
    """Tracks the current date and time across fragments.

    A new date resets the time to all day. An unreadable date header
    clears the current date; events after it are dropped with a warning
    until the next valid date, so they are never filed under the
    previous day.
    """

    def __init__(self):
        self.current_date: date | None = None
        self.current_time: time | None = None
        self.bad_date_header: str | None = None

    def feed(self, fragment: Fragment) -> EventCandidate | None:
        """Consume one fragment, returning a candidate for event lines.

        Raises:
            FatalParseError: If an event arrives before any date
        """
        match fragment:
            case DateMarker(date=day):
                self.current_date = day
                self.current_time = None
                self.bad_date_header = None
                return None
            case InvalidDate(text=text):
                logger.warning(f"Invalid date header: {text!r}")
                self.current_date = None
                self.current_time = None
                self.bad_date_header = text
                return None
            case TimeMarker(time=tod):
                self.current_time = tod
                return None
            case EventLine(description=text):
                if self.current_date is None:
                    if not text.strip():
                        return None
                    return self._undated(text)
                return EventCandidate(self.current_date, self.current_time, text)
            case TimedEntry(time=tod, description=text):
                if self.current_date is None:
                    return self._undated(text)
                self.current_time = tod
                return EventCandidate(self.current_date, tod, text)
            case Unrecognized(text=text):
                if text.strip():
                    logger.debug(f"Ignoring unrecognized line: {text!r}")
                return None
        return None

    def _undated(self, text: str) -> None:
        if self.bad_date_header is None:
            raise FatalParseError(
                f"Date must precede events; found {text!r} before any date"
            )
        logger.warning(
            f"Dropping event under invalid date {self.bad_date_header!r}: {text!r}"
        )
        return None
