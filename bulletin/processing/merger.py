"""Collapse repeated all-day entries on consecutive days into one event."""

import logging

from bulletin.models.event import CalendarEvent
from bulletin.models.ingestion import EventArena
from bulletin.models.window import ReportingWindow
from bulletin.processing.builder import EventCandidate

logger = logging.getLogger(__name__)


class MultiDayMerger:
    """Builds events, extending open all-day events instead of duplicating them.

    ``open_events`` maps a description to the arena index of the most
    recent all-day event with that description. Adjacency is only found
    in date-ascending order; input out of order is not merged.
    """

    def __init__(self, arena: EventArena, window: ReportingWindow):
        self.arena = arena
        self.window = window
        self.open_events: dict[str, int] = {}

    def add(self, candidate: EventCandidate) -> int | None:
        """Add a candidate event.

        Returns:
            Arena index of a newly created event, or None if an open
            event was extended instead.
        """
        if candidate.time is None:
            index = self.open_events.get(candidate.description)
            if index is not None:
                event = self.arena[index]
                if event.extend_to(candidate.date):
                    self.window.observe(candidate.date)
                    logger.debug(
                        f"Extended {candidate.description!r} to {candidate.date}"
                    )
                    return None

            index = self._create(candidate)
            self.open_events[candidate.description] = index
            return index

        return self._create(candidate)

    def _create(self, candidate: EventCandidate) -> int:
        event = CalendarEvent(
            description=candidate.description,
            start_date=candidate.date,
            start_time=candidate.time,
        )
        self.window.observe(candidate.date)
        return self.arena.append(event)
