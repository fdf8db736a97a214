"""Data models for calendar events and run state."""

from bulletin.models.event import CalendarEvent
from bulletin.models.ingestion import EventArena, IngestionResult
from bulletin.models.session import Punctuation, RunContext
from bulletin.models.window import ReportingWindow

__all__ = [
    "CalendarEvent",
    "EventArena",
    "IngestionResult",
    "Punctuation",
    "ReportingWindow",
    "RunContext",
]
