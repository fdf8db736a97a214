"""Event building, merging, skipping and ward classification."""

from bulletin.processing.builder import EventBuilder, EventCandidate
from bulletin.processing.merger import MultiDayMerger
from bulletin.processing.pipeline import CalendarPipeline
from bulletin.processing.skip import SkipClassifier
from bulletin.processing.ward import Destination, WardClassifier

__all__ = [
    "CalendarPipeline",
    "Destination",
    "EventBuilder",
    "EventCandidate",
    "MultiDayMerger",
    "SkipClassifier",
    "WardClassifier",
]
