"""CLI setup functions for readers."""

from bulletin.ingestion.base import ReaderRegistry
from bulletin.ingestion.text_reader import TextReader
from bulletin.ingestion.word_reader import WordReader


def setup_reader_registry() -> ReaderRegistry:
    """Set up reader registry with all readers."""
    registry = ReaderRegistry()
    registry.register(WordReader(), [".doc", ".docx"])
    registry.register(TextReader(), [".txt"])
    return registry
