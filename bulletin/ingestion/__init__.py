"""Reading calendar data documents and skip-list files."""

from bulletin.ingestion.base import ReaderRegistry
from bulletin.ingestion.service import IngestionService
from bulletin.ingestion.text_reader import TextReader
from bulletin.ingestion.word_reader import WordReader

__all__ = ["IngestionService", "ReaderRegistry", "TextReader", "WordReader"]
