"""Ingestion service for reading calendar data documents."""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bulletin.ingestion.base import ReaderRegistry

logger = logging.getLogger(__name__)


class IngestionService:
    """Service for reading text fragments from calendar data documents."""

    def __init__(self, reader_registry: "ReaderRegistry"):
        """
        Initialize ingestion service.

        Args:
            reader_registry: Registry for getting appropriate reader by file type
        """
        self.registry = reader_registry

    def read_fragments(self, path: Path) -> list[str]:
        """
        Read the ordered text fragments of a calendar data document.

        Args:
            path: Path to input file (DOC, DOCX, or TXT)

        Returns:
            Fragments in document order

        Raises:
            FileNotFoundError: If input file doesn't exist
            UnsupportedFormatError: If file format is not supported
            IngestionError: On file reading errors
        """
        input_path = Path(path).expanduser().resolve()
        if not input_path.exists():
            raise FileNotFoundError(f"Input file not found: {path}")

        reader = self.registry.get_reader(input_path)
        reader_name = reader.__class__.__name__
        logger.info(
            f"Reading calendar data: {input_path} (format: {input_path.suffix}, reader: {reader_name})"
        )

        fragments = reader.read(input_path)
        logger.info(f"Read {len(fragments)} fragments from {input_path}")
        return fragments
