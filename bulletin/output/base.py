"""Base classes for output writers."""

from pathlib import Path
from typing import Protocol

from bulletin.models.ingestion import IngestionResult


class DocumentWriter(Protocol):
    """Protocol for output document writers."""

    def write(self, result: IngestionResult, path: Path) -> None:
        """Write the routed events to file path."""
        ...
