"""Base classes for calendar data readers."""

from pathlib import Path
from typing import Dict, List, Protocol

from bulletin.exceptions import UnsupportedFormatError


class FragmentReader(Protocol):
    """Protocol for readers yielding text fragments in document order."""

    def read(self, path: Path) -> list[str]:
        """Read text fragments from file path."""
        ...


class ReaderRegistry:
    """Registry for fragment readers by file extension."""

    def __init__(self):
        """Initialize registry."""
        self._readers: Dict[str, FragmentReader] = {}

    def register(self, reader: FragmentReader, extensions: List[str]) -> None:
        """Register reader for file extensions."""
        for ext in extensions:
            # Normalize extension (remove leading dot, lowercase)
            normalized_ext = ext.lstrip(".").lower()
            self._readers[normalized_ext] = reader

    def get_reader(self, path: Path) -> FragmentReader:
        """Get reader by file extension."""
        ext = path.suffix.lstrip(".").lower()
        if ext not in self._readers:
            supported = ", ".join(sorted(self._readers))
            raise UnsupportedFormatError(
                f"Unsupported file format: .{ext}. Supported formats: {supported}"
            )
        return self._readers[ext]
