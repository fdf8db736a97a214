"""Plain text reader for calendar data."""

import logging
from pathlib import Path

from bulletin.exceptions import IngestionError

logger = logging.getLogger(__name__)


class TextReader:
    """Reader treating each line of a text file as one fragment."""

    def read(self, path: Path) -> list[str]:
        """Read fragments from a UTF-8 text file."""
        logger.info(f"Reading text file: {path}")
        try:
            text = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise IngestionError(f"Failed to read text file: {e}") from e
        return text.splitlines()
