"""Loading skip-word and skip-phrase lists from flat files."""

import logging
from pathlib import Path

from bulletin.exceptions import ConfigurationMissingError

logger = logging.getLogger(__name__)


def read_skip_file(path: Path) -> set[str]:
    """Read one entry per line, ignoring blank lines and lines starting with "#".

    Entries are kept exactly as written so that exact-match skipping
    compares against the untrimmed event text.

    Raises:
        ConfigurationMissingError: If the file does not exist
    """
    if not path.exists():
        raise ConfigurationMissingError(f"Skip list not found: {path}")

    with open(path, encoding="utf-8") as f:
        lines = f.read().splitlines()
    return {
        line for line in lines if line.strip() and not line.strip().startswith("#")
    }


def load_skip_list(path: Path) -> set[str]:
    """Load a skip list, treating a missing file as an empty list."""
    try:
        entries = read_skip_file(path)
    except ConfigurationMissingError as e:
        logger.warning(str(e))
        return set()
    logger.info(f"Loaded {len(entries)} entries from {path}")
    return entries
