"""Configuration for the stake bulletin tools."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class BulletinConfig(BaseModel):
    """Bulletin configuration with Pydantic validation."""

    # Input and output documents
    input_file: Path = Field(default=Path("Calendar Data.docx"))
    bulletin_file: Path = Field(default=Path("Two Week Calendar.docx"))
    upcoming_file: Path = Field(default=Path("Upcoming Events.docx"))
    major_file: Path = Field(default=Path("Major Events.docx"))

    # Skip lists
    skip_dir: Path = Field(default=Path("."))
    skip_events_filename: str = Field(default="skip_events.txt")
    skip_if_contains_filename: str = Field(default="skip_if_contains.txt")
    skip_events_upcoming_filename: str = Field(default="skip_events_upcoming.txt")
    skip_events_major_filename: str = Field(default="skip_events_major.txt")

    # Logging
    log_dir: Path = Field(default=Path("logs"))
    log_filename: str = Field(default="stake_bulletin.log")

    # Reporting window length in days
    window_days: int = Field(default=14, ge=1)

    @property
    def skip_events_path(self) -> Path:
        return self.skip_dir / self.skip_events_filename

    @property
    def skip_if_contains_path(self) -> Path:
        return self.skip_dir / self.skip_if_contains_filename

    @property
    def skip_events_upcoming_path(self) -> Path:
        return self.skip_dir / self.skip_events_upcoming_filename

    @property
    def skip_events_major_path(self) -> Path:
        return self.skip_dir / self.skip_events_major_filename

    @classmethod
    def from_env(cls) -> "BulletinConfig":
        """Load configuration from environment variables and .env file."""
        load_dotenv()

        config_dict = {}

        # Documents
        if "CALENDAR_DATA" in os.environ:
            config_dict["input_file"] = Path(os.environ["CALENDAR_DATA"])
        if "BULLETIN_FILE" in os.environ:
            config_dict["bulletin_file"] = Path(os.environ["BULLETIN_FILE"])
        if "UPCOMING_FILE" in os.environ:
            config_dict["upcoming_file"] = Path(os.environ["UPCOMING_FILE"])
        if "MAJOR_FILE" in os.environ:
            config_dict["major_file"] = Path(os.environ["MAJOR_FILE"])

        # Skip lists
        if "SKIP_DIR" in os.environ:
            config_dict["skip_dir"] = Path(os.environ["SKIP_DIR"])

        # Logging
        if "LOG_DIR" in os.environ:
            config_dict["log_dir"] = Path(os.environ["LOG_DIR"])
        if "LOG_FILENAME" in os.environ:
            config_dict["log_filename"] = os.environ["LOG_FILENAME"]

        if "WINDOW_DAYS" in os.environ:
            raw = os.environ["WINDOW_DAYS"]
            try:
                window_days = int(raw)
            except ValueError:
                window_days = 0
            if window_days >= 1:
                config_dict["window_days"] = window_days
            else:
                logger.warning(
                    f"Ignoring WINDOW_DAYS={raw!r}; it must be a whole number of "
                    "days of at least 1"
                )

        return cls(**config_dict)
