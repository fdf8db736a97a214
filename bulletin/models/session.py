"""Per-run formatting and filtering state."""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from bulletin.models.window import ReportingWindow


class Punctuation(str, Enum):
    """Dash style used for ranges and separators."""

    WORD = "word"
    PLAIN = "plain"

    @property
    def dash(self) -> str:
        """Bare dash character."""
        return "–" if self is Punctuation.WORD else "-"

    @property
    def spaced_dash(self) -> str:
        """Dash with a space on either side."""
        return f" {self.dash} "


@dataclass
class RunContext:
    """State shared by the filter and formatter during one run.

    ``last_date_printed`` suppresses repeated date labels within an
    output section; call ``reset_section`` before starting a new one.
    """

    window: ReportingWindow
    punctuation: Punctuation = Punctuation.WORD
    last_date_printed: date | None = None

    def reset_section(self) -> None:
        """Restart date de-duplication for a new output section."""
        self.last_date_printed = None
