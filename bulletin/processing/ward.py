"""Classify events as stake-wide or ward specific."""

import logging
from enum import Enum

logger = logging.getLogger(__name__)

# Any of these (case-insensitive) makes an event stake-wide
STAKE_WIDE_TERMS = (
    "STAKE",
    "SEMINARY",
    "WARD CONFERENCE",
    "BRANCH CONFERENCE",
    "FAMILY HISTORY MARATHON",
)

# Case-sensitive substrings marking a ward event. Two-letter codes also
# match inside unrelated words ("CY" in "CYCLE"); skip-if-contains rules
# cover the known false positives. There is no "CP" token; Cypress Park
# events are caught by "Cyp".
WARD_TOKENS = (
    "BP",
    "Buena Park",
    "CY",
    "Cyp",
    "Cypress",
    "LP",
    "La Palma",
    "CR",
    "Crescent",
    "VV",
    "V V",
    "V. V.",
    "Valley View",
    "WG",
    "West Grove",
    "GG",
    "Garden Grove",
    "Korean",
)

# The upcoming events list names wards by their full unit names, so
# community events held in a ward's city (e.g. "La Palma Community Fair")
# stay in the list.
DIGEST_WARD_TOKENS = (
    "BP",
    "Buena Park Ward",
    "CY",
    "Cyp",
    "Cypress Ward",
    "LP",
    "La Palma Ward",
    "CR",
    "Crescent Ward",
    "VV",
    "V V",
    "V. V.",
    "Valley View Ward",
    "CP",
    "Cypress Park Ward",
    "WG",
    "West Grove Ward",
    "GG",
    "Garden Grove 11th Branch",
    "Korean",
)

# Tokens accepted when filtering to one ward
WARD_DESCRIPTIONS = {
    "BP": ("BP", "Buena Park Ward"),
    "CY": ("CY", "Cypress Ward"),
    "LP": ("LP", "La Palma Ward"),
    "CR": ("CR", "Crescent Ward"),
    "VV": ("VV", "V V", "V. V.", "Valley View Ward"),
    "CP": ("CP", "Cypress Park Ward"),
    "WG": ("WG", "West Grove Ward"),
    "GG": ("GG", "Garden Grove 11th Branch", "Korean"),
}

WARD_CODES = tuple(WARD_DESCRIPTIONS)


class Destination(str, Enum):
    """Where a kept event is filed."""

    STAKE = "stake"
    WARD = "ward"
    DROP = "drop"


def normalize_ward_code(code: str) -> str:
    """Upper-case a ward code and check it is known.

    Raises:
        ValueError: If the code is not one of WARD_CODES
    """
    normalized = code.strip().upper()
    if normalized not in WARD_DESCRIPTIONS:
        raise ValueError(
            f"Invalid ward code: {code}. Valid codes: {'|'.join(WARD_CODES)}"
        )
    return normalized


class WardClassifier:
    """Decides stake-wide versus ward audience, optionally for one ward."""

    def __init__(
        self,
        ward_code: str | None = None,
        ward_tokens: tuple[str, ...] = WARD_TOKENS,
    ):
        self.ward_code = normalize_ward_code(ward_code) if ward_code else None
        self.ward_tokens = ward_tokens

    @staticmethod
    def is_stake_wide(description: str) -> bool:
        upper = description.upper()
        return any(term in upper for term in STAKE_WIDE_TERMS)

    def is_ward_event(self, description: str) -> bool:
        """True if the event is for a ward rather than the whole stake."""
        if self.is_stake_wide(description):
            return False
        return any(token in description for token in self.ward_tokens)

    def matches_selected_ward(self, description: str) -> bool:
        """True if no ward is selected or the event names the selected ward."""
        if self.ward_code is None:
            return True
        return any(token in description for token in WARD_DESCRIPTIONS[self.ward_code])

    def route(self, description: str) -> Destination:
        """Pick the output section for an event."""
        if not self.is_ward_event(description):
            return Destination.STAKE
        if self.matches_selected_ward(description):
            return Destination.WARD
        logger.debug(f"Dropping event for another ward: {description!r}")
        return Destination.DROP
