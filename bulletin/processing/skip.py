"""Decide which events are dropped and tally what was dropped."""

import logging
import threading
from collections.abc import Callable, Iterable

logger = logging.getLogger(__name__)


class SkipClassifier:
    """Skips events by exact description or by contained phrase.

    The tally counts each suppressed fragment under its original,
    untrimmed text. Blank descriptions are dropped without being
    counted. ``keep_all`` disables skipping entirely.
    """

    def __init__(
        self,
        skip_events: Iterable[str] = (),
        skip_if_contains: Iterable[str] = (),
        keep_all: bool = False,
        extra_rule: Callable[[str], bool] | None = None,
    ):
        self.skip_events = frozenset(skip_events)
        self.skip_if_contains = frozenset(skip_if_contains)
        self.keep_all = keep_all
        self.extra_rule = extra_rule
        self._tally: dict[str, int] = {}
        self._lock = threading.Lock()

    def is_skip_listed(self, text: str) -> bool:
        """True if the description is covered by a skip list or the extra rule."""
        if any(phrase in text for phrase in self.skip_if_contains):
            return True
        if self.extra_rule is not None and self.extra_rule(text):
            return True
        return text in self.skip_events

    def should_skip(self, text: str) -> bool:
        """Decide whether to drop an event, tallying skip-listed drops."""
        if self.keep_all:
            return False

        if self.is_skip_listed(text):
            self._increment(text)
            logger.debug(f"Skipping event: {text!r}")
            return True

        return not text.strip()

    def _increment(self, text: str) -> None:
        with self._lock:
            self._tally[text] = self._tally.get(text, 0) + 1

    @property
    def tally(self) -> dict[str, int]:
        """Skip counts ordered by description."""
        with self._lock:
            return dict(sorted(self._tally.items()))
