"""Single-pass pipeline from text fragments to routed events."""

import logging
from collections.abc import Iterable

from bulletin.ingestion.classifier import InputFormat, classify
from bulletin.models.ingestion import EventArena, IngestionResult
from bulletin.models.session import RunContext
from bulletin.processing.builder import EventBuilder
from bulletin.processing.merger import MultiDayMerger
from bulletin.processing.skip import SkipClassifier
from bulletin.processing.ward import Destination, WardClassifier

logger = logging.getLogger(__name__)


class CalendarPipeline:
    """Classifies, skips, merges and routes fragments in document order.

    Skipping happens before merging, so a suppressed fragment never
    opens or extends an event. With ``single_list`` every kept event is
    filed in one digest list instead of stake and ward sections.
    """

    def __init__(
        self,
        context: RunContext,
        skip: SkipClassifier,
        ward: WardClassifier | None = None,
        input_format: InputFormat = InputFormat.AGENDA,
        single_list: bool = False,
    ):
        self.context = context
        self.skip = skip
        self.ward = ward or WardClassifier()
        self.input_format = input_format
        self.single_list = single_list

    def run(self, fragments: Iterable[str]) -> IngestionResult:
        """Process all fragments.

        Raises:
            FatalParseError: If an event appears before any date
        """
        arena = EventArena()
        result = IngestionResult(arena=arena, context=self.context)
        builder = EventBuilder()
        merger = MultiDayMerger(arena, self.context.window)

        for text in fragments:
            candidate = builder.feed(classify(text, self.input_format))
            if candidate is None:
                continue
            if self.skip.should_skip(candidate.description):
                continue

            index = merger.add(candidate)
            if index is None:
                continue

            if self.single_list:
                result.digest_indices.append(index)
                continue

            destination = self.ward.route(candidate.description)
            if destination is Destination.STAKE:
                result.stake_indices.append(index)
            elif destination is Destination.WARD:
                result.ward_indices.append(index)

        result.skipped = self.skip.tally
        logger.info(
            f"Built {len(arena)} events: {len(result.stake_indices)} stake, "
            f"{len(result.ward_indices)} ward, {len(result.digest_indices)} digest, "
            f"{sum(result.skipped.values())} skipped"
        )
        return result
