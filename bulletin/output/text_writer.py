"""Plain-text rendering of the bulletin and digest."""

from bulletin.models.ingestion import IngestionResult
from bulletin.output.formatter import EventFormatter

STAKE_HEADING = "Stake-wide"
WARD_HEADING = "Ward Specific"


def render_bulletin_text(result: IngestionResult) -> list[str]:
    """Lines of the two-week bulletin for standard output."""
    context = result.context
    formatter = EventFormatter(context)
    window = context.window

    lines = ["", f"{'':28}{formatter.header()}", STAKE_HEADING]

    context.reset_section()
    lines.extend(
        formatter.text_line(event)
        for event in result.stake_events
        if window.includes(event)
    )
    lines.append("")

    context.reset_section()
    lines.append(WARD_HEADING)
    lines.extend(
        formatter.text_line(event)
        for event in result.ward_events
        if window.includes(event)
    )
    return lines


def render_digest_text(result: IngestionResult) -> list[str]:
    """Lines of the upcoming events digest for standard output."""
    formatter = EventFormatter(result.context)
    window = result.context.window
    return [
        formatter.digest_line(event)
        for event in result.digest_events
        if window.includes(event)
    ]
