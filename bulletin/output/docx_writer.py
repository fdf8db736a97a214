"""Word document writers for the bulletin and the digest."""

import logging
from pathlib import Path

from docx import Document
from docx.enum.text import WD_TAB_ALIGNMENT
from docx.shared import Inches, Pt
from docx.text.paragraph import Paragraph

from bulletin.exceptions import ExportError
from bulletin.models.event import CalendarEvent
from bulletin.models.ingestion import IngestionResult
from bulletin.output.formatter import EventFormatter
from bulletin.output.text_writer import STAKE_HEADING, WARD_HEADING

logger = logging.getLogger(__name__)

BULLETIN_FONT = "Times New Roman"
DIGEST_FONT = "Calibri"
DIGEST_FONT_SIZE = Pt(9)

# Date column, then time column; descriptions wrap under the hanging indent
TIME_TAB = Inches(1.5)
DESCRIPTION_TAB = Inches(2.5)


def _save(doc, path: Path) -> None:
    try:
        doc.save(str(path))
    except OSError as e:
        raise ExportError(f"Failed to write {path}: {e}") from e
    logger.info(f"Wrote {path}")


class BulletinDocxWriter:
    """Writes the two-week bulletin with stake-wide and ward sections."""

    def write(self, result: IngestionResult, path: Path) -> None:
        context = result.context
        formatter = EventFormatter(context)
        doc = Document()

        run = self._paragraph(doc).add_run()
        run.font.name = BULLETIN_FONT
        run.bold = True
        run.add_tab()
        run.add_tab()
        run.add_text(formatter.header())

        context.reset_section()
        self._heading(doc, STAKE_HEADING)
        self._rows(doc, formatter, result.stake_events, result)

        self._paragraph(doc).add_run("").font.name = BULLETIN_FONT

        context.reset_section()
        self._heading(doc, WARD_HEADING)
        self._rows(doc, formatter, result.ward_events, result)

        _save(doc, path)

    def _rows(
        self,
        doc,
        formatter: EventFormatter,
        events: list[CalendarEvent],
        result: IngestionResult,
    ) -> None:
        window = result.context.window
        for event in events:
            if not window.includes(event):
                continue
            date_str, time_str, description = formatter.row(event)
            run = self._paragraph(doc).add_run(date_str)
            run.font.name = BULLETIN_FONT
            run.add_tab()
            run.add_text(time_str)
            run.add_tab()
            run.add_text(description)

    def _heading(self, doc, text: str) -> None:
        run = self._paragraph(doc).add_run(text)
        run.font.name = BULLETIN_FONT
        run.bold = True
        run.underline = True

    @staticmethod
    def _paragraph(doc) -> Paragraph:
        """Paragraph with the bulletin's hanging indent and tab stops."""
        p = doc.add_paragraph()
        fmt = p.paragraph_format
        fmt.left_indent = DESCRIPTION_TAB
        fmt.first_line_indent = -DESCRIPTION_TAB
        fmt.space_after = Pt(0)
        fmt.line_spacing = 1.0
        fmt.tab_stops.add_tab_stop(TIME_TAB, WD_TAB_ALIGNMENT.LEFT)
        fmt.tab_stops.add_tab_stop(DESCRIPTION_TAB, WD_TAB_ALIGNMENT.LEFT)
        return p


class DigestDocxWriter:
    """Writes the upcoming events digest, one line per event."""

    def write(self, result: IngestionResult, path: Path) -> None:
        formatter = EventFormatter(result.context)
        window = result.context.window
        doc = Document()

        for event in result.digest_events:
            if not window.includes(event):
                continue
            p = doc.add_paragraph()
            p.paragraph_format.space_after = Pt(0)
            p.paragraph_format.line_spacing = 1.0
            run = p.add_run(formatter.digest_line(event))
            run.font.name = DIGEST_FONT
            run.font.size = DIGEST_FONT_SIZE

        _save(doc, path)
