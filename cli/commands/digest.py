"""Create the upcoming events list for stake meeting agendas."""

import logging
import sys
from pathlib import Path

import typer
from typing_extensions import Annotated

from bulletin.exceptions import ExportError
from bulletin.ingestion.classifier import InputFormat
from bulletin.ingestion.skip_lists import load_skip_list
from bulletin.models.session import Punctuation, RunContext
from bulletin.models.window import ReportingWindow
from bulletin.output.base import DocumentWriter
from bulletin.output.docx_writer import DigestDocxWriter
from bulletin.output.text_writer import render_digest_text
from bulletin.processing.pipeline import CalendarPipeline
from bulletin.processing.skip import SkipClassifier
from bulletin.processing.ward import DIGEST_WARD_TOKENS, WardClassifier
from cli.context import get_context
from cli.display import SummaryRenderer
from cli.utils import run_pipeline

logger = logging.getLogger(__name__)


def digest_command(
    major: Annotated[
        bool,
        typer.Option("--major", "-m", help="Include only major events"),
    ] = False,
    print_calendar: Annotated[
        bool,
        typer.Option("--print", "-p", help="Print to standard out instead of Word"),
    ] = False,
    old_style: Annotated[
        bool,
        typer.Option("--old-style", "-o", help="Read old style calendar data"),
    ] = False,
    input_file: Annotated[
        Path | None,
        typer.Option("--input", "-i", help="Calendar data document"),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", help="Output Word document"),
    ] = None,
) -> None:
    """Create a list of upcoming events for stake meeting agendas.

    Ward events are always left out and counted with the skipped events.
    """
    ctx = get_context()
    config = ctx.config
    renderer = SummaryRenderer()

    skip_events_path = (
        config.skip_events_major_path if major else config.skip_events_upcoming_path
    )
    skip = SkipClassifier(
        load_skip_list(skip_events_path),
        load_skip_list(config.skip_if_contains_path),
        extra_rule=WardClassifier(ward_tokens=DIGEST_WARD_TOKENS).is_ward_event,
    )
    context = RunContext(
        window=ReportingWindow.default(include_all=True),
        punctuation=Punctuation.PLAIN if print_calendar else Punctuation.WORD,
    )
    pipeline = CalendarPipeline(
        context,
        skip,
        input_format=InputFormat.SEPARATE_LINES if old_style else InputFormat.AGENDA,
        single_list=True,
    )

    result = run_pipeline(ctx, pipeline, input_file or config.input_file)

    if print_calendar:
        renderer.render_lines(["", *render_digest_text(result), ""])
    else:
        output_path = output_file or (config.major_file if major else config.upcoming_file)
        try:
            writer: DocumentWriter = DigestDocxWriter()
            writer.write(result, output_path)
        except ExportError as e:
            logger.error(str(e))
            sys.exit(1)
        renderer.render_success("Upcoming events written", output_path)

    renderer.render_skipped(result.skipped)
