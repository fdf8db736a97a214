"""Create the two-week calendar for the stake bulletin."""

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
from bulletin.output.docx_writer import BulletinDocxWriter
from bulletin.output.text_writer import render_bulletin_text
from bulletin.processing.pipeline import CalendarPipeline
from bulletin.processing.skip import SkipClassifier
from bulletin.processing.ward import WARD_CODES, WardClassifier, normalize_ward_code
from cli.context import get_context
from cli.display import SummaryRenderer
from cli.utils import parse_start_date, run_pipeline, usage_exit

logger = logging.getLogger(__name__)


def bulletin_command(
    typer_ctx: typer.Context,
    start_date: Annotated[
        str | None,
        typer.Argument(
            help="Start date in M/D/YYYY format (default: the next Thursday)",
            show_default=False,
        ),
    ] = None,
    include_all: Annotated[
        bool,
        typer.Option("--all", "-a", help="Include all dates"),
    ] = False,
    keep_all: Annotated[
        bool,
        typer.Option("--keep-all", "-k", help="Keep all events; do not skip"),
    ] = False,
    print_calendar: Annotated[
        bool,
        typer.Option("--print", "-p", help="Print to standard out instead of Word"),
    ] = False,
    old_style: Annotated[
        bool,
        typer.Option("--old-style", "-o", help="Read old style calendar data"),
    ] = False,
    ward: Annotated[
        str | None,
        typer.Option(
            "--ward", "-w", help=f"Show only one ward ({'|'.join(WARD_CODES)})"
        ),
    ] = None,
    input_file: Annotated[
        Path | None,
        typer.Option("--input", "-i", help="Calendar data document"),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", help="Output Word document"),
    ] = None,
) -> None:
    """Create a two week calendar for publishing to the stake.

    Reads calendar data pasted from the church web site into a Word
    document and writes the stake-wide and ward specific events for the
    two weeks starting on START_DATE.
    """
    ctx = get_context()
    config = ctx.config
    renderer = SummaryRenderer()

    ward_code = None
    if ward:
        try:
            ward_code = normalize_ward_code(ward)
        except ValueError:
            usage_exit(typer_ctx, f"Invalid ward pattern specified!  {ward}", 0)

    if start_date:
        start = parse_start_date(start_date)
        if start is None:
            usage_exit(typer_ctx, f"Invalid argument passed!  {start_date}", 1)
        window = ReportingWindow.starting(start, config.window_days, include_all)
    else:
        window = ReportingWindow.default(days=config.window_days, include_all=include_all)

    context = RunContext(
        window=window,
        punctuation=Punctuation.PLAIN if print_calendar else Punctuation.WORD,
    )
    skip = SkipClassifier(
        load_skip_list(config.skip_events_path),
        load_skip_list(config.skip_if_contains_path),
        keep_all=keep_all,
    )
    pipeline = CalendarPipeline(
        context,
        skip,
        WardClassifier(ward_code),
        input_format=InputFormat.SEPARATE_LINES if old_style else InputFormat.AGENDA,
    )

    result = run_pipeline(ctx, pipeline, input_file or config.input_file)

    if print_calendar:
        renderer.render_lines(render_bulletin_text(result))
    else:
        output_path = output_file or config.bulletin_file
        try:
            writer: DocumentWriter = BulletinDocxWriter()
            writer.write(result, output_path)
        except ExportError as e:
            logger.error(str(e))
            sys.exit(1)
        renderer.render_success("Two week calendar written", output_path)

    if not keep_all:
        renderer.render_skipped(result.skipped)
