"""Helpers shared by CLI commands."""

import logging
import sys
from datetime import date
from pathlib import Path
from typing import NoReturn

import typer

from bulletin.exceptions import BulletinError, FatalParseError, UnsupportedFormatError
from bulletin.ingestion.classifier import DATE_PATTERN, parse_numeric_date
from bulletin.ingestion.service import IngestionService
from bulletin.models.ingestion import IngestionResult
from bulletin.processing.pipeline import CalendarPipeline
from cli.context import CLIContext
from cli.display import console

logger = logging.getLogger(__name__)


def usage_exit(typer_ctx: typer.Context, message: str, code: int) -> NoReturn:
    """Show a message followed by the command usage, then exit."""
    console.print(message, markup=False, highlight=False)
    console.print()
    console.print(typer_ctx.get_help(), markup=False, highlight=False)
    raise typer.Exit(code)


def parse_start_date(text: str) -> date | None:
    """Parse an M/D/YYYY start date argument."""
    if not DATE_PATTERN.fullmatch(text):
        return None
    return parse_numeric_date(text)


def run_pipeline(
    ctx: CLIContext, pipeline: CalendarPipeline, input_path: Path
) -> IngestionResult:
    """Read the calendar data document and run it through the pipeline.

    Any failure is logged and ends the run before output is written.
    """
    service = IngestionService(ctx.reader_registry)
    try:
        fragments = service.read_fragments(input_path)
        return pipeline.run(fragments)
    except FileNotFoundError as e:
        logger.error(str(e))
        sys.exit(1)
    except UnsupportedFormatError as e:
        logger.error(str(e))
        sys.exit(1)
    except FatalParseError as e:
        logger.error(f"Parse error: {e}")
        sys.exit(1)
    except BulletinError as e:
        logger.error(f"Failed to read calendar data: {e}")
        sys.exit(1)
