"""Display module for rendering CLI output."""

from cli.display.console import console
from cli.display.summary_renderer import SummaryRenderer

__all__ = ["SummaryRenderer", "console"]
