"""Renderer for calendar output and run summaries."""

from pathlib import Path

from rich.table import Table
from rich.text import Text

from cli.display.console import console


class SummaryRenderer:
    """Render plain-text calendars, skip tallies and success messages."""

    def render_lines(self, lines: list[str]) -> None:
        """Print rendered calendar lines exactly as given."""
        for line in lines:
            console.print(line, markup=False, highlight=False, soft_wrap=True)

    def render_skipped(self, skipped: dict[str, int]) -> None:
        """Render the skipped events tally.

        Args:
            skipped: Skip counts keyed by event description, in display order.
        """
        console.print()
        console.print("[bold]SKIPPED EVENTS[/bold]")
        if not skipped:
            console.print("[dim]None[/dim]")
            console.print()
            return

        table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
        table.add_column("EVENT", overflow="fold")
        table.add_column("COUNT", justify="right", style="dim")
        for description, count in skipped.items():
            table.add_row(Text(description), str(count))
        console.print(table)
        console.print()

    def render_success(self, message: str, path: Path | None = None) -> None:
        """Render a success message with optional file path."""
        console.print(f"\n[bold green]✓[/bold green] {message}")
        if path:
            console.print(f"  {path}")
