"""
CLI Utilities - Shared helper functions for command line output.

Formatted status messages and the end-of-run summary table.
"""

import click
from pydantic import BaseModel
from rich.table import Table


class MapSummary(BaseModel):
    """
    Counts reported at the end of a map run.
    """
    files_analyzed: int
    relationships_found: int
    nodes_in_graph: int
    output_path: str | None = None


def echo_success(message: str) -> None:
    """
    Print a success message with a green checkmark.

    Args:
        message (str): The message to display.
    """
    click.echo(click.style(f"✅ {message}", fg="green"))


def echo_error(message: str) -> None:
    """
    Print an error message with a red cross.

    Args:
        message (str): The error message to display.
    """
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)


def echo_warning(message: str) -> None:
    """
    Print a warning message with a yellow alert symbol.

    Args:
        message (str): The warning message to display.
    """
    click.echo(click.style(f"⚠️  {message}", fg="yellow"))


def echo_info(message: str) -> None:
    """
    Print an informational message, dimmed.

    Args:
        message (str): The info message to display.
    """
    click.echo(click.style(f"   {message}", dim=True))


def render_summary_table(summary: MapSummary) -> Table:
    """
    Build the metrics table shown after analysis.

    Args:
        summary (MapSummary): Counts for the current run.

    Returns:
        Table: A two-column rich table (Metric, Value).
    """
    table = Table(show_header=True, header_style="bold cyan", border_style="grey50")
    table.add_column("Metric", min_width=28)
    table.add_column("Value", justify="right", min_width=10)
    table.add_row("📁 Files analyzed", f"[yellow]{summary.files_analyzed}[/yellow]")
    table.add_row("🔗 Relationships found", f"[yellow]{summary.relationships_found}[/yellow]")
    table.add_row("📊 Nodes in graph", f"[yellow]{summary.nodes_in_graph}[/yellow]")
    return table
