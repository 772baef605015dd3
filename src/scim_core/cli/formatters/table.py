"""Rich table formatter for CLI output."""

import sys
from typing import Any, Dict, List, Mapping, Optional, TextIO

from rich.console import Console
from rich.table import Table

from ...response import SCIMResponse


def create_console(output: Optional[TextIO] = None, no_color: bool = False) -> Console:
    """Create a Rich console instance.

    Args:
        output: Output stream (defaults to stdout)
        no_color: Disable color output

    Returns:
        Console instance
    """
    if output is None:
        output = sys.stdout

    return Console(file=output, no_color=no_color)


def _mark(value: bool) -> str:
    return "✓" if value else "✗"


def format_formats_table(rows: List[Dict[str, Any]], console: Optional[Console] = None) -> None:
    """Render codec availability per format.

    Args:
        rows: One dict per format with ``format``, ``content_type``,
              ``encoder`` and ``decoder`` keys
        console: Rich console (will create if None)
    """
    if console is None:
        console = create_console()

    table = Table(title="Supported Formats", show_header=True, header_style="bold magenta")
    table.add_column("Format", style="cyan", no_wrap=True)
    table.add_column("Content-Type", no_wrap=True)
    table.add_column("Encoder", justify="center")
    table.add_column("Decoder", justify="center")

    for row in rows:
        table.add_row(row["format"], row["content_type"], _mark(row["encoder"]), _mark(row["decoder"]))

    console.print(table)


def format_endpoints_table(endpoints: Mapping[str, str], console: Optional[Console] = None) -> None:
    """Render registered endpoint URLs."""
    if console is None:
        console = create_console()

    if not endpoints:
        console.print("[yellow]No resource endpoint URLs registered.[/yellow]")
        return

    table = Table(title="Resource Endpoints", show_header=True, header_style="bold magenta")
    table.add_column("Resource Type", style="cyan", no_wrap=True)
    table.add_column("URL")
    for resource_type, url in sorted(endpoints.items()):
        table.add_row(resource_type, url)

    console.print(table)


def format_response_table(response: SCIMResponse, console: Optional[Console] = None) -> None:
    """Render a protocol response."""
    if console is None:
        console = create_console()

    console.print(f"[bold]Code:[/bold] {response.code}")
    for name, value in response.headers.items():
        console.print(f"[bold]{name}:[/bold] {value}")
    console.print()
    console.print(response.body, markup=False, highlight=False)


def format_key_values_table(title: str, values: Mapping[str, Optional[str]], console: Optional[Console] = None) -> None:
    """Render a two-column key/value table; None renders as N/A."""
    if console is None:
        console = create_console()

    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Value")
    for key, value in values.items():
        table.add_row(key, "N/A" if value is None else str(value))

    console.print(table)
