"""Shared console helpers for goforge.

All user-facing output goes through a single Rich ``Console`` so the CLI,
the materializer's progress lines and the summary table share one stream
(and tests can capture it in one place).
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule
from rich.table import Table

console = Console()


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_duration(seconds: float) -> str:
    """Render an elapsed generation time for the summary table.

    Generation normally finishes in well under a second, so short runs keep
    millisecond precision::

        format_duration(0.042) -> "42ms"
        format_duration(3.5)   -> "3.5s"
        format_duration(75)    -> "1m 15s"
    """
    seconds = max(seconds, 0.0)
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    if seconds < 60:
        return f"{seconds:.1f}s"
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes}m {secs}s"


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_header(title: str, color: str = "bright_cyan") -> None:
    """Print a full-width rule with *title* in the middle."""
    console.print()
    console.print(Rule(f"[bold {color}] {escape(title)} [/bold {color}]", style=color))
    console.print()


def print_summary_table(rows: dict[str, str], title: str = "Summary") -> None:
    """Print *rows* as a borderless label / value listing under *title*."""
    table = Table(title=title, show_header=False, box=None, padding=(0, 2))
    table.add_column(style="bold cyan", no_wrap=True)
    table.add_column()
    for label, value in rows.items():
        table.add_row(escape(label), escape(str(value)))
    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
