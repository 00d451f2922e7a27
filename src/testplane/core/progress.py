"""User-facing progress feedback for CLI operations.

Design principles:
- Single line updates, no spam
- Graceful degradation in non-TTY (CI, pipes)
- Suppress structlog console output during spinners to avoid line collision

Usage::

    from testplane.core.progress import spinner, status

    status("Detected jest", style="success")  # ✓ Detected jest
    status("Timed out", style="error")  # ✗ Timed out

    with spinner("Running unit tests"):
        await orchestrator.run_tests(...)
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table
from rich.text import Text

if TYPE_CHECKING:
    from structlog.stdlib import BoundLogger

    from testplane.testing.models import TestCase

_console = Console(stderr=True)

_STYLES = {
    "success": "[green]✓[/green] ",
    "error": "[red]✗[/red] ",
    "warning": "[yellow]![/yellow] ",
    "info": "  ",
    "none": "",
}

_STATUS_STYLES = {
    "passed": "green",
    "failed": "red",
    "skipped": "yellow",
    "info": "dim",
}

_suppress_console_logs = threading.local()


def is_console_suppressed() -> bool:
    """Check if console logging is currently suppressed."""
    return getattr(_suppress_console_logs, "active", False)


@contextmanager
def suppress_console_logs() -> Iterator[None]:
    """Suppress structlog console output; file handlers still receive logs."""
    _suppress_console_logs.active = True
    try:
        yield
    finally:
        _suppress_console_logs.active = False


def _get_logger() -> BoundLogger:
    """Get logger lazily to respect runtime config."""
    from testplane.core.logging import get_logger

    return get_logger("progress")


def _is_tty() -> bool:
    return hasattr(sys.stderr, "isatty") and sys.stderr.isatty()


def get_console() -> Console:
    """Get the shared Rich console instance."""
    return _console


def status(message: str, *, style: str = "info", indent: int = 0) -> None:
    """Print a styled status message to stderr."""
    prefix = _STYLES.get(style, "")
    padding = " " * indent
    _console.print(f"{padding}{prefix}{message}", highlight=False)

    _get_logger().debug("status", message=message, style=style)


def pluralize(count: int, singular: str, plural: str | None = None) -> str:
    """Return "1 test" / "3 tests" style strings."""
    if plural is None:
        plural = singular + "s"
    word = singular if count == 1 else plural
    return f"{count} {word}"


@contextmanager
def spinner(message: str, *, indent: int = 0) -> Iterator[None]:
    """Context manager for a spinner with log suppression.

    Usage::

        with spinner("Running integration tests"):
            do_work()
    """
    padding = " " * indent
    if _is_tty():
        with (
            suppress_console_logs(),
            _console.status(f"{padding}[cyan]{message}[/cyan]", spinner="dots"),
        ):
            yield
    else:
        _console.print(f"{padding}{message}...")
        yield


def make_case_table(cases: list[TestCase], *, limit: int = 50) -> Table:
    """Create a Rich Table listing individual test cases.

    Only the first ``limit`` cases are shown; a trailing row reports the rest.
    """
    table = Table(show_header=False, box=None, padding=(0, 1), pad_edge=False)
    table.add_column("status", width=8)
    table.add_column("suite", style="cyan", overflow="fold")
    table.add_column("name", overflow="fold")

    for case in cases[:limit]:
        table.add_row(
            Text(case.status, style=_STATUS_STYLES.get(case.status, "")),
            case.suite,
            case.name,
        )

    if len(cases) > limit:
        table.add_row("", "", Text(f"... {len(cases) - limit} more", style="dim"))

    return table
