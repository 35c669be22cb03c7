"""Console Logger Adapter - Outputs logs to the terminal."""
import sys
from datetime import datetime, timezone
from typing import Any

import click

from ipset_lookup.adapters.outbound.structured_logger import StructuredLogger

LEVEL_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
}


class ConsoleLogger(StructuredLogger):
    """
    LoggerPort adapter that writes human-readable lines.

    Used by the CLI. Errors go to stderr, everything else to stdout.
    """

    def __init__(self, level: str = "INFO", use_colors: bool = True):
        """
        Initialize the console logger.

        Args:
            level: Minimum log level to output (DEBUG, INFO, WARNING, ERROR)
            use_colors: Whether to colour the level name when writing to a TTY
        """
        super().__init__(level=level)
        self._use_colors = use_colors and sys.stdout.isatty()

    def _emit(self, level: str, message: str, fields: dict[str, Any]) -> None:
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
        level_str = click.style(level, fg=LEVEL_COLORS.get(level)) if self._use_colors else level

        output = f"[{timestamp}] {level_str}: {message}"
        if fields:
            details = " | ".join(f"{k}={v}" for k, v in fields.items())
            output += f" ({details})"

        click.echo(output, err=level == "ERROR")
