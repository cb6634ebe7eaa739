"""Leveled console output"""

from typing import Optional

from rich.console import Console
from rich.markup import escape

LEVELS = ["debug", "info", "warning", "error"]


class Logger:
    """Console logger with levels, colors and a debug switch."""

    def __init__(self, console: Optional[Console] = None, level: str = "info"):
        self.console = console or Console(highlight=False)
        self.level = level if level in LEVELS else "info"

    @property
    def debug_enabled(self) -> bool:
        return self.level == "debug"

    def enable_debug(self):
        self.level = "debug"

    def _enabled(self, level: str) -> bool:
        return LEVELS.index(level) >= LEVELS.index(self.level)

    def debug(self, message: str):
        if self.debug_enabled:
            self.console.print(f"[blue]Debug:[/blue] {escape(message)}")

    def info(self, message: str):
        if self._enabled("info"):
            self.console.print(message, markup=False)

    def success(self, message: str):
        self.console.print(f"[green]✓[/green] {escape(message)}")

    def warning(self, message: str):
        if self._enabled("warning"):
            self.console.print(f"[yellow]⚠ {escape(message)}[/yellow]")

    def error(self, message: str):
        self.console.print(f"[red]{escape(message)}[/red]")

    def section(self, message: str):
        self.console.print(f"\n[bold cyan]{escape(message)}[/bold cyan]")
