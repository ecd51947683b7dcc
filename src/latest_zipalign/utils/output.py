"""Rich console helpers for terminal output."""

from typing import Any

from rich.console import Console as RichConsole
from rich.markup import escape


class Console:
    """Wrapper around rich.Console with convenience methods.

    Diagnostics go to stdout so the command always prints exactly one line
    there; the verbose trace goes to stderr.
    """

    def __init__(self) -> None:
        self._console = RichConsole(soft_wrap=True, highlight=False)
        self._trace = RichConsole(stderr=True, soft_wrap=True, highlight=False)
        self._verbose = False

    def set_verbose(self, enabled: bool) -> None:
        """Enable or disable the stderr trace."""
        self._verbose = enabled

    @property
    def verbose(self) -> bool:
        """Check if the stderr trace is enabled."""
        return self._verbose

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Print to stdout."""
        self._console.print(*args, **kwargs)

    def print_error(self, message: str) -> None:
        """Print an error message in red."""
        self._console.print(f"[red]✗[/red] {escape(message)}")

    def print_debug(self, message: str) -> None:
        """Print a dimmed trace line to stderr (only in verbose mode)."""
        if self._verbose:
            self._trace.print(f"[dim]·[/dim] {escape(message)}")


# Global console instance
console = Console()
