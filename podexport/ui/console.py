"""Console UI wrapper using Rich library."""

from typing import Optional

from rich.console import Console
from rich.panel import Panel


class ConsoleUI:
    """
    Wrapper for Rich Console providing styled output methods.

    In quiet mode informational messages are dropped; warnings, errors
    and the final summary are always shown.
    """

    def __init__(self, quiet: bool = False, console: Optional[Console] = None) -> None:
        """
        Initialize with a Rich Console.

        Args:
            quiet: If True, suppress informational output.
            console: Console to write to (a new one by default).
        """
        self.quiet = quiet
        self.console = console or Console()

    def print(self, *args, **kwargs) -> None:
        """Print to console (delegates to Rich Console)."""
        self.console.print(*args, **kwargs)

    def rule(self, title: str = "", **kwargs) -> None:
        """Print a horizontal rule with optional title."""
        self.console.rule(title, **kwargs)

    def print_info(self, message: str) -> None:
        """Print an info message with blue styling, unless quiet."""
        if not self.quiet:
            self.console.print(f"[blue]ℹ️  {message}[/blue]")

    def print_warning(self, message: str) -> None:
        """Print a warning message with yellow styling."""
        self.console.print(f"[yellow]⚠️  {message}[/yellow]")

    def print_error(self, message: str, cause: Optional[BaseException] = None) -> None:
        """
        Print an error message with red styling.

        Args:
            message: Error description.
            cause: Underlying exception, printed dimmed below the message.
        """
        self.console.print(f"[red]❌ {message}[/red]")
        if cause is not None:
            self.console.print(f"[dim]   caused by {type(cause).__name__}: {cause}[/dim]")

    def print_panel(
        self,
        content: str,
        title: str = "",
        border_style: str = "blue"
    ) -> None:
        """
        Print content in a bordered panel, unless quiet.

        Args:
            content: Panel content.
            title: Panel title.
            border_style: Border color/style.
        """
        if self.quiet:
            return
        self.console.print(Panel(content, title=title, border_style=border_style))
