"""Console UI wrapper using Rich library."""

from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table


class ConsoleUI:
    """
    Wrapper for Rich Console providing styled output methods.

    Messages are escaped, so clip, group and path names containing
    square brackets are printed as typed.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        """Initialize with a Rich Console."""
        self.console = console or Console()

    def print(self, *args, **kwargs) -> None:
        """Print to console (delegates to Rich Console)."""
        self.console.print(*args, **kwargs)

    def print_info(self, message: str) -> None:
        """Print an info message with blue styling."""
        self.console.print(f"[blue]» {escape(message)}[/blue]")

    def print_warning(self, message: str) -> None:
        """Print a warning message with yellow styling."""
        self.console.print(f"[yellow]⚠️  {escape(message)}[/yellow]")

    def print_error(self, message: str) -> None:
        """Print an error message with red styling."""
        self.console.print(f"[red]❌ {escape(message)}[/red]")

    def print_success(self, message: str) -> None:
        """Print a success message with green styling."""
        self.console.print(f"[green]✓ {escape(message)}[/green]")

    def print_panel(self, content: str, title: str = "") -> None:
        """Print a configuration or summary block framed to fit its content."""
        self.console.print(Panel.fit(content, title=title, border_style="cyan"))

    def create_table(self, title: str, columns: Sequence[str], numeric: Sequence[str] = ()) -> Table:
        """
        Create a Rich Table for the given column headers.

        Columns listed in ``numeric`` are right-aligned.
        """
        table = Table(title=title, header_style="bold magenta")
        for header in columns:
            table.add_column(header, justify="right" if header in numeric else "left")
        return table
