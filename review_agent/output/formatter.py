"""Rich terminal output formatting."""

from typing import TYPE_CHECKING

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

if TYPE_CHECKING:
    from ..config import Settings


class OutputFormatter:
    """Format output using Rich for terminal display."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def print_header(self, text: str) -> None:
        """Print a section header."""
        self.console.print(f"[bold cyan]{escape(text)}[/bold cyan]")
        self.console.print()

    def print_step(self, text: str) -> None:
        """Print a workflow step."""
        self.console.print()
        self.console.print(f"[bold]{escape(text)}[/bold]")

    def print_staged_files(self, files: list[str]) -> None:
        """Print the list of staged files."""
        self.console.print()
        self.console.print(f"[bold]📋 Found {len(files)} staged file(s):[/bold]")
        for file in files:
            self.console.print(f"  - {escape(file)}")

    def print_no_staged_changes(self) -> None:
        """Print message when there are no staged changes."""
        self.console.print()
        self.console.print(
            Panel(
                "[yellow]No staged changes found.[/yellow]\n\n"
                "Stage your changes first:\n"
                "  [dim]git add <files>[/dim]",
                title="⚠️  Nothing to commit",
                box=box.ROUNDED,
            )
        )

    def print_commit_message(self, message: str) -> None:
        """Print a suggested commit message."""
        self.console.print()
        self.console.print("[bold]📝 Suggested commit message:[/bold]")
        self.console.print(
            Panel(
                Text(message),
                box=box.ROUNDED,
                border_style="green",
                padding=(0, 1),
            )
        )

    def print_review_saved(self, path: str) -> None:
        """Print where a review summary was saved."""
        self.console.print(f"📄 Review summary saved to: [cyan]{escape(path)}[/cyan]")

    def print_error(self, message: str) -> None:
        """Print an error message."""
        self.console.print(f"[bold red]Error:[/bold red] {escape(message)}")

    def print_warning(self, message: str) -> None:
        """Print a warning message."""
        self.console.print(f"[yellow]⚠️  {escape(message)}[/yellow]")

    def print_success(self, message: str) -> None:
        """Print a success message."""
        self.console.print(f"[bold green]✓[/bold green] {escape(message)}")

    def print_dim(self, message: str) -> None:
        """Print a secondary message."""
        self.console.print(f"[dim]{escape(message)}[/dim]")

    def print_config(self, settings: "Settings") -> None:
        """Print the effective configuration."""
        self.console.print()
        self.console.print("[bold]Review Agent Configuration[/bold]")
        self.console.print()

        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column("Setting", style="dim")
        table.add_column("Value", style="cyan")

        table.add_row("Model", settings.model)
        table.add_row("Base URL", settings.base_url)
        table.add_row("Max Tokens", str(settings.max_tokens))
        table.add_row("Temperature", str(settings.temperature))
        table.add_row("Environment", settings.environment)
        table.add_row("Log Level", settings.log_level)
        table.add_row("Excluded Files", ", ".join(settings.exclude_files) or "-")
        table.add_row("Max File Size", f"{settings.max_file_size_mb:g} MB")
        table.add_row("API Key", f"[green]{settings.masked_api_key}[/green] ✓")

        self.console.print(table)
