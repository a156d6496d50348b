"""Console reporting for localization runs."""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .models.translation_result import TranslationStats, TranslationSuggestion


class Reporter:
    """
    Progress and result output for one run.

    All output goes through the wrapped rich ``Console`` (stderr by default),
    so tests can capture it with ``Console(file=io.StringIO())``.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(stderr=True)

    def info(self, message: str) -> None:
        self.console.print(f"[blue]{escape(message)}[/blue]")

    def detail(self, message: str) -> None:
        self.console.print(f"  {escape(message)}")

    def success(self, message: str) -> None:
        self.console.print(f"[green]{escape(message)}[/green]")

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]{escape(message)}[/yellow]")

    def error(self, message: str) -> None:
        self.console.print(f"[red]{escape(message)}[/red]")

    def batch(self, number: int, total: int, size: int) -> None:
        self.console.print(f"  [dim]Batch {number}/{total} ({size} strings)[/dim]")

    def print_summary(self, stats: TranslationStats) -> None:
        """Print the end-of-run statistics table."""
        table = Table(title="Translation Summary")
        table.add_column("Metric", style="cyan")
        table.add_column("Count", justify="right")

        for label, value in stats.rows():
            style = "red" if label == "Errors" and value else None
            table.add_row(label, str(value), style=style)

        self.console.print(table)

    def show_suggestion(
        self,
        index: int,
        total: int,
        suggestion: TranslationSuggestion,
        language_name: str,
    ) -> None:
        """Present one suggestion before asking for a decision."""
        body = (
            f"[dim]Language:[/dim] {escape(language_name)} "
            f"(Confidence: {suggestion.confidence}/5)\n\n"
            f"[red]Current:   {escape(suggestion.current_translation)}[/red]\n"
            f"[green]Suggested: {escape(suggestion.suggested_translation)}[/green]\n\n"
            f"[dim]Reason:[/dim] {escape(suggestion.reasoning)}"
        )
        title = escape(f"[{index + 1}/{total}] Key: {suggestion.key}")
        self.console.print(Panel(body, title=title, title_align="left"))

    def ask(self, prompt: str) -> str:
        """Read one line of user input."""
        return self.console.input(f"[bold]{escape(prompt)}[/bold] ")
