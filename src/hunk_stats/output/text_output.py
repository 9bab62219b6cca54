"""
Human-readable text output formatter.
"""

from io import StringIO

from rich.console import Console
from rich.table import Table

from hunk_stats.models.diff import ChangeType
from hunk_stats.models.report import StatReport
from hunk_stats.models.stat import Stat
from hunk_stats.output.formatters import BaseFormatter, register_formatter


@register_formatter("text")
class TextFormatter(BaseFormatter):
    """
    Format output as human-readable text using Rich.
    """

    def __init__(self, show_intervals: bool = True, colorize: bool = True) -> None:
        """
        Initialize the text formatter.

        Args:
            show_intervals: Whether to include line intervals in output.
            colorize: Whether to use colors in output.
        """
        super().__init__(show_intervals=show_intervals)
        self.colorize = colorize

    def _change_style(self, change_type: ChangeType) -> str:
        """Get the style for a change type."""
        if not self.colorize:
            return ""

        styles = {
            ChangeType.ADDED: "green",
            ChangeType.DELETED: "red",
            ChangeType.RENAMED: "cyan",
            ChangeType.MODIFIED: "yellow",
        }
        return styles.get(change_type, "")

    def _new_table(self, title: str, first_columns: list[str]) -> Table:
        table = Table(title=title, show_header=True, header_style="bold")
        for column in first_columns:
            table.add_column(column)
        table.add_column("Added", style="green", justify="right")
        table.add_column("Deleted", style="red", justify="right")
        table.add_column("Changed", style="yellow", justify="right")
        if self.show_intervals:
            table.add_column("Added lines", style="green")
            table.add_column("Deleted lines", style="red")
        return table

    def _stat_cells(self, stat: Stat) -> list[str]:
        cells = [str(stat.added), str(stat.deleted), str(stat.changed)]
        if self.show_intervals:
            cells.append(stat.format_added_line_intervals())
            cells.append(stat.format_deleted_line_intervals())
        return cells

    def format(self, report: StatReport) -> str:
        """Format a statistics report as text."""
        output = StringIO()
        console = Console(file=output, force_terminal=self.colorize, width=120)

        console.print(f"[bold]Diff Source:[/bold] {report.diff_source}")
        console.print()

        if report.files:
            table = self._new_table("Hunk Stats", ["File", "Change"])
            for entry in report.files:
                style = self._change_style(entry.change_type)
                path = f"{entry.source_path} → {entry.path}" if entry.source_path else entry.path
                table.add_row(
                    path,
                    f"[{style}]{entry.change_type.value}[/{style}]" if style else entry.change_type.value,
                    *self._stat_cells(entry.stat),
                )
            console.print(table)
            console.print(f"\nTotal: {report.file_count} files")
        else:
            console.print("[dim]No files in diff.[/dim]")

        if report.warnings:
            console.print()
            console.print("[bold yellow]Warnings[/bold yellow]")
            for warning in report.warnings:
                console.print(f"  ⚠️  {warning}")

        return output.getvalue()

    def format_stat(self, stat: Stat) -> str:
        """Format a single stat as a one-row table."""
        output = StringIO()
        console = Console(file=output, force_terminal=self.colorize, width=120)

        table = self._new_table("Hunk Stats", [])
        table.add_row(*self._stat_cells(stat))
        console.print(table)

        return output.getvalue()
