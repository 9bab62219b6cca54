"""
Markdown output formatter.
"""

from hunk_stats.models.report import StatReport
from hunk_stats.models.stat import Stat
from hunk_stats.output.formatters import BaseFormatter, register_formatter


@register_formatter("markdown")
class MarkdownFormatter(BaseFormatter):
    """
    Format output as Markdown.
    """

    def _stat_cells(self, stat: Stat) -> list[str]:
        cells = [f"+{stat.added}", f"-{stat.deleted}", f"~{stat.changed}"]
        if self.show_intervals:
            cells.append(stat.format_added_line_intervals() or "-")
            cells.append(stat.format_deleted_line_intervals() or "-")
        return cells

    def _header(self, first: list[str]) -> list[str]:
        columns = [*first, "Added", "Deleted", "Changed"]
        if self.show_intervals:
            columns += ["Added lines", "Deleted lines"]
        return [
            "| " + " | ".join(columns) + " |",
            "|" + "|".join("---" for _ in columns) + "|",
        ]

    def format(self, report: StatReport) -> str:
        """Format a statistics report as Markdown."""
        lines = []

        # Header
        lines.append("# Hunk Stats")
        lines.append("")
        lines.append(f"- **Diff Source:** `{report.diff_source}`")
        lines.append(f"- **Files:** {report.file_count}")
        lines.append("")

        if report.files:
            lines.extend(self._header(["File", "Change"]))
            for entry in report.files:
                path = f"`{entry.source_path}` → `{entry.path}`" if entry.source_path else f"`{entry.path}`"
                cells = [path, entry.change_type.value, *self._stat_cells(entry.stat)]
                lines.append("| " + " | ".join(cells) + " |")
            lines.append("")
        else:
            lines.append("_No files in diff._")
            lines.append("")

        if report.warnings:
            lines.append("## ⚠️ Warnings")
            lines.append("")
            for warning in report.warnings:
                lines.append(f"- {warning}")
            lines.append("")

        return "\n".join(lines)

    def format_stat(self, stat: Stat) -> str:
        """Format a single stat as a one-row Markdown table."""
        lines = self._header([])
        lines.append("| " + " | ".join(self._stat_cells(stat)) + " |")
        return "\n".join(lines) + "\n"
