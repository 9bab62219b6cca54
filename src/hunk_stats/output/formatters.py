"""
Base formatter and formatter registry.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from hunk_stats.models.report import StatReport
    from hunk_stats.models.stat import Stat


class BaseFormatter(ABC):
    """
    Abstract base class for output formatters.

    Subclasses must implement format() and format_stat() methods.
    """

    def __init__(self, show_intervals: bool = True) -> None:
        """
        Initialize the formatter.

        Args:
            show_intervals: Whether to include line intervals in output.
        """
        self.show_intervals = show_intervals

    def _stat_to_dict(self, stat: "Stat") -> dict[str, Any]:
        """Convert a stat to a dictionary."""
        data: dict[str, Any] = {
            "added": stat.added,
            "deleted": stat.deleted,
            "changed": stat.changed,
        }
        if self.show_intervals:
            data["added_line_intervals"] = stat.format_added_line_intervals()
            data["deleted_line_intervals"] = stat.format_deleted_line_intervals()
        return data

    def _report_to_dict(self, report: "StatReport") -> dict[str, Any]:
        """Convert a report to a dictionary."""
        return {
            "timestamp": report.timestamp.isoformat(),
            "diff_source": report.diff_source,
            "files": [
                {
                    "path": entry.path,
                    "change_type": entry.change_type.value,
                    "source_path": entry.source_path,
                    "hunks": entry.hunk_count,
                    "stat": self._stat_to_dict(entry.stat),
                }
                for entry in report.files
            ],
            "warnings": report.warnings,
        }

    @abstractmethod
    def format(self, report: "StatReport") -> str:
        """
        Format a statistics report.

        Args:
            report: The report to format.

        Returns:
            Formatted string representation.
        """
        pass

    @abstractmethod
    def format_stat(self, stat: "Stat") -> str:
        """
        Format a single stat.

        Args:
            stat: The stat to format.

        Returns:
            Formatted string representation.
        """
        pass


# Formatter registry
_FORMATTERS: dict[str, type[BaseFormatter]] = {}


def register_formatter(name: str) -> Callable[[type[BaseFormatter]], type[BaseFormatter]]:
    """
    Decorator to register a formatter.

    Args:
        name: The name to register the formatter under.

    Returns:
        Decorator function.
    """
    def decorator(cls: type[BaseFormatter]) -> type[BaseFormatter]:
        _FORMATTERS[name] = cls
        return cls
    return decorator


def get_formatter(name: str, **kwargs: Any) -> BaseFormatter:
    """
    Get a formatter instance by name.

    Args:
        name: The formatter name (e.g., "text", "json", "yaml").
        **kwargs: Passed to the formatter's constructor.

    Returns:
        An instance of the requested formatter.

    Raises:
        ValueError: If the formatter name is not recognized.
    """
    # Import formatters to ensure they're registered
    from hunk_stats.output import (  # noqa: F401
        json_output,
        markdown_output,
        text_output,
        yaml_output,
    )

    if name not in _FORMATTERS:
        available = ", ".join(_FORMATTERS.keys())
        raise ValueError(f"Unknown formatter: {name}. Available: {available}")

    return _FORMATTERS[name](**kwargs)
