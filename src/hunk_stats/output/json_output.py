"""
JSON output formatter.
"""

import json

from hunk_stats.models.report import StatReport
from hunk_stats.models.stat import Stat
from hunk_stats.output.formatters import BaseFormatter, register_formatter


@register_formatter("json")
class JsonFormatter(BaseFormatter):
    """
    Format output as JSON.
    """
    
    def __init__(self, show_intervals: bool = True, indent: int = 2) -> None:
        """
        Initialize the JSON formatter.
        
        Args:
            show_intervals: Whether to include line intervals in output.
            indent: JSON indentation level.
        """
        super().__init__(show_intervals=show_intervals)
        self.indent = indent
    
    def format(self, report: StatReport) -> str:
        """Format a statistics report as JSON."""
        return json.dumps(self._report_to_dict(report), indent=self.indent, default=str)
    
    def format_stat(self, stat: Stat) -> str:
        """Format a single stat as JSON."""
        return json.dumps(self._stat_to_dict(stat), indent=self.indent, default=str)
