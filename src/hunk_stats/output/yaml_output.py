"""
YAML output formatter.
"""

import yaml

from hunk_stats.models.report import StatReport
from hunk_stats.models.stat import Stat
from hunk_stats.output.formatters import BaseFormatter, register_formatter


@register_formatter("yaml")
class YamlFormatter(BaseFormatter):
    """
    Format output as YAML.
    """

    def format(self, report: StatReport) -> str:
        """Format a statistics report as YAML."""
        return yaml.dump(
            self._report_to_dict(report),
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )

    def format_stat(self, stat: Stat) -> str:
        """Format a single stat as YAML."""
        return yaml.dump(self._stat_to_dict(stat), default_flow_style=False, sort_keys=False)
