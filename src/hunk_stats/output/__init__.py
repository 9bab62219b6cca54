"""
Output package for Hunk Stats.

This package contains formatters for displaying statistics reports
in various formats (text, JSON, YAML, Markdown).
"""

from hunk_stats.output.formatters import (
    BaseFormatter,
    get_formatter,
)
from hunk_stats.output.json_output import JsonFormatter
from hunk_stats.output.markdown_output import MarkdownFormatter
from hunk_stats.output.text_output import TextFormatter
from hunk_stats.output.yaml_output import YamlFormatter

__all__ = [
    "BaseFormatter",
    "JsonFormatter",
    "MarkdownFormatter",
    "TextFormatter",
    "YamlFormatter",
    "get_formatter",
]
