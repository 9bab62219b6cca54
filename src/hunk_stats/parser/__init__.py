"""
Parser package for Hunk Stats.

Turns unified diff text into FileDiff and Hunk models (using unidiff).
"""

from hunk_stats.parser.diff_parser import DiffParser, DiffParserError

__all__ = [
    "DiffParser",
    "DiffParserError",
]
