"""
Data models for Hunk Stats.

This package contains Pydantic models for representing diffs, hunks,
line statistics, and reports.
"""

from hunk_stats.models.stat import (
    LineInterval,
    Stat,
)
from hunk_stats.models.diff import (
    ChangeType,
    FileDiff,
    Hunk,
)
from hunk_stats.models.report import (
    FileStatEntry,
    StatReport,
)

__all__ = [
    # Statistics models
    "LineInterval",
    "Stat",
    # Diff models
    "ChangeType",
    "FileDiff",
    "Hunk",
    # Report models
    "FileStatEntry",
    "StatReport",
]
