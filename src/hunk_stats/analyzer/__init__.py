"""
Analyzer package for Hunk Stats.

This package contains the hunk statistics engine, the interval tracker it
relies on, and the file-level aggregator.
"""

from hunk_stats.analyzer.aggregator import file_stat, format_intervals, sum_stats
from hunk_stats.analyzer.hunk_stats import compute_hunk_stat
from hunk_stats.analyzer.interval_tracker import IntervalTracker

__all__ = [
    "IntervalTracker",
    "compute_hunk_stat",
    "file_stat",
    "format_intervals",
    "sum_stats",
]
