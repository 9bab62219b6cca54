"""
Aggregation and rendering of hunk statistics.
"""

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from hunk_stats.models.stat import LineInterval, Stat

if TYPE_CHECKING:
    from hunk_stats.models.diff import Hunk

logger = logging.getLogger(__name__)


def sum_stats(stats: Iterable[Stat]) -> Stat:
    """
    Sum stats componentwise, concatenating intervals in iteration order.
    
    Args:
        stats: Stats to fold, in the order their intervals should appear.
        
    Returns:
        The total; an empty Stat when ``stats`` is empty.
    """
    total = Stat()
    for stat in stats:
        total = total.add(stat)
    return total


def file_stat(hunks: Iterable["Hunk"]) -> Stat:
    """
    Compute the file-level statistics of a sequence of hunks.
    
    Each hunk is measured independently; intervals from neighbouring hunks
    are never merged.
    
    Args:
        hunks: Hunks of one file diff, in diff order.
        
    Returns:
        The summed Stat.
    """
    hunks = list(hunks)
    total = sum_stats(hunk.stat() for hunk in hunks)
    logger.debug("Aggregated %d hunks: %d lines touched", len(hunks), total.total)
    return total


def format_intervals(intervals: Iterable[LineInterval]) -> str:
    """
    Render intervals as a compact list, e.g. ``"5, 7-9"``.
    
    Args:
        intervals: Intervals to render, in order.
        
    Returns:
        The intervals joined by ``", "``; empty string for no intervals.
    """
    return ", ".join(interval.format() for interval in intervals)
