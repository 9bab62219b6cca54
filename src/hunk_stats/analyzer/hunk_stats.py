"""
Hunk statistics engine.

Scans a hunk body line by line, counting additions and deletions,
collapsing an immediately adjacent deletion/addition pair into a single
changed line, and recording the contiguous runs of added lines (new file
numbering) and deleted lines (old file numbering).
"""

import logging
from typing import TYPE_CHECKING, Optional

from hunk_stats.analyzer.interval_tracker import IntervalTracker
from hunk_stats.models.stat import LineInterval, Stat

if TYPE_CHECKING:
    from hunk_stats.models.diff import Hunk

logger = logging.getLogger(__name__)

ADDED_MARKER = "+"
DELETED_MARKER = "-"


def compute_hunk_stat(hunk: "Hunk") -> Stat:
    """
    Compute the line statistics of a single hunk.
    
    Two pieces of state are carried from line to line:
    
    - ``pair_flag``: marker of the previous line that is still available
      for pairing. It is cleared as soon as it has been paired, so one
      deletion pairs with at most one addition and vice versa.
    - ``raw_flag``: first character of the previous non-empty line. It
      decides whether an interval run continues and is never cleared by
      pairing.
    
    Empty lines are not counted and only clear ``pair_flag``; an open run
    stays open until the next non-empty line of another kind. Any line
    that is not an addition or deletion is context.
    
    Args:
        hunk: The hunk to measure. It is not modified.
        
    Returns:
        A new Stat for the hunk.
    """
    added = deleted = changed = 0
    added_intervals: list[LineInterval] = []
    deleted_intervals: list[LineInterval] = []
    added_tracker = IntervalTracker()
    deleted_tracker = IntervalTracker()
    
    pair_flag: Optional[str] = None
    raw_flag: Optional[str] = None
    
    for index, line in enumerate(hunk.body.split("\n")):
        if not line:
            pair_flag = None
            continue
        
        # Positions drop every earlier line that does not exist in the
        # target file: deletions and changes for the new file, additions
        # and changes for the old one.
        new_line = hunk.new_start_line + index - deleted - changed
        orig_line = hunk.orig_start_line + index - added - changed
        marker = line[0]
        
        if marker == ADDED_MARKER:
            added_tracker.update_line(new_line)
        elif raw_flag == ADDED_MARKER:
            added_tracker.flush(added_intervals)
        
        if marker == DELETED_MARKER:
            deleted_tracker.update_line(orig_line)
        elif raw_flag == DELETED_MARKER:
            deleted_tracker.flush(deleted_intervals)
        
        if marker == ADDED_MARKER:
            if pair_flag == DELETED_MARKER:
                deleted -= 1
                changed += 1
                pair_flag = None
            else:
                added += 1
                pair_flag = ADDED_MARKER
        elif marker == DELETED_MARKER:
            if pair_flag == ADDED_MARKER:
                added -= 1
                changed += 1
                pair_flag = None
            else:
                deleted += 1
                pair_flag = DELETED_MARKER
        else:
            pair_flag = None
        
        raw_flag = marker
    
    added_tracker.flush(added_intervals)
    deleted_tracker.flush(deleted_intervals)
    
    logger.debug(
        "hunk -%d +%d: added=%d deleted=%d changed=%d",
        hunk.orig_start_line,
        hunk.new_start_line,
        added,
        deleted,
        changed,
    )
    
    return Stat(
        added=added,
        deleted=deleted,
        changed=changed,
        added_line_intervals=added_intervals,
        deleted_line_intervals=deleted_intervals,
    )
