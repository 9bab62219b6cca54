"""
Tracking of the currently open run of added or deleted lines.
"""

from typing import Optional

from hunk_stats.models.stat import LineInterval


class IntervalTracker:
    """
    Holds at most one open interval for one side of a hunk.
    
    One instance tracks additions and a separate one tracks deletions;
    they share no state. Runs only ever grow forward.
    """
    
    def __init__(self) -> None:
        self._start: Optional[int] = None
        self._end: Optional[int] = None
    
    @property
    def is_open(self) -> bool:
        """Whether a run is currently open."""
        return self._start is not None
    
    def update_line(self, pos: int) -> None:
        """
        Extend the open run to ``pos``, opening a new one if none is open.
        
        Args:
            pos: Line number of the current added/deleted line.
        """
        if self._start is None:
            self._start = pos
        self._end = pos
    
    def flush(self, into: list[LineInterval]) -> None:
        """
        Append the open run to ``into`` and close it.
        
        Closing when nothing is open does nothing.
        
        Args:
            into: Interval list that receives the run.
        """
        if not self.is_open:
            return
        into.append(LineInterval(start=self._start, end=self._end))  # type: ignore[arg-type]
        self._start = None
        self._end = None
