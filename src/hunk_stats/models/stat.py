"""
Statistics data models.

Models representing line intervals and per-hunk / per-file line statistics.
"""

from pydantic import BaseModel, Field, model_validator


class LineInterval(BaseModel):
    """An inclusive, contiguous run of added or deleted line numbers."""
    
    start: int = Field(description="First line number of the run")
    end: int = Field(description="Last line number of the run (inclusive)")
    
    class Config:
        frozen = True
    
    @model_validator(mode="after")
    def _check_order(self) -> "LineInterval":
        if self.start > self.end:
            raise ValueError(f"interval start {self.start} is after end {self.end}")
        return self
    
    def format(self) -> str:
        """Render as ``"start"`` for single lines, else ``"start-end"``."""
        if self.start == self.end:
            return str(self.start)
        return f"{self.start}-{self.end}"


class Stat(BaseModel):
    """
    Line statistics for a hunk or a whole file diff.
    
    ``added`` and ``deleted`` count lines that were not collapsed into a
    ``changed`` pair. Interval lists keep the order in which runs were
    encountered; additions are numbered in the new file and deletions in
    the old file.
    """
    
    added: int = Field(default=0, ge=0, description="Purely added lines")
    deleted: int = Field(default=0, ge=0, description="Purely deleted lines")
    changed: int = Field(
        default=0,
        ge=0,
        description="Adjacent deletion/addition pairs counted as one edit",
    )
    added_line_intervals: list[LineInterval] = Field(
        default_factory=list,
        description="Runs of added lines (new file numbering)",
    )
    deleted_line_intervals: list[LineInterval] = Field(
        default_factory=list,
        description="Runs of deleted lines (old file numbering)",
    )
    
    class Config:
        frozen = True
    
    @property
    def total(self) -> int:
        """Total number of touched lines."""
        return self.added + self.deleted + self.changed
    
    @property
    def is_empty(self) -> bool:
        """True when no line was added, deleted, or changed."""
        return self.total == 0 and not self.added_line_intervals and not self.deleted_line_intervals
    
    def add(self, other: "Stat") -> "Stat":
        """
        Return the componentwise sum of this stat and another.
        
        Interval lists are concatenated, this stat's intervals first.
        Adjacent intervals are never merged.
        
        Args:
            other: The stat to add.
            
        Returns:
            A new Stat; neither operand is modified.
        """
        return Stat(
            added=self.added + other.added,
            deleted=self.deleted + other.deleted,
            changed=self.changed + other.changed,
            added_line_intervals=[*self.added_line_intervals, *other.added_line_intervals],
            deleted_line_intervals=[*self.deleted_line_intervals, *other.deleted_line_intervals],
        )
    
    def format_added_line_intervals(self) -> str:
        """Render the added intervals, e.g. ``"5, 7-9"``."""
        from hunk_stats.analyzer.aggregator import format_intervals
        
        return format_intervals(self.added_line_intervals)
    
    def format_deleted_line_intervals(self) -> str:
        """Render the deleted intervals, e.g. ``"5, 7-9"``."""
        from hunk_stats.analyzer.aggregator import format_intervals
        
        return format_intervals(self.deleted_line_intervals)
