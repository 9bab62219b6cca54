"""
Report data models.

Models representing per-file statistics reports.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from hunk_stats.models.diff import ChangeType
from hunk_stats.models.stat import Stat


class FileStatEntry(BaseModel):
    """Statistics for one file in a diff."""
    
    path: str = Field(description="Path of the changed file")
    change_type: ChangeType = Field(description="Type of change")
    source_path: Optional[str] = Field(
        default=None,
        description="Original path (for renames)",
    )
    hunk_count: int = Field(default=0, description="Number of hunks in the file")
    stat: Stat = Field(default_factory=Stat, description="File-level statistics")
    
    class Config:
        frozen = True


class StatReport(BaseModel):
    """Statistics report for a whole diff, one entry per file."""
    
    timestamp: datetime = Field(
        default_factory=datetime.now,
        description="When the report was produced",
    )
    diff_source: str = Field(description="Source of the diff (file path or 'stdin')")
    files: list[FileStatEntry] = Field(
        default_factory=list,
        description="Per-file statistics, in diff order",
    )
    warnings: list[str] = Field(
        default_factory=list,
        description="Any warnings from the run",
    )
    
    @property
    def file_count(self) -> int:
        """Number of files in the report."""
        return len(self.files)
    