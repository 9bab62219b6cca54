"""
Diff data models.

Models representing already-parsed file diffs and their hunks.
"""

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from hunk_stats.models.stat import Stat


class ChangeType(str, Enum):
    """Type of file change in a diff."""
    
    ADDED = "added"
    MODIFIED = "modified"
    DELETED = "deleted"
    RENAMED = "renamed"


class Hunk(BaseModel):
    """
    One contiguous block of a unified diff.
    
    ``body`` holds the hunk lines without the ``@@`` header, separated by
    ``'\\n'``. Each non-empty line starts with ``' '`` (context), ``'+'``
    (addition) or ``'-'`` (deletion).
    """
    
    orig_start_line: int = Field(description="First line in the old file")
    orig_lines: int = Field(default=0, description="Number of lines in the old file")
    new_start_line: int = Field(description="First line in the new file")
    new_lines: int = Field(default=0, description="Number of lines in the new file")
    section: str = Field(default="", description="Text after the closing @@ of the header")
    body: str = Field(default="", description="Raw hunk body")
    
    class Config:
        frozen = True
    
    def stat(self) -> Stat:
        """Compute the line statistics of this hunk."""
        from hunk_stats.analyzer.hunk_stats import compute_hunk_stat
        
        return compute_hunk_stat(self)


class FileDiff(BaseModel):
    """Represents a single file in a diff."""
    
    orig_name: str = Field(description="Path of the old file as written in the diff")
    new_name: str = Field(description="Path of the new file as written in the diff")
    change_type: ChangeType = Field(
        default=ChangeType.MODIFIED,
        description="Type of change",
    )
    hunks: list[Hunk] = Field(
        default_factory=list,
        description="Hunks in this file, in diff order",
    )
    
    class Config:
        frozen = True
    
    @property
    def path(self) -> Path:
        """The path the change applies to (old path for deletions)."""
        if self.change_type == ChangeType.DELETED:
            return Path(self.orig_name)
        return Path(self.new_name)
    
    @property
    def source_path(self) -> Optional[Path]:
        """Original path for renames."""
        if self.change_type == ChangeType.RENAMED:
            return Path(self.orig_name)
        return None
    
    def stat(self) -> Stat:
        """Compute the line statistics summed over all hunks."""
        from hunk_stats.analyzer.aggregator import file_stat
        
        return file_stat(self.hunks)
