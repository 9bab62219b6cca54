"""
Diff parser using the unidiff library.

This module wraps the unidiff library to parse unified diff text and
hand the statistics engine structured hunks with their raw bodies.
"""

import logging
from fnmatch import fnmatch
from pathlib import Path
from typing import Union

from unidiff.patch import Hunk as UnidiffHunk
from unidiff import PatchedFile, PatchSet

from hunk_stats.models.diff import ChangeType, FileDiff, Hunk

logger = logging.getLogger(__name__)

DEV_NULL = "/dev/null"


class DiffParserError(Exception):
    """Error during diff parsing."""
    pass


def _strip_prefix(name: str, prefix: str) -> str:
    """Drop a git-style ``a/`` or ``b/`` prefix from a file name."""
    if name.startswith(prefix):
        return name[len(prefix):]
    return name


class DiffParser:
    """
    Parse unified diffs into FileDiff models using the unidiff library.
    
    Supports parsing from files or strings.
    """
    
    @staticmethod
    def _determine_change_type(patched_file: PatchedFile) -> ChangeType:
        """
        Determine the type of change for a patched file.
        
        Args:
            patched_file: A PatchedFile from unidiff.
            
        Returns:
            The ChangeType for this file.
        """
        if patched_file.is_added_file:
            return ChangeType.ADDED
        elif patched_file.is_removed_file:
            return ChangeType.DELETED
        elif patched_file.is_rename:
            return ChangeType.RENAMED
        else:
            return ChangeType.MODIFIED
    
    @staticmethod
    def _hunk_body(hunk: UnidiffHunk) -> str:
        """
        Rebuild the raw body of a unidiff hunk.
        
        Each line is its marker followed by its text, lines joined by
        ``'\\n'``. No-newline markers are kept as they appear in the diff.
        """
        lines = []
        for line in hunk:
            value = line.value
            if value.endswith("\n"):
                value = value[:-1]
            lines.append(f"{line.line_type}{value}")
        return "\n".join(lines)
    
    @staticmethod
    def _parse_hunk(hunk: UnidiffHunk) -> Hunk:
        """
        Parse a unidiff Hunk into our Hunk model.
        
        Args:
            hunk: A Hunk from unidiff.
            
        Returns:
            Hunk with its header numbers and raw body.
        """
        return Hunk(
            orig_start_line=hunk.source_start,
            orig_lines=hunk.source_length,
            new_start_line=hunk.target_start,
            new_lines=hunk.target_length,
            section=hunk.section_header or "",
            body=DiffParser._hunk_body(hunk),
        )
    
    @staticmethod
    def _parse_patched_file(patched_file: PatchedFile) -> FileDiff:
        """
        Parse a PatchedFile into our FileDiff model.
        
        Args:
            patched_file: A PatchedFile from unidiff.
            
        Returns:
            FileDiff with all hunks.
        """
        orig_name = patched_file.source_file or DEV_NULL
        new_name = patched_file.target_file or DEV_NULL
        if orig_name != DEV_NULL:
            orig_name = _strip_prefix(orig_name, "a/")
        if new_name != DEV_NULL:
            new_name = _strip_prefix(new_name, "b/")
        
        return FileDiff(
            orig_name=orig_name,
            new_name=new_name,
            change_type=DiffParser._determine_change_type(patched_file),
            hunks=[DiffParser._parse_hunk(hunk) for hunk in patched_file],
        )
    
    @classmethod
    def parse_file(cls, diff_path: Path, encoding: str = "utf-8") -> list[FileDiff]:
        """
        Parse a diff file.
        
        Args:
            diff_path: Path to the diff file.
            encoding: File encoding (default: utf-8).
            
        Returns:
            List of FileDiff objects.
            
        Raises:
            DiffParserError: If parsing fails.
        """
        try:
            patch_set = PatchSet.from_filename(str(diff_path), encoding=encoding)
        except Exception as e:
            raise DiffParserError(f"Failed to parse diff file {diff_path}: {e}") from e
        files = [cls._parse_patched_file(f) for f in patch_set]
        logger.debug("Parsed %d files from %s", len(files), diff_path)
        return files
    
    @classmethod
    def parse_string(cls, diff_content: str) -> list[FileDiff]:
        """
        Parse diff content from a string.
        
        Args:
            diff_content: The diff content as a string.
            
        Returns:
            List of FileDiff objects.
            
        Raises:
            DiffParserError: If parsing fails.
        """
        try:
            patch_set = PatchSet(diff_content)
        except Exception as e:
            raise DiffParserError(f"Failed to parse diff content: {e}") from e
        files = [cls._parse_patched_file(f) for f in patch_set]
        logger.debug("Parsed %d files from string input", len(files))
        return files
    
    @classmethod
    def parse(cls, source: Union[Path, str], encoding: str = "utf-8") -> list[FileDiff]:
        """
        Parse diff from a file path or string.
        
        Args:
            source: Either a Path to a diff file or diff content as string.
            encoding: File encoding used when ``source`` is a path.
            
        Returns:
            List of FileDiff objects.
        """
        if isinstance(source, Path):
            return cls.parse_file(source, encoding=encoding)
        elif isinstance(source, str):
            return cls.parse_string(source)
        else:
            raise DiffParserError(f"Invalid source type: {type(source)}")
    
    @classmethod
    def filter_files(
        cls,
        diff_files: list[FileDiff],
        include_patterns: list[str],
        exclude_patterns: list[str],
    ) -> list[FileDiff]:
        """
        Keep files matching an include pattern and no exclude pattern.
        
        Args:
            diff_files: List of FileDiff objects.
            include_patterns: Glob patterns a path must match.
            exclude_patterns: Glob patterns a path must not match.
            
        Returns:
            The matching FileDiff objects, in their original order.
        """
        kept = []
        for diff_file in diff_files:
            path = diff_file.path.as_posix()
            if not any(fnmatch(path, pattern) for pattern in include_patterns):
                continue
            if any(fnmatch(path, pattern) for pattern in exclude_patterns):
                logger.debug("Excluding %s", path)
                continue
            kept.append(diff_file)
        return kept
