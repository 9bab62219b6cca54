"""
Hunk Stats

A small library and CLI that computes line-level statistics for unified
diff hunks: how many lines were added, deleted, or changed, and which
contiguous line ranges were touched in the old and new files.
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("hunk-stats")
except PackageNotFoundError:
    __version__ = "0.1.0"

# Public API exports
__all__ = [
    "__version__",
]
