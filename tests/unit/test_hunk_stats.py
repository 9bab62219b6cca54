"""
Unit tests for the hunk statistics engine.
"""

import pytest

from hunk_stats.analyzer.hunk_stats import compute_hunk_stat
from hunk_stats.models.diff import Hunk
from hunk_stats.models.stat import LineInterval, Stat


def make_hunk(body: str, orig_start: int = 1, new_start: int = 1) -> Hunk:
    """Build a hunk with the given body and start lines."""
    return Hunk(orig_start_line=orig_start, new_start_line=new_start, body=body)


class TestCounts:
    """Tests for added/deleted/changed counting."""

    def test_context_only(self) -> None:
        """Test that a hunk without markers yields an empty stat."""
        stat = compute_hunk_stat(make_hunk(" a\n b\n c\n"))

        assert stat == Stat()
        assert stat.added_line_intervals == []
        assert stat.deleted_line_intervals == []

    def test_empty_body(self) -> None:
        """Test that an empty body yields an empty stat."""
        assert compute_hunk_stat(make_hunk("")) == Stat()

    def test_deletion_then_addition_is_one_change(self) -> None:
        """Test that an adjacent deletion and addition collapse into a change."""
        stat = compute_hunk_stat(make_hunk("-a\n+b\n", orig_start=1, new_start=1))

        assert (stat.added, stat.deleted, stat.changed) == (0, 0, 1)
        # Intervals are recorded by sign, independent of pairing
        assert stat.added_line_intervals == [LineInterval(start=1, end=1)]
        assert stat.deleted_line_intervals == [LineInterval(start=1, end=1)]

    def test_addition_then_deletion_is_one_change(self) -> None:
        """Test that pairing also works in the add-then-delete order."""
        stat = compute_hunk_stat(make_hunk("+a\n-b", orig_start=5, new_start=7))

        assert (stat.added, stat.deleted, stat.changed) == (0, 0, 1)
        assert stat.added_line_intervals == [LineInterval(start=7, end=7)]
        assert stat.deleted_line_intervals == [LineInterval(start=5, end=5)]

    def test_deletion_pairs_with_only_one_addition(self) -> None:
        """Test that a consumed deletion cannot pair with a second addition."""
        stat = compute_hunk_stat(make_hunk("-a\n+b\n+c"))

        assert (stat.added, stat.deleted, stat.changed) == (1, 0, 1)
        assert stat.added_line_intervals == [LineInterval(start=1, end=2)]
        assert stat.deleted_line_intervals == [LineInterval(start=1, end=1)]

    def test_only_adjacent_lines_pair(self) -> None:
        """Test that only the deletion right before an addition is paired."""
        stat = compute_hunk_stat(make_hunk("-a\n-b\n+c\n+d"))

        assert (stat.added, stat.deleted, stat.changed) == (1, 1, 1)
        assert stat.deleted_line_intervals == [LineInterval(start=1, end=2)]
        assert stat.added_line_intervals == [LineInterval(start=1, end=2)]

    def test_context_breaks_pairing(self) -> None:
        """Test that a context line between a deletion and an addition prevents pairing."""
        stat = compute_hunk_stat(make_hunk("-a\n x\n+b"))

        assert (stat.added, stat.deleted, stat.changed) == (1, 1, 0)
        assert stat.deleted_line_intervals == [LineInterval(start=1, end=1)]
        assert stat.added_line_intervals == [LineInterval(start=2, end=2)]

    def test_replacement_inside_context(self) -> None:
        """Test a two-line replacement by one line surrounded by context."""
        stat = compute_hunk_stat(make_hunk(" a\n-b\n-c\n+x\n d"))

        assert (stat.added, stat.deleted, stat.changed) == (0, 1, 1)
        assert stat.deleted_line_intervals == [LineInterval(start=2, end=3)]
        assert stat.added_line_intervals == [LineInterval(start=2, end=2)]

    def test_added_plus_changed_matches_addition_lines(self) -> None:
        """Test that pairing never loses an addition or deletion."""
        body = "-a\n+b\n+c\n x\n-d\n-e\n+f\n y\n+g\n-h"
        stat = compute_hunk_stat(make_hunk(body))

        assert stat.added + stat.changed == body.count("\n+") + body.startswith("+")
        assert stat.deleted + stat.changed == body.count("\n-") + body.startswith("-")
        assert min(stat.added, stat.deleted, stat.changed) >= 0


class TestIntervals:
    """Tests for added/deleted line intervals."""

    def test_consecutive_additions(self) -> None:
        """Test that three additions form a single run in new-file numbering."""
        stat = compute_hunk_stat(make_hunk("+a\n+b\n+c", new_start=10))

        assert stat.added == 3
        assert stat.added_line_intervals == [LineInterval(start=10, end=12)]
        assert stat.deleted_line_intervals == []

    def test_separated_additions_are_not_merged(self) -> None:
        """Test that a context line splits additions into two runs."""
        stat = compute_hunk_stat(make_hunk("+a\n+b\n c\n+d"))

        assert stat.added == 3
        assert stat.added_line_intervals == [
            LineInterval(start=1, end=2),
            LineInterval(start=4, end=4),
        ]

    def test_deletions_use_old_file_numbering(self) -> None:
        """Test that deletion positions skip lines that only exist in the new file."""
        stat = compute_hunk_stat(make_hunk(" a\n+b\n c\n-d\n-e", orig_start=20, new_start=30))

        assert stat.added_line_intervals == [LineInterval(start=31, end=31)]
        assert stat.deleted_line_intervals == [LineInterval(start=22, end=23)]

    def test_trailing_run_is_flushed(self) -> None:
        """Test that a run still open at the end of the body is recorded."""
        stat = compute_hunk_stat(make_hunk(" a\n-b\n-c", orig_start=3))

        assert stat.deleted_line_intervals == [LineInterval(start=4, end=5)]

    def test_unknown_marker_is_context(self) -> None:
        """Test that lines with an unrecognized first character act as context."""
        stat = compute_hunk_stat(make_hunk("+a\n\\ No newline at end of file\n+b"))

        assert (stat.added, stat.deleted, stat.changed) == (2, 0, 0)
        assert stat.added_line_intervals == [
            LineInterval(start=1, end=1),
            LineInterval(start=3, end=3),
        ]


class TestEmptyLines:
    """Tests for empty lines inside a body."""

    def test_empty_line_is_not_counted(self) -> None:
        """Test that empty lines contribute nothing."""
        assert compute_hunk_stat(make_hunk("\n\n\n")) == Stat()

    def test_empty_line_prevents_pairing(self) -> None:
        """Test that an empty line resets pairing state."""
        stat = compute_hunk_stat(make_hunk("-a\n\n+b"))

        assert (stat.added, stat.deleted, stat.changed) == (1, 1, 0)
        assert stat.deleted_line_intervals == [LineInterval(start=1, end=1)]
        assert stat.added_line_intervals == [LineInterval(start=2, end=2)]

    def test_empty_line_keeps_run_open(self) -> None:
        """Test that an empty line between additions does not split the run."""
        stat = compute_hunk_stat(make_hunk("+a\n\n+b"))

        assert stat.added == 2
        assert stat.added_line_intervals == [LineInterval(start=1, end=3)]

    def test_run_closed_by_next_line_after_empty_line(self) -> None:
        """Test that a run open across an empty line closes on the next other-kind line."""
        stat = compute_hunk_stat(make_hunk("+a\n\n-b\n+c"))

        assert (stat.added, stat.deleted, stat.changed) == (1, 0, 1)
        assert stat.added_line_intervals == [
            LineInterval(start=1, end=1),
            LineInterval(start=3, end=3),
        ]
        assert stat.deleted_line_intervals == [LineInterval(start=2, end=2)]


class TestHunkStatMethod:
    """Tests for Hunk.stat()."""

    @pytest.mark.parametrize(
        "body",
        ["-a\n+b\n", "+a\n+b\n c\n+d", " a\n-b\n-c\n+x\n d", ""],
    )
    def test_stat_is_idempotent(self, body: str) -> None:
        """Test that computing twice gives identical results."""
        hunk = make_hunk(body, orig_start=4, new_start=9)

        assert hunk.stat() == hunk.stat()
        assert hunk.stat() == compute_hunk_stat(hunk)

    def test_hunk_is_not_modified(self) -> None:
        """Test that computing statistics leaves the hunk unchanged."""
        hunk = make_hunk("-a\n+b\n")
        before = hunk.model_dump()

        hunk.stat()

        assert hunk.model_dump() == before
