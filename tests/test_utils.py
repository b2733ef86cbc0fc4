"""Tests for input parsing, display helpers and the text report."""

from datetime import datetime

import pytest

from engine import (
    EmptySequenceError,
    InvalidFrameCountError,
    InvalidReferenceError,
    NoPolicySelectedError,
    Performance,
    run_simulations,
)
from report import build_report, report_filename
from utils import (
    EXAMPLES,
    format_frames,
    get_badge_color,
    parse_frame_count,
    parse_reference_string,
    select_algorithms,
)


class TestParseReferenceString:
    """Verify tokenizing of the raw reference string."""

    def test_commas_and_whitespace(self) -> None:
        """Commas, spaces and newlines all separate pages."""
        assert parse_reference_string("7, 0 1\n2,,3") == [7, 0, 1, 2, 3]

    @pytest.mark.parametrize("raw", ["", "   ", " , ,", None])
    def test_empty(self, raw) -> None:
        """No tokens at all is an empty sequence."""
        with pytest.raises(EmptySequenceError, match="cannot be empty"):
            parse_reference_string(raw)

    def test_invalid_token_position(self) -> None:
        """A non-integer token reports its 1-based position."""
        with pytest.raises(InvalidReferenceError, match="position 3") as exc_info:
            parse_reference_string("1,2,x,4")
        assert exc_info.value.position == 3

    def test_decimal_is_invalid(self) -> None:
        """Fractional pages are not page numbers."""
        with pytest.raises(InvalidReferenceError):
            parse_reference_string("1.5")

    def test_negative(self) -> None:
        """Negative pages are rejected."""
        with pytest.raises(InvalidReferenceError, match="non-negative"):
            parse_reference_string("1,-2")

    def test_examples_parse(self) -> None:
        """Every built-in example is a valid input."""
        for _, reference, frames in EXAMPLES:
            assert parse_reference_string(reference)
            assert parse_frame_count(frames) == frames


class TestParseFrameCount:
    """Verify frame count parsing and the display ceiling."""

    def test_text_and_int(self) -> None:
        """Both text and ints are accepted."""
        assert parse_frame_count(" 3 ") == 3
        assert parse_frame_count(4) == 4

    @pytest.mark.parametrize("raw", ["0", "-2", "abc", "", "2.5", 0])
    def test_not_positive_integer(self, raw) -> None:
        """Anything but a positive integer is rejected."""
        with pytest.raises(InvalidFrameCountError, match="positive integer"):
            parse_frame_count(raw)

    def test_capped(self) -> None:
        """Frame counts above the ceiling are rejected."""
        assert parse_frame_count("25") == 25
        with pytest.raises(InvalidFrameCountError, match="capped at 25 for readability"):
            parse_frame_count("26")


class TestSelectAlgorithms:
    """Verify the algorithm selector mapping."""

    def test_all(self) -> None:
        """'all' runs every algorithm."""
        assert select_algorithms("all") == ["fifo", "lru", "optimal"]

    def test_single(self) -> None:
        """A single key runs only that algorithm."""
        assert select_algorithms("lru") == ["lru"]

    @pytest.mark.parametrize("selection", ["", None, "clock"])
    def test_nothing_selected(self, selection) -> None:
        """Unknown selections mean nothing was selected."""
        with pytest.raises(NoPolicySelectedError):
            select_algorithms(selection)


class TestDisplayHelpers:
    """Verify frame formatting and badge colors."""

    def test_pads_short_snapshot(self) -> None:
        """Unfilled frames render as '-'."""
        assert format_frames((7,), 3) == "[7, -, -]"

    def test_empty_slots(self) -> None:
        """None slots render as '-', page 0 renders as 0."""
        assert format_frames((0, None), 2) == "[0, -]"

    def test_badge_colors_distinct(self) -> None:
        """Each rating has its own color."""
        colors = {get_badge_color(p) for p in (
            Performance.EXCELLENT, Performance.GOOD, Performance.AVERAGE, Performance.POOR,
        )}
        assert len(colors) == 4


class TestReport:
    """Verify the plain-text export."""

    def test_single_run(self) -> None:
        """The report lists inputs, totals and every step."""
        runs = run_simulations([5, 5], 2, ["fifo"])
        assert build_report([5, 5], 2, runs).split("\n") == [
            "Page Replacement Algorithm Simulation Results",
            "================================================",
            "Reference string: 5, 5",
            "Frame count: 2",
            "",
            "First-In First-Out (FIFO)",
            "-" * 36,
            "Page faults: 1",
            "Hit ratio: 50.00%",
            "Performance: Good",
            "Timeline:",
            "  1. page 5 -> [5, -] :: FAULT",
            "  2. page 5 -> [5, -] :: HIT",
            "",
        ]

    def test_every_algorithm_included(self) -> None:
        """All requested algorithms appear with two-decimal hit ratios."""
        reference = [7, 0, 1, 2, 0, 3, 0, 4, 2, 3, 0, 3, 2]
        report = build_report(reference, 3, run_simulations(reference, 3, select_algorithms("all")))
        assert "Least Recently Used (LRU)\n" in report
        assert "Optimal\n" + "-" * 18 + "\n" in report
        assert "Hit ratio: 23.08%" in report
        assert "  13. page 2 -> [0, 3, 2] :: HIT" in report
        assert report.count("Timeline:") == 3

    def test_filename(self) -> None:
        """The file name is timestamped with ':' and '.' replaced."""
        now = datetime(2026, 10, 19, 12, 30, 5, 123000)
        assert report_filename(now) == "page-replacement-results-2026-10-19T12-30-05-123000.txt"
