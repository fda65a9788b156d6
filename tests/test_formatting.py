"""Tests for progress text formatting."""

import pytest

from scoped_progress.progress.formatting import (
    compute_percent,
    format_clock,
    format_duration,
    format_progress_line,
)


class TestComputePercent:
    def test_percent_stays_in_range_and_reaches_100_only_when_complete(self):
        for total in range(1, 60):
            for done in range(0, total + 1):
                percent = compute_percent(done, total)
                assert 0 <= percent <= 100
                assert (percent == 100) == (done == total)

    def test_percent_is_floored(self):
        assert compute_percent(1, 3) == 33
        assert compute_percent(2, 3) == 66
        assert compute_percent(999, 1000) == 99

    def test_large_counts_do_not_round_up_to_100(self):
        total = 10 ** 18
        assert compute_percent(total - 1, total) == 99

    def test_unknown_total_reads_zero_until_first_item(self):
        assert compute_percent(0, 0) == 0
        assert compute_percent(1, 0) == 100
        assert compute_percent(7, 0) == 100

    @pytest.mark.parametrize("done,total,expected", [
        (-5, 10, 0),
        (15, 10, 100),
        (3, -4, 100),
        (-1, -1, 0),
    ])
    def test_malformed_inputs_are_clamped(self, done, total, expected):
        assert compute_percent(done, total) == expected


class TestFormatDuration:
    @pytest.mark.parametrize("seconds,expected", [
        (0.5, "500ms"),
        (1.5, "1.5s"),
        (65, "00:01:05"),
        (0.0, "0ms"),
        (0.0012345, "1.23ms"),
        (1.0, "1000ms"),
        (2.25, "2.25s"),
        (3.0, "3s"),
        (60, "60s"),
        (3725, "01:02:05"),
        (90061, "1.01:01:01"),
    ])
    def test_three_tier_formatting(self, seconds, expected):
        assert format_duration(seconds) == expected

    def test_clock_form_truncates_fractional_seconds(self):
        assert format_duration(65.9) == "00:01:05"


def test_format_clock_pads_fields():
    assert format_clock(0) == "00:00:00"
    assert format_clock(5) == "00:00:05"
    assert format_clock(36000) == "10:00:00"


class TestFormatProgressLine:
    def test_in_progress_line_ends_with_carriage_return(self):
        line = format_progress_line("Build", 1, 10, 2500)
        assert line == "Build:  10% (1/10), 00:00:02 \r"

    def test_completed_line_ends_with_newline(self):
        line = format_progress_line("Build", 10, 10, 61000)
        assert line == "Build: 100% (10/10), 00:01:01 \n"

    def test_percent_is_right_aligned(self):
        assert format_progress_line("Copy", 0, 4, 3000).startswith("Copy:   0% ")

    def test_raw_counts_are_printed(self):
        assert "(-2/5)" in format_progress_line("Copy", -2, 5, 3000)
