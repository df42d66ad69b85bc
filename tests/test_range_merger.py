"""
Tests for range merging.
"""

import time

import pendulum

from slotavailability.domain.models import TimeRange
from slotavailability.domain.range_merger import merge_ranges


def _range(start: str, end: str) -> TimeRange:
    return TimeRange(
        start=pendulum.parse(f"2019-01-01 {start}", tz="UTC"),
        end=pendulum.parse(f"2019-01-01 {end}", tz="UTC"),
    )


def _as_strings(ranges):
    return [(r.start.format("HH:mm"), r.end.format("HH:mm")) for r in ranges]


class TestMergeRanges:
    """Tests for merge_ranges."""

    def test_empty_input(self):
        """No ranges in, no ranges out."""
        assert merge_ranges([]) == []

    def test_single_range_unchanged(self):
        """A lone range is returned as-is."""
        only = _range("09:00", "10:00")

        assert merge_ranges([only]) == [only]

    def test_back_to_back_periods_merge(self):
        """
        [=========]
                   [=========]
        [====================]
        """
        merged = merge_ranges([_range("00:00", "01:00"), _range("01:00", "02:00")])

        assert _as_strings(merged) == [("00:00", "02:00")]

    def test_disconnected_periods_dont_merge(self):
        """
        [=========]
                    [==========]
        [=========] [==========]
        """
        merged = merge_ranges([_range("00:00", "00:59"), _range("01:00", "02:00")])

        assert _as_strings(merged) == [("00:00", "00:59"), ("01:00", "02:00")]

    def test_disconnected_times_are_merged_by_bridge(self):
        """
        [=========]
                    [=========]
                [======]
        [=====================]
        """
        merged = merge_ranges([
            _range("00:00", "00:59"),
            _range("01:00", "02:00"),
            _range("00:50", "01:20"),
        ])

        assert _as_strings(merged) == [("00:00", "02:00")]

    def test_bridge_keeps_outliers(self):
        """
        [=========]
                    [=========]
                [======]
                                    [===]
        [=====================]     [===]
        """
        merged = merge_ranges([
            _range("00:00", "00:59"),
            _range("01:00", "02:00"),
            _range("00:50", "01:20"),
            _range("03:20", "03:45"),
        ])

        assert _as_strings(merged) == [("00:00", "02:00"), ("03:20", "03:45")]

    def test_contained_range_is_absorbed(self):
        """
        [==================]
              [======]
        [==================]
        """
        merged = merge_ranges([_range("00:00", "02:00"), _range("00:45", "01:15")])

        assert _as_strings(merged) == [("00:00", "02:00")]

    def test_containing_range_absorbs_earlier(self):
        """
              [======]
        [==================]
        [==================]
        """
        merged = merge_ranges([_range("00:45", "01:15"), _range("00:00", "02:00")])

        assert _as_strings(merged) == [("00:00", "02:00")]

    def test_output_keeps_first_seen_order(self):
        """Groups are not sorted by time."""
        merged = merge_ranges([
            _range("05:00", "06:00"),
            _range("01:00", "02:00"),
            _range("05:30", "07:00"),
        ])

        assert _as_strings(merged) == [("05:00", "07:00"), ("01:00", "02:00")]

    def test_later_bridge_collapses_into_earlier_group(self):
        """A bridge matching a later group still collapses into the first."""
        merged = merge_ranges([
            _range("08:00", "09:00"),
            _range("01:00", "02:00"),
            _range("10:00", "11:00"),
            _range("09:00", "10:00"),
        ])

        assert _as_strings(merged) == [("08:00", "11:00"), ("01:00", "02:00")]

    def test_merge_is_idempotent(self):
        """Merging merged output changes nothing."""
        ranges = [
            _range("00:00", "00:59"),
            _range("03:20", "03:45"),
            _range("01:00", "02:00"),
            _range("00:50", "01:20"),
            _range("03:45", "04:00"),
        ]

        once = merge_ranges(ranges)

        assert merge_ranges(once) == once

    def test_no_inclusive_overlap_in_output(self):
        """No two output ranges overlap or touch."""
        ranges = [
            _range("00:00", "00:30"),
            _range("02:00", "03:00"),
            _range("00:30", "01:00"),
            _range("04:00", "05:00"),
            _range("02:30", "04:00"),
        ]

        merged = merge_ranges(ranges)

        for i, first in enumerate(merged):
            for second in merged[i + 1:]:
                assert not first.inclusive_overlaps(second)
        assert _as_strings(merged) == [("00:00", "01:00"), ("02:00", "05:00")]

    def test_inputs_are_not_mutated(self):
        """Merging returns new values and leaves inputs alone."""
        first = _range("00:00", "01:00")
        second = _range("00:30", "02:00")

        merge_ranges([first, second])

        assert _as_strings([first, second]) == [("00:00", "01:00"), ("00:30", "02:00")]

    def test_many_interleaved_overlaps_merge_quickly(self):
        """Each overlap only rechecks the range it grew."""
        base = pendulum.datetime(2019, 1, 1, tz="UTC")
        blocks = [
            TimeRange(start=base.add(hours=i), end=base.add(hours=i, minutes=30))
            for i in range(400)
        ]
        overlaps = [
            TimeRange(start=base.add(hours=i, minutes=15), end=base.add(hours=i, minutes=45))
            for i in range(400)
        ]

        started = time.perf_counter()
        merged = merge_ranges(blocks + overlaps)
        elapsed = time.perf_counter() - started

        assert len(merged) == 400
        assert merged[0] == TimeRange(start=base, end=base.add(minutes=45))
        assert merged[-1].start == base.add(hours=399)
        assert elapsed < 5

    def test_chain_of_bridges_collapses_into_one(self):
        """Bridging every gap in turn leaves a single range."""
        base = pendulum.datetime(2019, 1, 1, tz="UTC")
        blocks = [
            TimeRange(start=base.add(hours=i), end=base.add(hours=i, minutes=30))
            for i in range(300)
        ]
        bridges = [
            TimeRange(start=base.add(hours=i, minutes=30), end=base.add(hours=i + 1))
            for i in range(299)
        ]

        merged = merge_ranges(blocks + list(reversed(bridges)))

        assert merged == [TimeRange(start=base, end=base.add(hours=299, minutes=30))]
