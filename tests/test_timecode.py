"""Tests for offset normalization and cut-region arithmetic."""

import pytest

from ytdl_album.core.timecode import (
    cut_regions,
    lengths_to_offsets,
    normalize,
    normalize_tracks,
    parse_duration,
    parse_timespan,
)
from ytdl_album.exceptions import TimecodeError
from ytdl_album.models.track import CutRegion, TimeSpan, Track


def ts(value: str) -> TimeSpan:
    return parse_timespan(value)


class TestNormalize:
    def test_hours_fold_into_minutes(self):
        assert parse_timespan("1:02:03") == TimeSpan(minutes=62, seconds=3)
        assert normalize("1:02:03") == "62:03"

    def test_two_fields_are_minutes_and_seconds(self):
        assert normalize("3:5") == "03:05"
        assert normalize("12:34") == "12:34"

    def test_field_count_decides_even_with_zero_hours(self):
        assert normalize("0:01:00") == "01:00"
        assert normalize("0:00") == "00:00"

    def test_minutes_past_99_are_not_truncated(self):
        assert normalize("125:07") == "125:07"
        assert normalize("2:05:07") == "125:07"

    def test_seconds_overflow_carries(self):
        assert normalize("1:75") == "02:15"

    @pytest.mark.parametrize("value", ["0:00", "3:05", "59:59", "125:07", "1:02:03"])
    def test_idempotent(self, value):
        assert normalize(normalize(value)) == normalize(value)

    @pytest.mark.parametrize("value", ["", "5", "a:b", "1:2:3:4", "1:-2", " : "])
    def test_malformed_offsets_raise(self, value):
        with pytest.raises(TimecodeError):
            parse_timespan(value)

    def test_normalize_tracks_strips_titles(self):
        tracks = normalize_tracks([("1:02:03", "  Finale "), ("0:00", "Intro")])
        assert tracks == [Track(TimeSpan(62, 3), "Finale"), Track(TimeSpan(0, 0), "Intro")]


class TestTimeSpan:
    def test_str_is_zero_padded(self):
        assert str(TimeSpan(5, 3)) == "05:03"

    def test_addition_carries_seconds(self):
        assert ts("0:45") + ts("0:45") == TimeSpan(1, 30)

    def test_subtraction_borrows(self):
        assert ts("4:10") - ts("2:50") == TimeSpan(1, 20)

    def test_negative_result_keeps_seconds_in_range(self):
        span = ts("2:30") - ts("4:00")
        assert span.total_seconds == -90
        assert 0 <= span.seconds <= 59
        assert str(span) == "-01:30"


class TestLengthsToOffsets:
    def test_lengths_become_start_offsets(self):
        tracks = normalize_tracks([("00:30", "A"), ("01:00", "B")])
        offsets = lengths_to_offsets(tracks)
        assert [(str(t.offset), t.title) for t in offsets] == [("00:00", "A"), ("00:30", "B")]

    def test_running_total_carries_into_minutes(self):
        tracks = normalize_tracks([("0:45", "A"), ("0:45", "B"), ("1:00", "C")])
        offsets = [str(t.offset) for t in lengths_to_offsets(tracks)]
        assert offsets == ["00:00", "00:45", "01:30"]

    def test_offsets_are_non_decreasing(self):
        tracks = normalize_tracks([("3:00", "A"), ("0:00", "B"), ("4:59", "C"), ("1:01", "D")])
        offsets = [t.offset.total_seconds for t in lengths_to_offsets(tracks)]
        assert offsets[0] == 0
        assert offsets == sorted(offsets)

    def test_empty_listing(self):
        assert lengths_to_offsets([]) == []


class TestCutRegions:
    def test_regions_from_adjacent_offsets_and_total(self):
        tracks = [Track(ts("00:00"), "A"), Track(ts("03:00"), "B")]
        regions = cut_regions(tracks, ts("05:00"))
        assert regions == [
            CutRegion(ts("00:00"), ts("03:00"), "A"),
            CutRegion(ts("03:00"), ts("02:00"), "B"),
        ]

    def test_borrow_between_tracks(self):
        tracks = [Track(ts("0:00"), "A"), Track(ts("2:50"), "B"), Track(ts("4:10"), "C")]
        durations = [str(r.duration) for r in cut_regions(tracks, ts("5:00"))]
        assert durations == ["02:50", "01:20", "00:50"]

    def test_last_track_at_album_end_gives_zero_duration(self):
        tracks = [Track(ts("0:00"), "A"), Track(ts("5:00"), "B")]
        assert cut_regions(tracks, ts("5:00"))[-1].duration == TimeSpan(0, 0)

    def test_negative_duration_is_not_clamped(self):
        tracks = [Track(ts("0:00"), "A"), Track(ts("5:00"), "B")]
        last = cut_regions(tracks, ts("4:00"))[-1]
        assert last.duration.total_seconds == -60


class TestParseDuration:
    def test_sub_seconds_are_truncated(self):
        assert parse_duration("312.987000\n") == TimeSpan(5, 12)

    def test_whole_seconds(self):
        assert parse_duration("3723") == TimeSpan(62, 3)

    @pytest.mark.parametrize("value", ["", "N/A", "nan"])
    def test_unusable_output_raises(self, value):
        with pytest.raises(TimecodeError):
            parse_duration(value)
