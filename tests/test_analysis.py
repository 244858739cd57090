"""
Tests for filtering, ordering and statistics over enriched regions.
"""
import math

import pytest

from autoeye.analysis.filtering import RegionFilter, SortKey, apply_view, filter_regions, regions_to_frame, sort_regions
from autoeye.analysis.statistics import compute_statistics, summarize_participants
from autoeye.domain.regions import Region
from autoeye.engine import ReportEngine


@pytest.fixture
def regions(participant_sources):
    return ReportEngine().build(participant_sources).regions


def _keys(regions):
    return [r.group_key for r in regions]


class TestFiltering:
    def test_no_filter_keeps_everything(self, regions):
        assert _keys(filter_regions(regions)) == ["autolabel_1", "question_1", "autolabel_2"]

    def test_accepted_only(self, regions):
        assert _keys(filter_regions(regions, RegionFilter(accepted_only=True))) == ["autolabel_1", "autolabel_2"]

    def test_dwell_positive(self, regions):
        assert _keys(filter_regions(regions, RegionFilter(dwell_positive=True))) == ["autolabel_1", "autolabel_2"]

    def test_duration_threshold_is_inclusive(self, regions):
        assert _keys(filter_regions(regions, RegionFilter(min_duration=600.0))) == ["autolabel_1", "question_1"]

    def test_filters_are_combined(self, regions):
        region_filter = RegionFilter(accepted_only=True, min_dwell_time=100.0)
        assert _keys(filter_regions(regions, region_filter)) == ["autolabel_1"]


class TestSorting:
    def test_time_ascending(self, regions):
        assert _keys(sort_regions(list(reversed(regions)), SortKey.TIME)) == ["autolabel_1", "question_1", "autolabel_2"]

    def test_duration_descending(self, regions):
        assert _keys(sort_regions(regions, SortKey.DURATION)) == ["question_1", "autolabel_1", "autolabel_2"]

    def test_dwell_descending(self, regions):
        assert _keys(sort_regions(regions, "dwelltime")) == ["autolabel_1", "autolabel_2", "question_1"]

    def test_char_count_descending(self, regions):
        assert _keys(sort_regions(regions, SortKey.CHAR_COUNT)) == ["question_1", "autolabel_1", "autolabel_2"]

    @pytest.mark.parametrize("sort_key", [SortKey.DURATION, SortKey.DWELL_TIME, SortKey.CHAR_COUNT])
    def test_ties_keep_timeline_order(self, sort_key):
        tied = [
            Region("c", start=300.0, end=400.0, order=2, markup="xy", char_count=2, dwell_time=10.0),
            Region("a", start=100.0, end=200.0, order=1, markup="xy", char_count=2, dwell_time=10.0),
            Region("b", start=100.0, end=200.0, order=0, markup="xy", char_count=2, dwell_time=10.0),
            Region("top", start=500.0, end=900.0, order=3, markup="xyz", char_count=3, dwell_time=50.0),
        ]
        assert _keys(sort_regions(tied, sort_key)) == ["top", "b", "a", "c"]

    def test_unknown_sort_key(self, regions):
        with pytest.raises(ValueError):
            sort_regions(regions, "alphabetical")

    def test_view_filters_then_sorts(self, regions):
        view = apply_view(regions, RegionFilter(accepted_only=True), SortKey.DURATION)
        assert _keys(view) == ["autolabel_1", "autolabel_2"]


class TestStatistics:
    def test_statistics(self, regions):
        stats = compute_statistics(regions)

        assert stats.count == 3
        assert stats.accepted_count == 2
        assert stats.accepted_pct == pytest.approx(200.0 / 3)
        assert stats.not_accepted_count == 1
        assert stats.not_accepted_pct == pytest.approx(100.0 / 3)
        assert stats.avg_duration == pytest.approx(700.0)
        assert (stats.min_duration, stats.max_duration) == (500.0, 1000.0)
        assert stats.avg_dwell_time == pytest.approx(200.0 / 3)
        assert (stats.min_dwell_time, stats.max_dwell_time) == (0.0, 120.0)
        assert stats.avg_duration_accepted == pytest.approx(550.0)
        assert stats.avg_duration_not_accepted == pytest.approx(1000.0)
        assert stats.avg_dwell_accepted == pytest.approx(100.0)
        assert stats.avg_dwell_not_accepted == 0.0

    def test_empty_set_is_zero_not_nan(self, regions):
        stats = compute_statistics(filter_regions(regions, RegionFilter(min_duration=1e9)))

        assert stats.count == 0
        assert stats.accepted_pct == 0
        for value in stats.to_dict().values():
            assert not math.isnan(value)
            assert value == 0

    def test_summary_has_one_row_per_participant(self, regions):
        table = summarize_participants({"p1": regions, "p2": []})
        assert list(table.index) == ["p1", "p2"]
        assert table.loc["p1", "count"] == 3
        assert table.loc["p2", "accepted_pct"] == 0


def test_regions_to_frame(regions):
    frame = regions_to_frame(sort_regions(regions, SortKey.DURATION))
    assert list(frame["group_key"]) == ["question_1", "autolabel_1", "autolabel_2"]
    assert list(frame["duration"]) == [1000.0, 600.0, 500.0]
    assert regions_to_frame([]).empty
