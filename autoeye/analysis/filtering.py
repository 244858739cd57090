# autoeye/analysis/filtering.py
"""
Filtering and ordering of enriched regions.

Filters are independent toggles combined with AND; exactly one sort key is
active at a time. Both operate on the immutable region list produced once
per participant, so they are cheap to re-run for every view change.

Example:
    >>> view = apply_view(
    ...     report.regions,
    ...     RegionFilter(accepted_only=True, min_duration=500.0),
    ...     SortKey.DWELL_TIME,
    ... )
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional

import pandas as pd

from ..domain.regions import Region


class SortKey(Enum):
    """Available region orderings."""

    TIME = "time"  # start ascending
    DURATION = "duration"  # longest first
    DWELL_TIME = "dwelltime"  # longest dwell first
    CHAR_COUNT = "chars"  # longest content first

    @classmethod
    def parse(cls, value: "str | SortKey") -> "SortKey":
        if isinstance(value, SortKey):
            return value
        try:
            return cls(value.strip().lower())
        except ValueError:
            choices = ", ".join(k.value for k in cls)
            raise ValueError(f"Unknown sort key: {value!r} (expected one of {choices})") from None


@dataclass(frozen=True)
class RegionFilter:
    """Region predicates; a disabled predicate lets every region pass."""

    accepted_only: bool = False
    dwell_positive: bool = False
    min_duration: Optional[float] = None
    min_dwell_time: Optional[float] = None

    def matches(self, region: Region) -> bool:
        if self.accepted_only and not region.accepted:
            return False
        if self.dwell_positive and region.dwell_time <= 0:
            return False
        if self.min_duration is not None and region.duration < self.min_duration:
            return False
        if self.min_dwell_time is not None and region.dwell_time < self.min_dwell_time:
            return False
        return True


def filter_regions(regions: Iterable[Region], region_filter: RegionFilter | None = None) -> List[Region]:
    region_filter = region_filter or RegionFilter()
    return [r for r in regions if region_filter.matches(r)]


def sort_regions(regions: Iterable[Region], sort_key: "SortKey | str" = SortKey.TIME) -> List[Region]:
    """Sort regions; ties keep timeline order."""
    key = SortKey.parse(sort_key)
    timeline = sorted(regions, key=lambda r: (r.start, r.order))
    if key is SortKey.TIME:
        return timeline
    if key is SortKey.DURATION:
        return sorted(timeline, key=lambda r: r.duration, reverse=True)
    if key is SortKey.DWELL_TIME:
        return sorted(timeline, key=lambda r: r.dwell_time, reverse=True)
    return sorted(timeline, key=lambda r: r.char_count, reverse=True)


def apply_view(
    regions: Iterable[Region],
    region_filter: RegionFilter | None = None,
    sort_key: "SortKey | str" = SortKey.TIME,
) -> List[Region]:
    """Filter, then sort."""
    return sort_regions(filter_regions(regions, region_filter), sort_key)


REGION_COLUMNS = [
    "group_key",
    "start",
    "end",
    "duration",
    "dwell_time",
    "viewed",
    "accepted",
    "char_count",
    "markup",
]


def regions_to_frame(regions: Iterable[Region]) -> pd.DataFrame:
    """Tabular view of regions, one row per region in the given order."""
    rows = [
        {
            "group_key": r.group_key,
            "start": r.start,
            "end": r.end,
            "duration": r.duration,
            "dwell_time": r.dwell_time,
            "viewed": r.viewed,
            "accepted": r.accepted,
            "char_count": r.char_count,
            "markup": r.markup,
        }
        for r in regions
    ]
    return pd.DataFrame(rows, columns=REGION_COLUMNS)
