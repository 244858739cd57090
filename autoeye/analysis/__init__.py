"""Analysis: filtering, ordering and statistics over enriched regions."""

from .filtering import (
    RegionFilter,
    SortKey,
    apply_view,
    filter_regions,
    regions_to_frame,
    sort_regions,
)
from .statistics import RegionStatistics, compute_statistics, summarize_participants

__all__ = [
    "RegionFilter",
    "SortKey",
    "apply_view",
    "filter_regions",
    "regions_to_frame",
    "sort_regions",
    "RegionStatistics",
    "compute_statistics",
    "summarize_participants",
]
