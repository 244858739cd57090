"""Join regions with fixation totals and acceptance events."""
from __future__ import annotations

from dataclasses import replace
from typing import List, Mapping, Sequence

import numpy as np

from ..domain.events import SessionLog
from ..domain.regions import FixationEntry, Region

_UNVIEWED = FixationEntry()


def _sorted_relative_times(session_log: SessionLog) -> np.ndarray:
    return np.sort(np.fromiter((e.relative for e in session_log.events), dtype=float))


def is_accepted(region: Region, relative_times: np.ndarray) -> bool:
    """True if any sorted relative time lies in ``[start, end]`` (both inclusive)."""
    idx = int(np.searchsorted(relative_times, region.start, side="left"))
    return bool(idx < len(relative_times) and relative_times[idx] <= region.end)


def enrich_regions(
    regions: Sequence[Region],
    fixations: Mapping[str, FixationEntry],
    session_log: SessionLog,
) -> List[Region]:
    """Return new regions carrying viewed, dwell time and acceptance."""
    relative_times = _sorted_relative_times(session_log)
    enriched: List[Region] = []
    for region in regions:
        entry = fixations.get(region.group_key, _UNVIEWED)
        enriched.append(
            replace(
                region,
                viewed=entry.viewed,
                dwell_time=entry.dwell_time,
                accepted=is_accepted(region, relative_times),
            )
        )
    return enriched
