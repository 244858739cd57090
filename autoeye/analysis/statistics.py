# autoeye/analysis/statistics.py
"""
Descriptive statistics over a (filtered) region set.

Every ratio and average over an empty set is 0, never NaN, so statistics of
an empty filter result can be rendered directly.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Iterable, Mapping, Sequence

import numpy as np
import pandas as pd

from ..domain.regions import Region


@dataclass(frozen=True)
class RegionStatistics:
    """
    Aggregates of one region set.

    Attributes:
        count: Number of regions
        accepted_count / accepted_pct: Regions with an acceptance key press
        not_accepted_count / not_accepted_pct: The remaining regions
        avg/min/max_duration: Region duration (ms)
        avg/min/max_dwell_time: Summed fixation dwell time (ms)
        avg_duration_accepted / avg_duration_not_accepted: Duration per subset
        avg_dwell_accepted / avg_dwell_not_accepted: Dwell time per subset
    """

    count: int
    accepted_count: int
    accepted_pct: float
    not_accepted_count: int
    not_accepted_pct: float
    avg_duration: float
    min_duration: float
    max_duration: float
    avg_dwell_time: float
    min_dwell_time: float
    max_dwell_time: float
    avg_duration_accepted: float
    avg_duration_not_accepted: float
    avg_dwell_accepted: float
    avg_dwell_not_accepted: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _ratio(part: int, total: int) -> float:
    return part / total * 100.0 if total else 0.0


def _mean(values: np.ndarray) -> float:
    return float(values.mean()) if values.size else 0.0


def _min(values: np.ndarray) -> float:
    return float(values.min()) if values.size else 0.0


def _max(values: np.ndarray) -> float:
    return float(values.max()) if values.size else 0.0


def compute_statistics(regions: Iterable[Region]) -> RegionStatistics:
    regions = list(regions)
    durations = np.array([r.duration for r in regions], dtype=float)
    dwell = np.array([r.dwell_time for r in regions], dtype=float)
    accepted = np.array([r.accepted for r in regions], dtype=bool)

    count = len(regions)
    accepted_count = int(accepted.sum())
    not_accepted_count = count - accepted_count

    return RegionStatistics(
        count=count,
        accepted_count=accepted_count,
        accepted_pct=_ratio(accepted_count, count),
        not_accepted_count=not_accepted_count,
        not_accepted_pct=_ratio(not_accepted_count, count),
        avg_duration=_mean(durations),
        min_duration=_min(durations),
        max_duration=_max(durations),
        avg_dwell_time=_mean(dwell),
        min_dwell_time=_min(dwell),
        max_dwell_time=_max(dwell),
        avg_duration_accepted=_mean(durations[accepted]),
        avg_duration_not_accepted=_mean(durations[~accepted]),
        avg_dwell_accepted=_mean(dwell[accepted]),
        avg_dwell_not_accepted=_mean(dwell[~accepted]),
    )


def summarize_participants(regions_by_participant: Mapping[str, Sequence[Region]]) -> pd.DataFrame:
    """One row of statistics per participant, indexed by participant id."""
    rows = []
    for participant_id, regions in regions_by_participant.items():
        row = {"participant_id": participant_id}
        row.update(compute_statistics(regions).to_dict())
        rows.append(row)
    columns = ["participant_id"] + [f.name for f in fields(RegionStatistics)]
    return pd.DataFrame(rows, columns=columns).set_index("participant_id")
