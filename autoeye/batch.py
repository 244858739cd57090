"""Run the report pipeline for many participants.

Participants are independent: each one is loaded and processed on its own,
and a failure (missing file, decode error, timeout, broken markup JSON) is
recorded for that participant only. Overall statistics use the successful
participants.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

import pandas as pd
from joblib import Parallel, delayed

from .analysis.filtering import RegionFilter, filter_regions
from .analysis.statistics import RegionStatistics, compute_statistics, summarize_participants
from .config import BatchConfig
from .domain.regions import Region
from .engine import ParticipantReport, ReportEngine
from .io.sources import load_participant_sources

logger = logging.getLogger(__name__)


@dataclass
class BatchResult:
    """Successful reports and recorded errors, both keyed by participant id."""

    reports: Dict[str, ParticipantReport] = field(default_factory=dict)
    errors: Dict[str, str] = field(default_factory=dict)

    def regions_by_participant(self, region_filter: Optional[RegionFilter] = None) -> Dict[str, List[Region]]:
        return {pid: filter_regions(report.regions, region_filter) for pid, report in self.reports.items()}

    def overall_statistics(self, region_filter: Optional[RegionFilter] = None) -> RegionStatistics:
        combined: List[Region] = []
        for regions in self.regions_by_participant(region_filter).values():
            combined.extend(regions)
        return compute_statistics(combined)

    def summary(self, region_filter: Optional[RegionFilter] = None) -> pd.DataFrame:
        return summarize_participants(self.regions_by_participant(region_filter))


def _run_participant(
    root: Path,
    participant_id: str,
    config: BatchConfig,
    engine: ReportEngine,
) -> Tuple[str, Optional[ParticipantReport], Optional[str]]:
    try:
        sources = load_participant_sources(root, participant_id, config.layout, config.source)
        return participant_id, engine.build(sources), None
    except Exception as exc:
        logger.warning("Participant %s failed: %s", participant_id, exc)
        return participant_id, None, f"{type(exc).__name__}: {exc}"


def run_batch(
    root: str | Path,
    participant_ids: Iterable[str],
    config: Optional[BatchConfig] = None,
    engine: Optional[ReportEngine] = None,
) -> BatchResult:
    config = config or BatchConfig()
    engine = engine or ReportEngine(config.session_log)
    root = Path(root)
    # dict.fromkeys keeps the first occurrence order
    ids = list(dict.fromkeys(participant_ids))

    outcomes = Parallel(n_jobs=config.n_jobs, backend="threading")(
        delayed(_run_participant)(root, pid, config, engine) for pid in ids
    )

    result = BatchResult()
    for participant_id, report, error in outcomes:
        if report is not None:
            result.reports[participant_id] = report
        else:
            result.errors[participant_id] = error or "unknown error"
    logger.info("Batch finished: %s succeeded, %s failed", len(result.reports), len(result.errors))
    return result
