"""Per-participant report pipeline."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from threading import Lock
from typing import Dict, List, Mapping, Optional, Tuple

import pandas as pd

from .analysis.filtering import RegionFilter, SortKey, apply_view, filter_regions, regions_to_frame
from .analysis.statistics import RegionStatistics, compute_statistics
from .config import SessionLogConfig
from .domain.events import SessionLog
from .domain.regions import FixationEntry, Region
from .domain.sources import ParticipantSources
from .processing import (
    enrich_regions,
    group_regions,
    parse_fixation_report,
    parse_intervals,
    parse_session_log,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParticipantReport:
    """Enriched regions of one participant plus the parsed inputs they came from.

    Views and statistics are derived on demand from the immutable region
    tuple; nothing is re-parsed.
    """

    participant_id: str
    regions: Tuple[Region, ...]
    fixations: Mapping[str, FixationEntry]
    session_log: SessionLog
    created_at: datetime

    def view(
        self,
        region_filter: Optional[RegionFilter] = None,
        sort_key: "SortKey | str" = SortKey.TIME,
    ) -> List[Region]:
        return apply_view(self.regions, region_filter, sort_key)

    def statistics(self, region_filter: Optional[RegionFilter] = None) -> RegionStatistics:
        return compute_statistics(filter_regions(self.regions, region_filter))

    def to_frame(
        self,
        region_filter: Optional[RegionFilter] = None,
        sort_key: "SortKey | str" = SortKey.TIME,
    ) -> pd.DataFrame:
        return regions_to_frame(self.view(region_filter, sort_key))


class ReportEngine:
    """Runs parse, group and enrich for a participant.

    The latest report of each participant is memoised together with the digest
    of the sources it was built from; changed sources replace the entry.
    """

    def __init__(self, session_log_config: Optional[SessionLogConfig] = None) -> None:
        self.session_log_config = session_log_config or SessionLogConfig()
        self._cache: Dict[str, Tuple[str, ParticipantReport]] = {}
        self._lock = Lock()

    def build(self, sources: ParticipantSources) -> ParticipantReport:
        digest = sources.digest()
        with self._lock:
            cached = self._cache.get(sources.participant_id)
        if cached is not None and cached[0] == digest:
            logger.debug("Using cached report for %s", sources.participant_id)
            return cached[1]

        report = self._run(sources)
        with self._lock:
            self._cache[sources.participant_id] = (digest, report)
        return report

    def clear_cache(self) -> None:
        with self._lock:
            self._cache.clear()

    def _run(self, sources: ParticipantSources) -> ParticipantReport:
        intervals = parse_intervals(sources.intervals_text)
        regions = group_regions(intervals, sources.markup_mapping)
        fixations = parse_fixation_report(sources.fixation_report_text)
        session_log = parse_session_log(
            sources.session_log_text,
            anchor_marker=self.session_log_config.anchor_marker,
            accept_marker=self.session_log_config.accept_marker,
        )
        enriched = enrich_regions(regions, fixations, session_log)
        logger.info(
            "Participant %s: %s intervals -> %s regions, %s acceptance events",
            sources.participant_id,
            len(intervals),
            len(enriched),
            len(session_log.events),
        )
        return ParticipantReport(
            participant_id=sources.participant_id,
            regions=tuple(enriched),
            fixations=dict(fixations),
            session_log=session_log,
            created_at=datetime.now(timezone.utc),
        )
