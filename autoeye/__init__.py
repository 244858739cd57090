"""
AUTOEYE region report package.

Contains:
- Parsers for interval annotations, IA reports and session logs
- Region grouping and enrichment (dwell time, acceptance)
- Filtering, sorting and statistics over regions
- Batch processing across participants
"""

from .config import BatchConfig, SessionLogConfig, SourceConfig, SourceLayout
from .domain import FixationEntry, ParticipantSources, RawInterval, Region, SessionEvent, SessionLog
from .analysis import RegionFilter, RegionStatistics, SortKey, apply_view, compute_statistics
from .engine import ParticipantReport, ReportEngine
from .batch import BatchResult, run_batch
from .io import decode_text, load_participant_sources

__all__ = [
    "BatchConfig",
    "SessionLogConfig",
    "SourceConfig",
    "SourceLayout",
    "FixationEntry",
    "ParticipantSources",
    "RawInterval",
    "Region",
    "SessionEvent",
    "SessionLog",
    "RegionFilter",
    "RegionStatistics",
    "SortKey",
    "apply_view",
    "compute_statistics",
    "ParticipantReport",
    "ReportEngine",
    "BatchResult",
    "run_batch",
    "decode_text",
    "load_participant_sources",
]
