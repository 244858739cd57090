"""Processing stage: parsing, grouping and joining of the participant sources."""

from .labels import group_key, is_base_version, sub_key
from .intervals import parse_intervals
from .grouping import group_regions
from .markup import markup_to_plain_text
from .fixation_report import parse_fixation_report
from .session_log import parse_session_log
from .enrichment import enrich_regions, is_accepted

__all__ = [
    "group_key",
    "is_base_version",
    "sub_key",
    "parse_intervals",
    "group_regions",
    "markup_to_plain_text",
    "parse_fixation_report",
    "parse_session_log",
    "enrich_regions",
    "is_accepted",
]
