"""Configuration and constants for the AUTOEYE report pipeline."""

from .config import (
    BatchConfig,
    SessionLogConfig,
    SourceConfig,
    SourceLayout,
)
from .constants import FieldLayout, ReportColumns, SourceMarkers, MARKUP_LINE_BREAK

__all__ = [
    "BatchConfig",
    "SessionLogConfig",
    "SourceConfig",
    "SourceLayout",
    "FieldLayout",
    "ReportColumns",
    "SourceMarkers",
    "MARKUP_LINE_BREAK",
]
