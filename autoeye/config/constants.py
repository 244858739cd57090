# autoeye/config/constants.py
"""Marker strings, column names and field layout of the four source files."""

from __future__ import annotations


class SourceMarkers:
    """Message fragments searched for in the session log."""

    # First log line containing this starts the screen recording clock
    SCREEN_RECORDING_START: str = "Screen Recording: Starting component Screen Recording"

    # Tab key press accepting a suggestion
    ACCEPT_KEYDOWN: str = "KeyDown [Tab] 9"


class FieldLayout:
    """Positional fields of the tab-delimited sources."""

    # Interval annotations (IAS)
    IAS_MIN_FIELDS: int = 9
    IAS_START_FIELD: int = 0
    IAS_END_FIELD: int = 1
    IAS_LABEL_FIELD: int = 8
    IAS_COMMENT_PREFIX: str = "#"

    # Session log
    LOG_MIN_FIELDS: int = 4
    LOG_TIMESTAMP_FIELD: int = 1
    LOG_MESSAGE_FIELD: int = 3


class ReportColumns:
    """Header names of the fixation/dwell (IA) report, lowercased."""

    LABEL: str = "ia_label"
    FIXATION_COUNT: str = "ia_fixation_count"
    DWELL_TIME: str = "ia_dwell_time"


# Joins markup fragments of base-version labels
MARKUP_LINE_BREAK: str = "<br />"

BYTE_ORDER_MARK: str = "\ufeff"
