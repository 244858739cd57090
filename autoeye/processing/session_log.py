"""Extract acceptance key presses from the session log.

Log lines are tab-delimited; field 1 is the absolute timestamp (ms) and
field 3 the free-text message. The first line announcing the screen
recording start anchors the clock: acceptance events are reported relative
to it, in the same time base as the interval annotations.

Lines whose timestamp is not numeric are malformed and skipped before the
anchor search, so an anchor line without a usable timestamp is passed over
and the first anchor line with one is used instead.
"""
from __future__ import annotations

import logging
from typing import Iterator, List, Tuple

from ..config.constants import FieldLayout, SourceMarkers
from ..domain.events import SessionEvent, SessionLog
from .tabular import non_blank_lines, parse_number, split_fields

logger = logging.getLogger(__name__)


def _log_entries(lines: List[str]) -> Iterator[Tuple[float, str]]:
    for line in lines:
        parts = split_fields(line)
        if len(parts) < FieldLayout.LOG_MIN_FIELDS:
            continue
        timestamp = parse_number(parts[FieldLayout.LOG_TIMESTAMP_FIELD])
        if timestamp is None:
            continue
        yield timestamp, parts[FieldLayout.LOG_MESSAGE_FIELD]


def parse_session_log(
    text: str,
    anchor_marker: str = SourceMarkers.SCREEN_RECORDING_START,
    accept_marker: str = SourceMarkers.ACCEPT_KEYDOWN,
) -> SessionLog:
    """Find the recording anchor and collect acceptance events after it."""
    lines = non_blank_lines(text)

    anchor = None
    for timestamp, message in _log_entries(lines):
        if anchor_marker in message:
            anchor = timestamp
            break

    if anchor is None:
        logger.info("Session log has no screen recording anchor; no acceptance events")
        return SessionLog(anchor_offset=None)

    events = [
        SessionEvent(timestamp=timestamp, relative=timestamp - anchor, message=message)
        for timestamp, message in _log_entries(lines)
        if timestamp >= anchor and accept_marker in message
    ]
    logger.debug("Anchor at %s, %s acceptance events", anchor, len(events))
    return SessionLog(anchor_offset=anchor, events=tuple(events))
