"""Parse interval annotation (IAS) files into raw labelled intervals."""
from __future__ import annotations

import logging
from typing import List

from ..config.constants import FieldLayout
from ..domain.regions import RawInterval
from .tabular import non_blank_lines, parse_number

logger = logging.getLogger(__name__)


def parse_intervals(text: str) -> List[RawInterval]:
    """
    Parse IAS text into intervals in file order.

    - a leading ``#`` line is a header and dropped
    - rows with fewer than 9 tab-delimited fields are skipped
    - fields 0/1 are start/end; the sign is discarded
    - field 8 (trimmed) is the label

    ``order`` counts valid rows only, so it stays dense after skipping.
    """
    lines = non_blank_lines(text)
    if lines and lines[0].startswith(FieldLayout.IAS_COMMENT_PREFIX):
        lines = lines[1:]

    intervals: List[RawInterval] = []
    skipped = 0
    for line in lines:
        parts = line.split("\t")
        if len(parts) < FieldLayout.IAS_MIN_FIELDS:
            skipped += 1
            continue
        start = parse_number(parts[FieldLayout.IAS_START_FIELD])
        end = parse_number(parts[FieldLayout.IAS_END_FIELD])
        if start is None or end is None:
            skipped += 1
            continue
        intervals.append(
            RawInterval(
                start=abs(start),
                end=abs(end),
                label=parts[FieldLayout.IAS_LABEL_FIELD].strip(),
                order=len(intervals),
            )
        )

    if skipped:
        logger.debug("Skipped %s malformed interval rows", skipped)
    return intervals
