"""Aggregate the interest area (IA) report into per-region fixation totals.

The report is a tab-delimited export with one row per interest area and
trial. Columns are located by header name, case-insensitively:

- ``IA_LABEL`` (required)
- ``IA_FIXATION_COUNT`` (required)
- ``IA_DWELL_TIME`` (optional, milliseconds)

A report without the required columns yields an empty mapping: every region
then counts as not viewed with zero dwell time.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Optional

import pandas as pd

from ..config.constants import BYTE_ORDER_MARK, ReportColumns
from ..domain.regions import FixationEntry
from .labels import group_key
from .tabular import non_blank_lines, parse_number, split_fields

logger = logging.getLogger(__name__)


def _column_index(header: List[str], name: str) -> Optional[int]:
    try:
        return header.index(name)
    except ValueError:
        return None


def parse_fixation_report(text: str) -> Dict[str, FixationEntry]:
    """Parse decoded report text into ``{group_key: FixationEntry}``."""
    lines = non_blank_lines(text)
    if len(lines) < 2:
        return {}

    header_line = lines[0]
    if header_line.startswith(BYTE_ORDER_MARK):
        header_line = header_line[len(BYTE_ORDER_MARK):]
    header = [h.lower() for h in split_fields(header_line)]

    label_idx = _column_index(header, ReportColumns.LABEL)
    count_idx = _column_index(header, ReportColumns.FIXATION_COUNT)
    dwell_idx = _column_index(header, ReportColumns.DWELL_TIME)
    if label_idx is None or count_idx is None:
        logger.warning(
            "IA report lacks required columns %s/%s; regions default to unviewed",
            ReportColumns.LABEL,
            ReportColumns.FIXATION_COUNT,
        )
        return {}

    rows = []
    skipped = 0
    for line in lines[1:]:
        parts = split_fields(line)
        if len(parts) <= count_idx or len(parts) <= label_idx:
            skipped += 1
            continue
        fixation_count = parse_number(parts[count_idx])
        if fixation_count is None:
            skipped += 1
            continue
        dwell = None
        if dwell_idx is not None and dwell_idx < len(parts):
            dwell = parse_number(parts[dwell_idx])
        rows.append(
            {
                "group_key": group_key(parts[label_idx]),
                "fixation_count": fixation_count,
                "dwell_time": 0.0 if dwell is None else dwell,
            }
        )

    if skipped:
        logger.debug("Skipped %s malformed IA report rows", skipped)
    if not rows:
        return {}

    df = pd.DataFrame(rows)
    df["viewed"] = df["fixation_count"] > 0
    totals = df.groupby("group_key", sort=False).agg(
        viewed=("viewed", "any"),
        dwell_time=("dwell_time", "sum"),
    )
    return {
        str(row.Index): FixationEntry(viewed=bool(row.viewed), dwell_time=float(row.dwell_time))
        for row in totals.itertuples()
    }
