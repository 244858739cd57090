"""Line and field helpers shared by the tab-delimited source parsers."""
from __future__ import annotations

import math
import re
from typing import List, Optional

_LINE_BREAK = re.compile(r"\r?\n")

# Leading decimal number, the way the export tools read numeric cells
_LEADING_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def non_blank_lines(text: str) -> List[str]:
    """Split on LF or CRLF and drop lines that are empty after trimming."""
    return [line for line in _LINE_BREAK.split(text) if line.strip()]


def split_fields(line: str, strip: bool = True) -> List[str]:
    parts = line.split("\t")
    if strip:
        return [p.strip() for p in parts]
    return parts


def parse_number(value: object) -> Optional[float]:
    """Parse the leading number of a cell.

    ``"12.5"`` and ``"12.5 ms"`` give 12.5; text without a leading number,
    empty cells and ``None`` give None. Trailing garbage is ignored.
    """
    if value is None:
        return None
    if isinstance(value, (int, float)):
        number = float(value)
        return None if math.isnan(number) else number
    match = _LEADING_NUMBER.match(str(value))
    if match is None:
        return None
    return float(match.group(1))
