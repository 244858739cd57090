"""Label normalisation for interest area labels.

Suggestions are annotated as ``autolabel_<n>`` with optional fragment
suffixes: ``autolabel_16a`` and ``autolabel_16b`` are the base versions of
region 16, shown in letter order, while ``autolabel_16b_3`` is an additional
fragment of the same region. Every other label is its own region.
"""
from __future__ import annotations

import re

_GROUP = re.compile(r"^autolabel_(\d+)")
_BASE_VERSION = re.compile(r"^autolabel_\d+([a-z])?$")


def _normalize(label: str) -> str:
    return label.lower().strip()


def group_key(label: str) -> str:
    """Canonical region identity: ``autolabel_<digits>`` or the normalised label."""
    normalized = _normalize(label)
    match = _GROUP.match(normalized)
    return f"autolabel_{match.group(1)}" if match else normalized


def is_base_version(label: str) -> bool:
    return _BASE_VERSION.match(_normalize(label)) is not None


def sub_key(label: str) -> str:
    """Trailing letter of a base version label, ``""`` when there is none."""
    match = _BASE_VERSION.match(_normalize(label))
    if match is None:
        return ""
    return match.group(1) or ""
