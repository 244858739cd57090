"""Merge raw intervals into regions (one per group key)."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Sequence

from ..config.constants import MARKUP_LINE_BREAK
from ..domain.regions import RawInterval, Region
from .labels import group_key, is_base_version, sub_key
from .markup import markup_to_plain_text


@dataclass
class _Group:
    key: str
    start: float
    end: float
    order: int
    members: List[RawInterval] = field(default_factory=list)


def _combined_markup(group: _Group, markup_mapping: Mapping[str, str]) -> str:
    base = [iv for iv in group.members if is_base_version(iv.label)]
    if base:
        # sorted() is stable, so equal sub keys keep file order
        base = sorted(base, key=lambda iv: sub_key(iv.label))
        return MARKUP_LINE_BREAK.join(markup_mapping.get(iv.label, "") for iv in base)
    # No base version: first member in file order
    return markup_mapping.get(group.members[0].label, "")


def group_regions(
    intervals: Sequence[RawInterval],
    markup_mapping: Mapping[str, str],
) -> List[Region]:
    """
    Merge intervals sharing a group key.

    Each region spans min(start)..max(end) of its members. Its markup is the
    mapped markup of the base-version members in sub key order, joined by a
    line break; without base versions, the markup of the first member.

    Returns regions sorted by start; equal starts keep first-occurrence order.
    """
    groups: Dict[str, _Group] = {}
    for interval in sorted(intervals, key=lambda iv: iv.order):
        key = group_key(interval.label)
        group = groups.get(key)
        if group is None:
            group = groups[key] = _Group(
                key=key, start=interval.start, end=interval.end, order=interval.order
            )
        else:
            group.start = min(group.start, interval.start)
            group.end = max(group.end, interval.end)
            group.order = min(group.order, interval.order)
        group.members.append(interval)

    regions: List[Region] = []
    for group in groups.values():
        markup = _combined_markup(group, markup_mapping)
        regions.append(
            Region(
                group_key=group.key,
                start=group.start,
                end=group.end,
                order=group.order,
                markup=markup,
                char_count=len(markup_to_plain_text(markup)),
            )
        )

    return sorted(regions, key=lambda r: (r.start, r.order))
