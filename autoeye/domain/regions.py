"""Records describing interaction regions shown to a participant.

A region is one code suggestion or question segment. The interval parser
yields one :class:`RawInterval` per IAS row; the grouper merges intervals
sharing a group key into a :class:`Region`, which the enricher re-creates
with fixation and acceptance data. All records are immutable.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RawInterval:
    """One valid row of the interval annotation source."""

    start: float
    end: float
    label: str
    order: int

    @property
    def duration(self) -> float:
        return self.end - self.start


@dataclass(frozen=True)
class FixationEntry:
    """Fixation totals of all report rows sharing a group key."""

    viewed: bool = False
    dwell_time: float = 0.0


@dataclass(frozen=True)
class Region:
    """Logical interaction unit with its time span, content and engagement."""

    group_key: str
    start: float
    end: float
    order: int
    markup: str
    char_count: int
    viewed: bool = False
    dwell_time: float = 0.0
    accepted: bool = False

    @property
    def duration(self) -> float:
        return self.end - self.start
