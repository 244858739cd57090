"""Domain records for regions, fixation totals, session events and sources."""

from .regions import RawInterval, Region, FixationEntry
from .events import SessionEvent, SessionLog
from .sources import ParticipantSources

__all__ = [
    "RawInterval",
    "Region",
    "FixationEntry",
    "SessionEvent",
    "SessionLog",
    "ParticipantSources",
]
