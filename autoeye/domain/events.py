"""Keyboard events extracted from the session log."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class SessionEvent:
    """Acceptance key press, timed relative to the screen recording start."""

    timestamp: float
    relative: float
    message: str


@dataclass(frozen=True)
class SessionLog:
    """Anchor offset and acceptance events of one session log.

    ``anchor_offset`` is None when the log never starts a screen recording;
    no events are extracted in that case.
    """

    anchor_offset: Optional[float]
    events: Tuple[SessionEvent, ...] = ()

    @property
    def has_anchor(self) -> bool:
        return self.anchor_offset is not None
