"""Decoded contents of one participant's four source files."""
from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True)
class ParticipantSources:
    """Everything the pipeline reads for one participant, already decoded."""

    participant_id: str
    intervals_text: str
    markup_mapping: Dict[str, str] = field(default_factory=dict)
    fixation_report_text: str = ""
    session_log_text: str = ""

    def digest(self) -> str:
        """Content hash identifying this version of the sources."""
        h = hashlib.sha1()
        for part in (
            self.intervals_text,
            json.dumps(self.markup_mapping, sort_keys=True),
            self.fixation_report_text,
            self.session_log_text,
        ):
            h.update(part.encode("utf-8"))
            h.update(b"\x00")
        return h.hexdigest()
