# autoeye/config/config.py
"""
Configuration classes for the AUTOEYE report pipeline.

This module defines the parameters for:
  - locating the four per-participant source files
  - decoding the fixation/dwell report
  - session log markers (recording anchor, acceptance key)
  - batch execution across participants

Example:
    >>> from autoeye.config import BatchConfig, SourceConfig
    >>>
    >>> cfg = BatchConfig(
    ...     n_jobs=8,
    ...     source=SourceConfig(fixation_report_encoding="utf-16-le"),
    ... )
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from .constants import SourceMarkers

Encoding = Literal["utf-8", "utf-16-le", "auto"]

SUPPORTED_ENCODINGS = ("utf-8", "utf-16-le", "auto")


@dataclass(frozen=True)
class SourceLayout:
    """File name templates relative to the data root; ``{pid}`` is the participant id."""

    intervals: str = "{pid}/output_{pid}.ias"
    markup: str = "{pid}/html_{pid}.json"
    fixation_report: str = "{pid}/IA_Report_{pid}.txt"
    session_log: str = "{pid}/SessionLog_{pid}.log"

    def resolve(self, root: str | Path, participant_id: str) -> dict[str, Path]:
        root = Path(root)
        return {
            "intervals": root / self.intervals.format(pid=participant_id),
            "markup": root / self.markup.format(pid=participant_id),
            "fixation_report": root / self.fixation_report.format(pid=participant_id),
            "session_log": root / self.session_log.format(pid=participant_id),
        }


@dataclass(frozen=True)
class SourceConfig:
    """
    How the raw sources are read.
    """

    # Two report encodings exist in the wild:
    # - "utf-8":     newer exports
    # - "utf-16-le": older EyeLink Data Viewer exports
    # - "auto":      decide by byte-order mark, UTF-8 otherwise
    fixation_report_encoding: Encoding = "utf-8"

    # Per-source read timeout in seconds; a timeout fails the participant
    timeout_s: float = 30.0

    def __post_init__(self) -> None:
        if self.fixation_report_encoding not in SUPPORTED_ENCODINGS:
            raise ValueError(
                f"Unknown fixation report encoding: {self.fixation_report_encoding}"
            )
        if self.timeout_s <= 0:
            raise ValueError("timeout_s must be > 0")


@dataclass(frozen=True)
class SessionLogConfig:
    """Message fragments that drive session event extraction."""

    anchor_marker: str = SourceMarkers.SCREEN_RECORDING_START
    accept_marker: str = SourceMarkers.ACCEPT_KEYDOWN


@dataclass(frozen=True)
class BatchConfig:
    """Configuration for processing many participants."""

    # Number of participants processed in parallel (joblib n_jobs)
    n_jobs: int = 4

    layout: SourceLayout = field(default_factory=SourceLayout)
    source: SourceConfig = field(default_factory=SourceConfig)
    session_log: SessionLogConfig = field(default_factory=SessionLogConfig)

    def __post_init__(self) -> None:
        if self.n_jobs == 0:
            raise ValueError("n_jobs must be != 0 (use -1 for all cores)")
