"""Read the four source files of one participant.

The files are independent, so they are read concurrently on joblib's
threading backend. Any missing file, decode error, malformed markup JSON or
timeout propagates; the batch runner records it as a participant error.
"""
from __future__ import annotations

import logging
import multiprocessing
from pathlib import Path
from typing import Optional

from joblib import Parallel, delayed

from ..config import SourceConfig, SourceLayout
from ..domain.sources import ParticipantSources
from .io import decode_text, parse_markup_mapping, read_bytes

logger = logging.getLogger(__name__)


def load_participant_sources(
    root: str | Path,
    participant_id: str,
    layout: Optional[SourceLayout] = None,
    config: Optional[SourceConfig] = None,
) -> ParticipantSources:
    layout = layout or SourceLayout()
    config = config or SourceConfig()

    paths = layout.resolve(root, participant_id)
    names = list(paths)
    logger.debug("Reading sources for %s from %s", participant_id, root)
    try:
        contents = Parallel(n_jobs=len(names), backend="threading", timeout=config.timeout_s)(
            delayed(read_bytes)(paths[name]) for name in names
        )
    except (TimeoutError, multiprocessing.TimeoutError) as exc:
        # joblib raises these without a message
        raise TimeoutError(f"Reading sources for {participant_id} exceeded {config.timeout_s}s") from exc
    raw = dict(zip(names, contents))

    return ParticipantSources(
        participant_id=participant_id,
        intervals_text=decode_text(raw["intervals"], "utf-8"),
        markup_mapping=parse_markup_mapping(decode_text(raw["markup"], "utf-8")),
        fixation_report_text=decode_text(raw["fixation_report"], config.fixation_report_encoding),
        session_log_text=decode_text(raw["session_log"], "utf-8"),
    )
