import json
from pathlib import Path
from typing import Callable, Dict, List, Optional

import pytest

from autoeye.domain.sources import ParticipantSources


def ias_row(start: float, end: float, label: str) -> str:
    """One interval annotation row with the label in field 8."""
    return "\t".join([str(start), str(end), "RECTANGLE", "1", "0", "0", "1920", "1080", label])


IAS_ROWS: List[str] = [
    "# IAS exported by autolabel",
    ias_row(-100.0, -500.0, "autolabel_1a"),
    ias_row(150.0, 600.0, "autolabel_1b"),
    "broken\trow",
    ias_row(120.0, 700.0, "autolabel_1b_2"),
    ias_row(1000.0, 2000.0, "question_1"),
    ias_row(2500.0, 3000.0, "autolabel_2"),
]

MARKUP: Dict[str, str] = {
    "autolabel_1a": "<b>def</b> f():",
    "autolabel_1b": "return 1",
    "autolabel_1b_2": "ignored fragment",
    "question_1": "What does &amp; mean?",
    "autolabel_2": "x = 2",
}

IA_REPORT_ROWS: List[str] = [
    "TRIAL_INDEX\tIA_LABEL\tIA_FIXATION_COUNT\tIA_DWELL_TIME",
    "1\tautolabel_1a\t3\t120",
    "1\tautolabel_1b_2\t0\t.",
    "1\tQUESTION_1\t0\t0",
    "1\tautolabel_2\t2\t80",
]

SESSION_LOG_ROWS: List[str] = [
    "1\t5000\tINFO\tApp started",
    "2\t10000\tINFO\tScreen Recording: Starting component Screen Recording",
    "3\t9000\tINFO\tKeyDown [Tab] 9",
    "4\t10650\tINFO\tKeyDown [Tab] 9",
    "short\tline",
    "5\t11500\tINFO\tKeyDown [A] 65",
    "6\t13000\tINFO\tKeyDown [Tab] 9",
]


@pytest.fixture
def ias_text() -> str:
    return "\n".join(IAS_ROWS) + "\n"


@pytest.fixture
def markup_mapping() -> Dict[str, str]:
    return dict(MARKUP)


@pytest.fixture
def ia_report_text() -> str:
    return "\r\n".join(IA_REPORT_ROWS) + "\r\n"


@pytest.fixture
def session_log_text() -> str:
    return "\n".join(SESSION_LOG_ROWS) + "\n"


@pytest.fixture
def participant_sources(ias_text, markup_mapping, ia_report_text, session_log_text) -> ParticipantSources:
    return ParticipantSources(
        participant_id="040301",
        intervals_text=ias_text,
        markup_mapping=markup_mapping,
        fixation_report_text=ia_report_text,
        session_log_text=session_log_text,
    )


@pytest.fixture
def write_participant(tmp_path, ias_text, markup_mapping, ia_report_text, session_log_text) -> Callable[..., Path]:
    """Write the four source files of a participant below ``tmp_path``."""

    def _write(participant_id: str, report_encoding: str = "utf-8", skip: Optional[str] = None) -> Path:
        folder = tmp_path / participant_id
        folder.mkdir(parents=True, exist_ok=True)
        files = {
            "ias": (folder / f"output_{participant_id}.ias", ias_text.encode("utf-8")),
            "markup": (folder / f"html_{participant_id}.json", json.dumps(markup_mapping).encode("utf-8")),
            "report": (
                folder / f"IA_Report_{participant_id}.txt",
                ("\ufeff" + ia_report_text).encode(report_encoding),
            ),
            "log": (folder / f"SessionLog_{participant_id}.log", session_log_text.encode("utf-8")),
        }
        for name, (path, data) in files.items():
            if name != skip:
                path.write_bytes(data)
        return tmp_path

    return _write
