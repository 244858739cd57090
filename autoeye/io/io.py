# autoeye/io/io.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Dict

import pandas as pd

from ..config.config import SUPPORTED_ENCODINGS
from ..config.constants import BYTE_ORDER_MARK

_UTF16_LE_BOM = b"\xff\xfe"
_SNIFF_BYTES = 64


def sniff_encoding(raw: bytes) -> str:
    """Pick the report encoding from the byte-order mark.

    Without a mark, ASCII text stored as UTF-16 LE still shows up as NUL in
    every odd byte of the leading sample; anything else is read as UTF-8.
    """
    if raw.startswith(_UTF16_LE_BOM):
        return "utf-16-le"
    sample = raw[:_SNIFF_BYTES]
    if len(sample) >= 2 and not any(sample[1::2]) and 0 not in sample[0::2]:
        return "utf-16-le"
    return "utf-8"


def decode_text(raw: bytes, encoding: str = "utf-8") -> str:
    """
    Decode source bytes and strip a leading byte-order mark.

    - "utf-8" / "utf-16-le": fixed encoding
    - "auto": chosen by sniff_encoding
    """
    if encoding not in SUPPORTED_ENCODINGS:
        raise ValueError(f"Unknown encoding: {encoding}")
    if encoding == "auto":
        encoding = sniff_encoding(raw)
    text = raw.decode(encoding)
    if text.startswith(BYTE_ORDER_MARK):
        text = text[len(BYTE_ORDER_MARK):]
    return text


def read_bytes(path: str | Path) -> bytes:
    return Path(path).read_bytes()


def parse_markup_mapping(text: str) -> Dict[str, str]:
    """Parse the label -> markup JSON object."""
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(f"Markup mapping must be a JSON object, got {type(data).__name__}")
    return {str(label): "" if markup is None else str(markup) for label, markup in data.items()}


def write_tsv(df: pd.DataFrame, path: str | Path) -> None:
    """Write a DataFrame as TSV without the index."""
    df.to_csv(path, sep="\t", index=False)
