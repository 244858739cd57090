"""I/O utilities: decoding, source loading and TSV export."""

from .io import decode_text, sniff_encoding, read_bytes, parse_markup_mapping, write_tsv
from .sources import load_participant_sources

__all__ = [
    "decode_text",
    "sniff_encoding",
    "read_bytes",
    "parse_markup_mapping",
    "write_tsv",
    "load_participant_sources",
]
