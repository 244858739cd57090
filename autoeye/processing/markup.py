"""Plain-text rendering of suggestion markup."""
from __future__ import annotations

from html.parser import HTMLParser
from typing import List


class _TextCollector(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.chunks: List[str] = []

    def handle_data(self, data: str) -> None:
        self.chunks.append(data)


def markup_to_plain_text(markup: str) -> str:
    """Strip tags and decode entities, like a browser's ``textContent``.

    No whitespace is inserted for block or ``<br />`` elements.
    """
    if not markup:
        return ""
    collector = _TextCollector()
    collector.feed(markup)
    collector.close()
    return "".join(collector.chunks)
