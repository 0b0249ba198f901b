"""Stamp every opening tag with the source line it starts on.

The rewrite is lexical: anything that looks like ``<name`` gets a
``__loc__="<file>:<line>"`` attribute inserted right after the tag-name token.
Quoting is not understood: a ``<`` followed by a word character inside an
attribute value is stamped too, which can garble that value. Line numbers are
never shifted because no line breaks are ever added or removed.
"""

from __future__ import annotations

import html
import re
from typing import Iterable, Iterator, List

LOCATION_ATTRIBUTE = "__loc__"

TAG_START_PATTERN = re.compile(r"(<[\w\s].*?)(\s|>|/>|$)")


class LocationAnnotator:
    """Rewrite one file's text, chunk by chunk, keeping a running line counter.

    Only complete lines are rewritten; the unterminated tail of a chunk is held
    back until the next chunk (or :meth:`flush`) completes it, so a tag split
    across chunks is still stamped with the line it began on.
    """

    def __init__(self, filename: str, start_line: int = 1) -> None:
        self.filename = filename
        self.line_number = start_line
        self._pending: List[str] = []
        self._marker_path = html.escape(filename, quote=True)

    def feed(self, chunk: str) -> str:
        """Annotate every line completed by ``chunk`` and return the rewritten text."""

        cut = chunk.rfind("\n") + 1
        if not cut:
            if chunk:
                self._pending.append(chunk)
            return ""
        self._pending.append(chunk[:cut])
        text = "".join(self._pending)
        self._pending = [chunk[cut:]] if cut < len(chunk) else []
        return self._annotate_lines(text)

    def flush(self) -> str:
        """Annotate whatever is left after the final chunk."""

        text = "".join(self._pending)
        self._pending = []
        if not text:
            return ""
        return self._annotate_lines(text)

    def _annotate_lines(self, text: str) -> str:
        lines = text.split("\n")
        rewritten = [self._annotate_line(line, self.line_number + offset) for offset, line in enumerate(lines)]
        self.line_number += len(lines) - 1
        return "\n".join(rewritten)

    def _annotate_line(self, line: str, line_number: int) -> str:
        if "<" not in line:
            return line
        marker = f' {LOCATION_ATTRIBUTE}="{self._marker_path}:{line_number}" '
        return TAG_START_PATTERN.sub(lambda match: match.group(1) + marker + match.group(2), line)


def annotate_chunks(chunks: Iterable[str], filename: str) -> Iterator[str]:
    """Annotate an already-split stream of text chunks belonging to ``filename``."""

    annotator = LocationAnnotator(filename)
    for chunk in chunks:
        annotated = annotator.feed(chunk)
        if annotated:
            yield annotated
    tail = annotator.flush()
    if tail:
        yield tail


def annotate_text(text: str, filename: str) -> str:
    return "".join(annotate_chunks([text], filename))
