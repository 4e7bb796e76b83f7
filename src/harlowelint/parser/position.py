"""Offset to line/column mapping for document and passage text."""

from __future__ import annotations

import re
from bisect import bisect_left

_NEWLINE_RE = re.compile("\n")


class LineIndex:
    """Maps character offsets in *text* to 1-based (line, column) pairs.

    ``start_line``/``start_column`` give the document position of
    ``text[0]``; pass them when *text* is a slice of a larger document
    (e.g. a passage body) so positions stay document-relative. Columns
    count from the preceding newline, so only the first line is shifted
    by ``start_column``.
    """

    def __init__(self, text: str, start_line: int = 1, start_column: int = 1) -> None:
        self._newlines = [m.start() for m in _NEWLINE_RE.finditer(text)]
        self._start_line = start_line
        self._start_column = start_column

    def position(self, index: int) -> tuple[int, int]:
        newlines_before = bisect_left(self._newlines, index)
        if newlines_before == 0:
            return self._start_line, self._start_column + index
        line_start = self._newlines[newlines_before - 1] + 1
        return self._start_line + newlines_before, index - line_start + 1

    def line(self, index: int) -> int:
        return self._start_line + bisect_left(self._newlines, index)
