"""Split Twee source into passages."""

from __future__ import annotations

import re

from harlowelint.models.passage import Passage
from harlowelint.parser.position import LineIndex

# ":: Name [tag1 tag2] {metadata}" -- the name stops at the first "[" or "{",
# and anything after the tag list is ignored.
_HEADER_RE = re.compile(
    r"^::[ \t]*(?P<name>[^\[{\n]*)"
    r"(?:\[(?P<tags>[^\]\n]*)\])?"
    r"[^\n]*$",
    re.MULTILINE,
)


def split_passages(text: str) -> list[Passage]:
    """Segment *text* into passages, in document order.

    Each ``::`` header line opens a passage whose content runs up to the
    next header (or end of text), trimmed. Text before the first header
    belongs to no passage; a document with no headers yields ``[]``. A
    leading byte-order mark is dropped.
    """
    text = text.removeprefix("\ufeff")
    headers = list(_HEADER_RE.finditer(text))
    if not headers:
        return []

    index = LineIndex(text)
    passages: list[Passage] = []
    for i, match in enumerate(headers):
        body_start = min(match.end() + 1, len(text))
        body_end = headers[i + 1].start() if i + 1 < len(headers) else len(text)
        body = text[body_start:body_end]
        content = body.strip()
        content_start = body_start + (len(body) - len(body.lstrip()))
        content_line, content_column = index.position(content_start)

        tags = match.group("tags")
        passages.append(
            Passage(
                name=match.group("name").strip(),
                tags=frozenset(tags.split()) if tags else frozenset(),
                content=content,
                start_line=index.line(match.start()),
                content_line=content_line,
                content_column=content_column,
            )
        )
    return passages
