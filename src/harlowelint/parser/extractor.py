"""Macro call tokenization within passage content."""

from __future__ import annotations

import re

from harlowelint.models.passage import MacroToken
from harlowelint.parser.position import LineIndex

# "(name:" -- argument bodies are not parsed, so a string literal that
# happens to contain this shape is also reported.
MACRO_CALL_RE = re.compile(r"\((?P<name>[A-Za-z0-9-]+)\s*:")


def extract_macros(content: str, start_line: int = 1, start_column: int = 1) -> list[MacroToken]:
    """Return the macro calls in *content*, left to right.

    ``start_line``/``start_column`` locate ``content[0]`` in the document.
    """
    index = LineIndex(content, start_line, start_column)
    tokens: list[MacroToken] = []
    for match in MACRO_CALL_RE.finditer(content):
        line, column = index.position(match.start())
        tokens.append(
            MacroToken(name=match.group("name"), line=line, column=column, offset=match.start())
        )
    return tokens
