"""Passage and macro token types produced by the Twee parser."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Passage(BaseModel):
    """A named section of a Twee document.

    ``start_line`` is the line of the ``::`` header. ``content_line`` and
    ``content_column`` locate the first character of the trimmed ``content``
    in the whole document, so offsets inside ``content`` can be mapped back
    to document positions.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    tags: frozenset[str] = frozenset()
    content: str = ""
    start_line: int = Field(ge=1)
    content_line: int = Field(ge=1)
    content_column: int = Field(default=1, ge=1)


class MacroToken(BaseModel):
    """One ``(name:`` macro call found in a passage."""

    model_config = ConfigDict(frozen=True)

    name: str
    line: int = Field(ge=1)
    column: int = Field(ge=1)
    offset: int = Field(ge=0)  # index of the opening paren within passage content
