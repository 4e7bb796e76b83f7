"""Scrape the recognized macro names out of the Harlowe reference docs."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from harlowelint.models.vocabulary import Vocabulary

logger = logging.getLogger("harlowelint.docs")

BUNDLED_DOCS = Path(__file__).resolve().parent.parent / "data" / "harlowe_docs.md"

_SECTION_START = "##### List of macros"
_SECTION_END = "##### Special keywords"

# *   [(macro-name: params)](#macro_macro-name) Type
_MACRO_ENTRY_RE = re.compile(r"\*\s+\[\(([a-z0-9-]+):", re.IGNORECASE)
# Aliases are listed as plain text on their own indented lines: "    (alias:)"
_ALIAS_RE = re.compile(r"^\s+\(([a-z0-9-]+):\)", re.IGNORECASE | re.MULTILINE)


class VocabularyError(Exception):
    """Raised when the macro vocabulary cannot be loaded.

    Without a vocabulary no document can be validated, so this is fatal
    to a whole lint run rather than to a single document.
    """


def extract_macro_names(markdown: str) -> Vocabulary:
    """Collect macro names and aliases from the "List of macros" section.

    Raises ``VocabularyError`` if the section markers are missing. A
    section with no entries gives an empty vocabulary.
    """
    start = markdown.find(_SECTION_START)
    end = markdown.find(_SECTION_END)
    if start == -1 or end == -1 or end < start:
        raise VocabularyError("Could not find macro list section in documentation")

    section = markdown[start:end]
    names = {m.group(1) for m in _MACRO_ENTRY_RE.finditer(section)}
    names.update(m.group(1) for m in _ALIAS_RE.finditer(section))
    return Vocabulary(names)


def load_vocabulary(path: Path | None = None) -> Vocabulary:
    """Load the vocabulary from a docs file (the bundled reference by default)."""
    doc_path = path if path is not None else BUNDLED_DOCS
    try:
        markdown = doc_path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise VocabularyError(f"Cannot read macro documentation '{doc_path}': {exc}") from exc
    vocabulary = extract_macro_names(markdown)
    logger.info("Loaded %d macro names from %s", len(vocabulary), doc_path)
    return vocabulary
