"""Shared test fixtures for the Harlowe linter."""

from __future__ import annotations

from pathlib import Path

import pytest

from harlowelint.linter.pipeline import LintPipeline
from harlowelint.models.vocabulary import Vocabulary
from harlowelint.parser.docs import load_vocabulary
from harlowelint.parser.loader import DocumentLoader

FIXTURES_DIR = Path(__file__).parent / "fixtures"
EXAMPLE_STORY = FIXTURES_DIR / "example.twee"
EXAMPLE_WITH_ERRORS = FIXTURES_DIR / "example-with-errors.twee"
STORIES_DIR = FIXTURES_DIR / "stories"

SMALL_VOCABULARY = Vocabulary({"set", "if", "print", "go-to", "link"})


@pytest.fixture
def vocabulary() -> Vocabulary:
    """The five-macro vocabulary used by most unit tests."""
    return SMALL_VOCABULARY


@pytest.fixture(scope="session")
def harlowe_vocabulary() -> Vocabulary:
    """Vocabulary scraped from the bundled Harlowe reference docs."""
    return load_vocabulary()


@pytest.fixture
def pipeline(vocabulary: Vocabulary) -> LintPipeline:
    return LintPipeline(vocabulary)


@pytest.fixture
def loader() -> DocumentLoader:
    return DocumentLoader()


VALID_STORY = """\
:: Start
(set: $name to "Player")
(print: $name)
[[Next->Chapter1]]

:: Chapter1
Chapter content here.
"""

INVALID_STORY = """\
:: Start
(sett: $name to "Player")
(invalidmacro: "test")
"""

SAMPLE_DOCS = """\
# Reference

##### List of macros

###### Basics

*   [(set: ...VariableToValue) → Instant](#macro_set)
*   [(print: Any) → Command](#macro_print)
*   [(go-to: String) → Command](#macro_go-to)
    (goto:)
*   [(link: String, [Changer]) → Changer](#macro_link)
    (link-replace:)

##### Special keywords

*   [(not-a-macro: here)](#ignored)
"""
