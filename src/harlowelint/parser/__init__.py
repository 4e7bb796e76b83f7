"""Twee parsing: passages, macro calls, vocabulary docs and document loading."""

from harlowelint.parser.docs import VocabularyError, extract_macro_names, load_vocabulary
from harlowelint.parser.extractor import extract_macros
from harlowelint.parser.loader import (
    DocumentError,
    DocumentLoader,
    DocumentNotFoundError,
    DocumentReadError,
    DocumentTooLargeError,
    UnsupportedExtensionError,
)
from harlowelint.parser.splitter import split_passages

__all__ = [
    "DocumentError",
    "DocumentLoader",
    "DocumentNotFoundError",
    "DocumentReadError",
    "DocumentTooLargeError",
    "UnsupportedExtensionError",
    "VocabularyError",
    "extract_macro_names",
    "extract_macros",
    "load_vocabulary",
    "split_passages",
]
