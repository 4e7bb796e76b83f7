"""Document loading and Twee file discovery."""

from __future__ import annotations

from pathlib import Path

TWEE_EXTENSIONS = (".twee", ".tw")

_MAX_DOCUMENT_SIZE = 5_000_000  # 5M characters


class DocumentError(Exception):
    """Base class for failures reading a single document.

    These are fatal to that document only; a batch run records them and
    moves on.
    """

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(message)


class DocumentNotFoundError(DocumentError):
    """Raised when a document path does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(path, f"File or directory not found: {path}")


class DocumentReadError(DocumentError):
    """Raised when a document exists but cannot be read or decoded."""


class DocumentTooLargeError(DocumentError):
    """Raised when a document exceeds the configured size limit."""


class UnsupportedExtensionError(DocumentError):
    """Raised when a single named file is not a Twee file."""

    def __init__(self, path: Path) -> None:
        super().__init__(
            path, f"File must have {' or '.join(TWEE_EXTENSIONS)} extension: {path}"
        )


def is_twee_file(path: Path) -> bool:
    return path.suffix.lower() in TWEE_EXTENSIONS


class DocumentLoader:
    """Reads Twee documents from disk."""

    def __init__(self, max_document_size: int = _MAX_DOCUMENT_SIZE) -> None:
        self._max_document_size = max_document_size

    def load(self, path: Path) -> str:
        """Read a document as UTF-8 text."""
        if not path.exists():
            raise DocumentNotFoundError(path)
        try:
            with path.open("r", encoding="utf-8-sig") as handle:
                content = handle.read()
        except UnicodeDecodeError as exc:
            raise DocumentReadError(path, f"Cannot decode {path} as UTF-8: {exc}") from exc
        except OSError as exc:
            raise DocumentReadError(path, f"Cannot read {path}: {exc.strerror or exc}") from exc
        if len(content) > self._max_document_size:
            raise DocumentTooLargeError(
                path,
                f"Document {path} exceeds maximum size "
                f"({len(content):,} chars > {self._max_document_size:,} limit)",
            )
        return content

    @staticmethod
    def discover(root: Path) -> list[Path]:
        """Return every Twee file under *root*, recursively, in sorted order."""
        if not root.exists():
            raise DocumentNotFoundError(root)
        return sorted(p for p in root.rglob("*") if p.is_file() and is_twee_file(p))
