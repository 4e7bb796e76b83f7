"""Command-line interface: ``harlowe-lint <file.twee | directory>``."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from harlowelint import __version__
from harlowelint.linter.format import format_report
from harlowelint.parser.docs import VocabularyError, load_vocabulary
from harlowelint.parser.loader import DocumentLoader, UnsupportedExtensionError, is_twee_file
from harlowelint.service.lint_service import LintService
from harlowelint.settings import Settings

logger = logging.getLogger("harlowelint.cli")

EXIT_OK = 0
EXIT_LINT_ERRORS = 1
EXIT_BAD_VOCABULARY = 2

_EPILOG = """\
examples:
  harlowe-lint story.twee
  harlowe-lint ./stories
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="harlowe-lint",
        description="Harlowe Linter - Validate Harlowe code in Twee files",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("path", nargs="?", help="Twee file (.twee/.tw) or directory to lint")
    parser.add_argument(
        "-v", "--version", action="version", version=f"Harlowe Linter v{__version__}"
    )
    parser.add_argument(
        "--vocabulary",
        type=Path,
        help="Harlowe reference docs (markdown) to read macro names from",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Report output format (json: one report object per line)",
    )
    parser.add_argument("--jobs", type=int, help="Number of documents linted in parallel")
    return parser


def _collect_files(target: Path, loader: DocumentLoader) -> list[Path]:
    if target.is_dir():
        return loader.discover(target)
    if not is_twee_file(target):
        raise UnsupportedExtensionError(target)
    return [target]


def main(argv: list[str] | None = None) -> int:
    """Run the linter; returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.path is None:
        parser.print_help()
        return EXIT_OK

    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())

    target = Path(args.path)
    if not target.exists():
        print(f"Error: File or directory not found: {target}", file=sys.stderr)
        return EXIT_LINT_ERRORS

    loader = DocumentLoader(max_document_size=settings.max_document_size)
    try:
        files = _collect_files(target, loader)
    except UnsupportedExtensionError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_LINT_ERRORS
    if not files:
        print(f"No .twee files found in {target}")
        return EXIT_OK

    try:
        vocabulary = load_vocabulary(args.vocabulary or settings.vocabulary_path)
    except VocabularyError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_BAD_VOCABULARY

    service = LintService(
        vocabulary,
        loader=loader,
        workers=args.jobs if args.jobs is not None else settings.lint_workers,
    )
    logger.debug("Linting %d file(s) with %d macro names", len(files), len(vocabulary))
    batch = service.lint_paths(files)

    for report in batch.reports:
        if args.format == "json":
            print(report.model_dump_json())
        else:
            print(format_report(report))
    for failure in batch.failures:
        print(f"Error processing {failure.path}: {failure.message}", file=sys.stderr)

    return EXIT_OK if batch.ok else EXIT_LINT_ERRORS


if __name__ == "__main__":
    sys.exit(main())
