"""Checking one or many runbooks end to end.

Each document is parsed and validated independently. Batches run on a
thread pool with no shared mutable state; a read or parse failure is
recorded as that document's outcome and never stops the others.
"""

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from ..config import RunlintConfig
from ..constants import DEFAULT_MAX_WORKERS
from ..models import DocumentOutcome, ParseError, ReadFailure
from ..services import read_document
from .document_parser import parse_document
from .validator import validate_document

logger = logging.getLogger(__name__)


def check_text(source: str, text: str, config: RunlintConfig | None = None) -> DocumentOutcome:
    """Parse and validate one already-read document.

    Args:
        source: Label used in reports (usually the file path)
        text: Document content
        config: Parser and rule configuration

    Returns:
        DocumentOutcome holding either a ValidationResult or a ParseError
    """
    config = config or RunlintConfig()
    parsed = parse_document(text, config.parser)
    if isinstance(parsed, ParseError):
        return DocumentOutcome(source=source, parse_error=parsed)
    return DocumentOutcome(source=source, result=validate_document(parsed, config.rules))


def check_path(path: Path, config: RunlintConfig | None = None) -> DocumentOutcome:
    """Read and check a single file."""
    content = read_document(path)
    if isinstance(content, ReadFailure):
        return DocumentOutcome(source=str(path), read_failure=content)
    return check_text(str(path), content, config)


def check_paths(
    paths: Sequence[Path],
    config: RunlintConfig | None = None,
    max_workers: int = DEFAULT_MAX_WORKERS,
) -> list[DocumentOutcome]:
    """Check many files in parallel.

    Args:
        paths: Files to check
        config: Parser and rule configuration shared read-only by all tasks
        max_workers: Upper bound on worker threads

    Returns:
        One outcome per path, in the same order as paths
    """
    if not paths:
        return []
    config = config or RunlintConfig()
    workers = min(max_workers, len(paths))
    logger.debug(f"Checking {len(paths)} document(s) with {workers} worker(s)")
    with ThreadPoolExecutor(max_workers=workers) as pool:
        outcomes = list(pool.map(lambda p: check_path(p, config), paths))
    for outcome in outcomes:
        logger.debug(f"{outcome.source}: {outcome.status.value}")
    return outcomes
