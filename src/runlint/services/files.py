"""File discovery and reading for runbook checks.

The core only sees already-read text. This module owns the filesystem:
finding runbooks under a path and reading them into strings, turning read
errors into ReadFailure values instead of raising.
"""

import logging
from pathlib import Path

from ..constants import DEFAULT_PATTERN
from ..models import ReadFailure

logger = logging.getLogger(__name__)


def discover_documents(target: Path, pattern: str = DEFAULT_PATTERN) -> list[Path]:
    """Find runbook files under a path.

    Args:
        target: A single file, or a directory searched recursively
        pattern: Glob pattern for files inside directories

    Returns:
        Sorted list of file paths (a file target is returned as-is)

    Raises:
        FileNotFoundError: If target does not exist
    """
    if not target.exists():
        raise FileNotFoundError(f"Path not found: {target}")
    if target.is_file():
        return [target]
    found = sorted(p for p in target.rglob(pattern) if p.is_file())
    logger.debug(f"Found {len(found)} document(s) under {target}")
    return found


def read_document(path: Path) -> str | ReadFailure:
    """Read a runbook as UTF-8 text, dropping a leading byte-order mark.

    Args:
        path: File to read

    Returns:
        File contents, or ReadFailure if the file cannot be read or decoded
    """
    try:
        with open(path, encoding="utf-8-sig") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Failed to read {path}: {e}")
        return ReadFailure(path=str(path), message=f"{type(e).__name__}: {e}")
