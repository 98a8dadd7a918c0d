"""External I/O for runlint.

This package provides the filesystem side of checking runbooks:
- files: Runbook discovery and reading
"""

from .files import discover_documents, read_document

__all__ = [
    "discover_documents",
    "read_document",
]
