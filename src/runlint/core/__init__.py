"""Core business logic for runlint.

This package contains the checking pipeline:
- document_parser: Runbook text to Document tree
- validator: Structural rules over a Document
- report: Text and JSON rendering with exit codes
- references: Bold reference extraction
- batch: End-to-end checks for one or many documents
"""

from .batch import check_path, check_paths, check_text
from .document_parser import parse_document
from .references import extract_references
from .report import exit_code_for, render_outcomes, render_result
from .validator import validate_document

__all__ = [
    "check_path",
    "check_paths",
    "check_text",
    "exit_code_for",
    "extract_references",
    "parse_document",
    "render_outcomes",
    "render_result",
    "validate_document",
]
