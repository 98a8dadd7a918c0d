"""Pydantic data models for runlint.

This package defines the data structures used throughout runlint for:
- Parsed runbooks (Document, Step, SubStep)
- Validator output (Violation, ValidationResult)
- Failure values and batch outcomes (ParseError, ReadFailure, DocumentOutcome)
- Bold references found in documents (Reference)

All models are frozen Pydantic BaseModel subclasses, enabling:
- Structural equality between independently parsed documents
- JSON serialization for reports
- Field validation and type coercion

Example:
    >>> from runlint.models import Document, Step
    >>> doc = Document(title="Add X", steps=(Step(index=1, name="Y"),))
    >>> doc.model_dump_json()
"""

from .document import Document, Step, SubStep
from .outcome import DocumentOutcome, OutcomeStatus, ParseError, ReadFailure, Reference
from .violation import Severity, ValidationResult, Violation, ViolationKind

__all__ = [
    "Document",
    "DocumentOutcome",
    "OutcomeStatus",
    "ParseError",
    "ReadFailure",
    "Reference",
    "Severity",
    "Step",
    "SubStep",
    "ValidationResult",
    "Violation",
    "ViolationKind",
]
