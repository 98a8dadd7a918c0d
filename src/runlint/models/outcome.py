"""Result values for documents that could not be checked.

Parse and read failures are returned, not raised, so that one broken
document never stops a batch run.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .violation import ValidationResult


class ParseError(BaseModel):
    """Text has no recognizable runbook skeleton."""

    model_config = ConfigDict(frozen=True)

    message: str = Field(description="What was missing or malformed")
    line: int | None = Field(default=None, description="1-based line, if known")

    def __str__(self) -> str:
        if self.line is not None:
            return f"line {self.line}: {self.message}"
        return self.message


class ReadFailure(BaseModel):
    """File could not be read (missing, permission denied, bad encoding)."""

    model_config = ConfigDict(frozen=True)

    path: str
    message: str

    def __str__(self) -> str:
        return self.message


class OutcomeStatus(str, Enum):
    """Per-document status shown in reports."""

    OK = "ok"
    VIOLATIONS = "violations"
    PARSE_ERROR = "parse_error"
    IO_ERROR = "io_error"


class DocumentOutcome(BaseModel):
    """Outcome of checking one document in a batch.

    Exactly one of ``result``, ``parse_error`` and ``read_failure`` is set.
    """

    model_config = ConfigDict(frozen=True)

    source: str = Field(description="Path or label of the document")
    result: ValidationResult | None = None
    parse_error: ParseError | None = None
    read_failure: ReadFailure | None = None

    @model_validator(mode="after")
    def _exactly_one(self) -> "DocumentOutcome":
        present = [
            x for x in (self.result, self.parse_error, self.read_failure) if x is not None
        ]
        if len(present) != 1:
            raise ValueError("exactly one of result, parse_error, read_failure must be set")
        return self

    @property
    def status(self) -> OutcomeStatus:
        if self.read_failure is not None:
            return OutcomeStatus.IO_ERROR
        if self.parse_error is not None:
            return OutcomeStatus.PARSE_ERROR
        if self.result is not None and self.result.violations:
            return OutcomeStatus.VIOLATIONS
        return OutcomeStatus.OK


class Reference(BaseModel):
    """Bold ``**text**`` span found in a runbook, with its location."""

    model_config = ConfigDict(frozen=True)

    text: str
    section: str = Field(description="summary, step, substep or testing_plan")
    step: int | None = None
    substep: str | None = None
