"""Violation models produced by the schema validator."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ViolationKind(str, Enum):
    """Structural rules a runbook can break."""

    MISSING_TITLE = "MissingTitle"
    NO_STEPS = "NoSteps"
    STEP_INDEX_GAP = "StepIndexGap"
    SUBSTEP_INDEX_MISMATCH = "SubStepIndexMismatch"
    EMPTY_MANUAL_TESTING_PLAN = "EmptyManualTestingPlan"
    EMPTY_STEP_NAME = "EmptyStepName"
    EMPTY_SUMMARY = "EmptySummary"


class Severity(str, Enum):
    """Severity assigned to a rule. ``off`` disables the rule."""

    ERROR = "error"
    WARNING = "warning"
    OFF = "off"


class Violation(BaseModel):
    """Single structural nonconformance found in a document."""

    model_config = ConfigDict(frozen=True)

    kind: ViolationKind
    severity: Severity = Severity.ERROR
    message: str
    step: int | None = None  # step index, when the rule is step-scoped
    substep: str | None = None  # e.g. "2.1"
    line: int | None = None


class ValidationResult(BaseModel):
    """All violations found in one document, in discovery order.

    Attributes:
        violations: Every violation recorded by the validator.

    Note:
        An empty result means the document passed every enabled rule.
        Warnings only count against the exit code when the report is
        configured with ``fail_on_warnings``.
    """

    model_config = ConfigDict(frozen=True)

    violations: tuple[Violation, ...] = Field(default=())

    @property
    def violation_count(self) -> int:
        return len(self.violations)

    @property
    def error_count(self) -> int:
        return sum(1 for v in self.violations if v.severity == Severity.ERROR)

    @property
    def warning_count(self) -> int:
        return sum(1 for v in self.violations if v.severity == Severity.WARNING)

    @property
    def is_valid(self) -> bool:
        """True if no error-severity violation was recorded."""
        return self.error_count == 0

    def of_kind(self, kind: ViolationKind) -> list[Violation]:
        """Return violations of a single kind."""
        return [v for v in self.violations if v.kind == kind]
