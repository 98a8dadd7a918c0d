"""Structural validation of parsed runbooks."""

from ..config import RulesConfig
from ..models import Document, Severity, Step, ValidationResult, Violation, ViolationKind


class _Collector:
    """Accumulates violations, applying configured severities."""

    def __init__(self, rules: RulesConfig) -> None:
        self.rules = rules
        self.violations: list[Violation] = []

    def add(
        self,
        kind: ViolationKind,
        message: str,
        *,
        step: int | None = None,
        substep: str | None = None,
        line: int | None = None,
    ) -> None:
        severity = self.rules.get_severity(kind)
        if severity == Severity.OFF:
            return
        self.violations.append(
            Violation(
                kind=kind,
                severity=severity,
                message=message,
                step=step,
                substep=substep,
                line=line,
            )
        )


def validate_document(document: Document, rules: RulesConfig | None = None) -> ValidationResult:
    """Check a document against the runbook structure rules.

    Every violation is reported; validation never stops at the first one
    and never raises, even for a completely empty Document.

    Args:
        document: Parsed runbook
        rules: Severity per rule; defaults to RulesConfig()

    Returns:
        ValidationResult with violations in discovery order
    """
    found = _Collector(rules or RulesConfig())

    if not document.title.strip():
        found.add(ViolationKind.MISSING_TITLE, "document has no title")

    if not document.summary:
        found.add(ViolationKind.EMPTY_SUMMARY, "summary of changes is empty")

    if not document.steps:
        found.add(ViolationKind.NO_STEPS, "document has no steps")

    _check_step_sequence(document.steps, found)
    for step in document.steps:
        _check_step(step, found)

    if not document.manual_testing_plan:
        found.add(ViolationKind.EMPTY_MANUAL_TESTING_PLAN, "manual testing plan is empty")

    return ValidationResult(violations=tuple(found.violations))


def _check_step_sequence(steps: tuple[Step, ...], found: _Collector) -> None:
    """Steps must be numbered 1, 2, 3, ...

    After a mismatch the expected index resumes from the observed one, so a
    single skipped number produces a single violation.
    """
    expected = 1
    for step in steps:
        if step.index != expected:
            found.add(
                ViolationKind.STEP_INDEX_GAP,
                f"step {step.index} found where step {expected} was expected",
                step=step.index,
                line=step.line,
            )
        expected = step.index + 1


def _check_step(step: Step, found: _Collector) -> None:
    if not step.name.strip():
        found.add(
            ViolationKind.EMPTY_STEP_NAME,
            f"step {step.index} has no name",
            step=step.index,
            line=step.line,
        )

    prefix = f"{step.index}."
    for substep in step.substeps:
        if not substep.index.startswith(prefix):
            found.add(
                ViolationKind.SUBSTEP_INDEX_MISMATCH,
                f"sub-step {substep.index} does not belong to step {step.index}",
                step=step.index,
                substep=substep.index,
                line=substep.line,
            )
        if not substep.name.strip():
            found.add(
                ViolationKind.EMPTY_STEP_NAME,
                f"sub-step {substep.index} has no name",
                step=step.index,
                substep=substep.index,
                line=substep.line,
            )
