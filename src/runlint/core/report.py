"""Report rendering for validation results.

Renders results as plain text or JSON and computes the matching process
exit code. Nothing here writes to stdout; callers print the string.
"""

import json
from collections import Counter
from collections.abc import Sequence
from typing import Any

from ..config import ReportConfig
from ..models import DocumentOutcome, OutcomeStatus, ValidationResult, Violation


def exit_code_for(result: ValidationResult, options: ReportConfig) -> int:
    """Return 1 if the result fails under the given options, else 0."""
    if result.error_count:
        return 1
    if options.fail_on_warnings and result.warning_count:
        return 1
    return 0


def _outcome_exit_code(outcome: DocumentOutcome, options: ReportConfig) -> int:
    if outcome.result is None:
        return 1
    return exit_code_for(outcome.result, options)


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


def _location(violation: Violation) -> str:
    parts = []
    if violation.substep is not None:
        parts.append(f"sub-step {violation.substep}")
    elif violation.step is not None:
        parts.append(f"step {violation.step}")
    if violation.line is not None:
        parts.append(f"line {violation.line}")
    return ", ".join(parts)


def _violation_text(violation: Violation) -> str:
    location = _location(violation)
    where = f" ({location})" if location else ""
    return f"  [{violation.severity.value}] {violation.kind.value}{where}: {violation.message}"


def _result_text(result: ValidationResult) -> list[str]:
    if not result.violations:
        return ["OK"]
    lines = [_plural(result.violation_count, "violation")]
    lines.extend(_violation_text(v) for v in result.violations)
    return lines


def _result_json(result: ValidationResult, options: ReportConfig) -> dict[str, Any]:
    return {
        "valid": exit_code_for(result, options) == 0,
        "violation_count": result.violation_count,
        "error_count": result.error_count,
        "warning_count": result.warning_count,
        "violations": [v.model_dump(mode="json") for v in result.violations],
    }


def render_result(result: ValidationResult, options: ReportConfig | None = None) -> tuple[str, int]:
    """Render a single validation result.

    Args:
        result: Validator output for one document
        options: Format and warning policy; defaults to ReportConfig()

    Returns:
        Tuple of (report text, exit code)
    """
    options = options or ReportConfig()
    code = exit_code_for(result, options)
    if options.format == "json":
        return json.dumps(_result_json(result, options), indent=2), code
    return "\n".join(_result_text(result)), code


def _outcome_json(outcome: DocumentOutcome, options: ReportConfig) -> dict[str, Any]:
    data: dict[str, Any] = {"source": outcome.source, "status": outcome.status.value}
    if outcome.result is not None:
        data.update(_result_json(outcome.result, options))
    elif outcome.parse_error is not None:
        data["error"] = outcome.parse_error.model_dump(mode="json")
    elif outcome.read_failure is not None:
        data["error"] = {"message": outcome.read_failure.message}
    return data


def _outcome_text(outcome: DocumentOutcome) -> list[str]:
    if outcome.result is not None:
        head, *details = _result_text(outcome.result)
        return [f"{outcome.source}: {head}", *details]
    if outcome.parse_error is not None:
        return [f"{outcome.source}: parse error: {outcome.parse_error}"]
    return [f"{outcome.source}: io error: {outcome.read_failure}"]


def _summary(outcomes: Sequence[DocumentOutcome]) -> dict[str, int]:
    statuses = Counter(o.status for o in outcomes)
    return {
        "documents": len(outcomes),
        "ok": statuses[OutcomeStatus.OK],
        "with_violations": statuses[OutcomeStatus.VIOLATIONS],
        "parse_errors": statuses[OutcomeStatus.PARSE_ERROR],
        "io_errors": statuses[OutcomeStatus.IO_ERROR],
        "violations": sum(o.result.violation_count for o in outcomes if o.result is not None),
    }


def render_outcomes(
    outcomes: Sequence[DocumentOutcome], options: ReportConfig | None = None
) -> tuple[str, int]:
    """Render a batch of document outcomes with a final aggregate.

    Args:
        outcomes: One outcome per document, in report order
        options: Format and warning policy; defaults to ReportConfig()

    Returns:
        Tuple of (report text, exit code). The exit code is 1 if any
        document failed to read, failed to parse, or failed validation.
    """
    options = options or ReportConfig()
    code = max((_outcome_exit_code(o, options) for o in outcomes), default=0)
    summary = _summary(outcomes)

    if options.format == "json":
        data = {
            "documents": [_outcome_json(o, options) for o in outcomes],
            "summary": summary,
            "passed": code == 0,
        }
        return json.dumps(data, indent=2), code

    lines: list[str] = []
    for outcome in outcomes:
        lines.extend(_outcome_text(outcome))
    lines.append("")
    lines.append(
        f"{_plural(summary['documents'], 'document')}: {summary['ok']} ok, "
        f"{summary['with_violations']} with violations, "
        f"{_plural(summary['parse_errors'], 'parse error')}, "
        f"{_plural(summary['io_errors'], 'io error')} "
        f"({_plural(summary['violations'], 'violation')} total)"
    )
    return "\n".join(lines), code
