"""Extraction of bold references from parsed runbooks.

Runbooks mark files and identifiers as ``**path/to/file.js**``. This pass
collects those spans with their location and does not interpret them.
"""

import re

from ..models import Document, Reference

BOLD_PATTERN = re.compile(r"\*\*(.+?)\*\*|__(.+?)__")


def _bold_spans(text: str) -> list[str]:
    spans = []
    for match in BOLD_PATTERN.finditer(text):
        span = (match.group(1) or match.group(2) or "").strip()
        if span:
            spans.append(span)
    return spans


def extract_references(document: Document) -> list[Reference]:
    """Collect every bold span, section by section.

    Args:
        document: Parsed runbook

    Returns:
        List of Reference objects; duplicates are kept
    """
    refs: list[Reference] = []

    for item in document.summary:
        refs.extend(Reference(text=s, section="summary") for s in _bold_spans(item))

    for step in document.steps:
        refs.extend(
            Reference(text=s, section="step", step=step.index)
            for s in _bold_spans(step.description)
        )
        for substep in step.substeps:
            for text in (substep.description, *substep.bullets):
                refs.extend(
                    Reference(text=s, section="substep", step=step.index, substep=substep.index)
                    for s in _bold_spans(text)
                )

    for item in document.manual_testing_plan:
        refs.extend(Reference(text=s, section="testing_plan") for s in _bold_spans(item))

    return refs
