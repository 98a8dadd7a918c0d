"""Runbook parsing for runlint.

Turns Markdown-like runbook text into a Document tree. The parser is
lenient about heading levels and captures step numbering verbatim; every
structural judgement is left to the validator.
"""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum

from ..config import ParserConfig
from ..models import Document, ParseError, Step, SubStep

logger = logging.getLogger(__name__)

HEADING_PATTERN = re.compile(r"^ {0,3}(#{1,6})(?:[ \t]+(.*?))?(?:[ \t]+#+)?[ \t]*$")
STEP_PATTERN = re.compile(r"^step\s+(\d+)\b\s*[:.\-–—]?\s*(.*)$", re.IGNORECASE)
SUBSTEP_PATTERN = re.compile(r"^(\d+(?:\.\d+)+)\.?\s*[:\-–—]?\s*(.*)$")
BULLET_PATTERN = re.compile(r"^\s*(?:[-*+]|\d+[.)])\s+(.*)$")
FENCE_PATTERN = re.compile(r"^\s*(`{3,}|~{3,})")
THEMATIC_BREAK_PATTERN = re.compile(r"^\s*([-*_])(?:\s*\1){2,}\s*$")
EMPHASIS_PATTERN = re.compile(r"\*\*|__")


class _Context(Enum):
    PREAMBLE = "preamble"
    TITLE = "title"
    SUMMARY = "summary"
    STEP = "step"
    SUBSTEP = "substep"
    TESTING = "testing"
    OTHER = "other"


@dataclass
class _SubStepDraft:
    index: str
    name: str
    line: int
    level: int
    bullets: list[str] = field(default_factory=list)
    description: list[str] = field(default_factory=list)

    def freeze(self) -> SubStep:
        return SubStep(
            index=self.index,
            name=self.name,
            bullets=tuple(self.bullets),
            description="\n".join(self.description).strip(),
            line=self.line,
        )


@dataclass
class _StepDraft:
    index: int
    name: str
    line: int
    level: int
    description: list[str] = field(default_factory=list)
    substeps: list[SubStep] = field(default_factory=list)

    def freeze(self) -> Step:
        return Step(
            index=self.index,
            name=self.name,
            description="\n".join(self.description).strip(),
            substeps=tuple(self.substeps),
            line=self.line,
        )


def _heading_key(text: str) -> str:
    """Normalize heading text for alias matching."""
    return " ".join(_strip_emphasis(text).lower().rstrip(":").split())


def _strip_emphasis(text: str) -> str:
    return EMPHASIS_PATTERN.sub("", text).strip()


class _DocumentBuilder:
    """Mutable parse state for a single call to parse_document."""

    def __init__(self, config: ParserConfig) -> None:
        self.summary_keys = {_heading_key(h) for h in config.summary_headings}
        self.testing_keys = {_heading_key(h) for h in config.testing_plan_headings}
        self.title: str | None = None
        self.summary: list[str] = []
        self.testing_plan: list[str] = []
        self.steps: list[Step] = []
        self.step: _StepDraft | None = None
        self.substep: _SubStepDraft | None = None
        self.context = _Context.PREAMBLE
        self.section_level = 0

    # -- headings ---------------------------------------------------------

    def heading(self, level: int, text: str, lineno: int) -> ParseError | None:
        """Apply a heading transition. Returns a ParseError if malformed."""
        if self.title is None and level == 1:
            if not _strip_emphasis(text):
                return ParseError(message="title heading is empty", line=lineno)
            self.title = text.strip()
            self._enter(_Context.TITLE, level)
            return None

        name = _strip_emphasis(text)
        key = _heading_key(text)

        if key in self.summary_keys:
            self._close_step()
            self._enter(_Context.SUMMARY, level)
            return None

        if key in self.testing_keys:
            self._close_step()
            self._enter(_Context.TESTING, level)
            return None

        step_match = STEP_PATTERN.match(name)
        if step_match:
            try:
                index = int(step_match.group(1))
            except ValueError:
                # int() refuses digit strings past sys.get_int_max_str_digits()
                return ParseError(message="step number too large", line=lineno)
            self._close_step()
            self.step = _StepDraft(
                index=index,
                name=step_match.group(2).strip(),
                line=lineno,
                level=level,
            )
            logger.debug(f"line {lineno}: step {self.step.index} '{self.step.name}'")
            self._enter(_Context.STEP, level)
            return None

        # Numbered headings outside a step, or not below it, are ordinary headings
        substep_match = SUBSTEP_PATTERN.match(name)
        if substep_match and self.step is not None and level > self.step.level:
            self._close_substep()
            self.substep = _SubStepDraft(
                index=substep_match.group(1),
                name=substep_match.group(2).strip(),
                line=lineno,
                level=level,
            )
            self.context = _Context.SUBSTEP
            return None

        self._unrecognized_heading(level)
        return None

    def _unrecognized_heading(self, level: int) -> None:
        # Deeper headings stay inside the current section
        if self.context == _Context.SUBSTEP and self.substep is not None:
            if level <= self.substep.level:
                self._close_substep()
                self.context = _Context.STEP
            else:
                return
        if self.context in (_Context.STEP, _Context.SUMMARY, _Context.TESTING):
            if level > self.section_level:
                return
            self._close_step()
        self._enter(_Context.OTHER, level)

    def _enter(self, context: _Context, level: int) -> None:
        self.context = context
        self.section_level = level

    def _close_substep(self) -> None:
        if self.step is not None and self.substep is not None:
            self.step.substeps.append(self.substep.freeze())
        self.substep = None

    def _close_step(self) -> None:
        self._close_substep()
        if self.step is not None:
            self.steps.append(self.step.freeze())
        self.step = None

    # -- body lines -------------------------------------------------------

    def text(self, raw: str) -> None:
        """Handle a non-heading line outside code fences."""
        if THEMATIC_BREAK_PATTERN.match(raw):
            return
        if self.context == _Context.STEP and self.step is not None:
            self.step.description.append(raw.rstrip())
        elif self.context == _Context.SUBSTEP and self.substep is not None:
            self._substep_line(self.substep, raw)
        elif self.context == _Context.SUMMARY:
            self._item_line(self.summary, raw)
        elif self.context == _Context.TESTING:
            self._item_line(self.testing_plan, raw)

    def code(self, raw: str, is_fence: bool) -> None:
        """Handle a fence marker or a line inside a code fence."""
        if self.context == _Context.STEP and self.step is not None:
            self.step.description.append(raw.rstrip())
        elif self.context == _Context.SUBSTEP and self.substep is not None:
            self.substep.description.append(raw.rstrip())
        elif self.context in (_Context.SUMMARY, _Context.TESTING) and not is_fence:
            items = self.summary if self.context == _Context.SUMMARY else self.testing_plan
            if items:
                items[-1] = f"{items[-1]}\n{raw.rstrip()}"
            else:
                items.append(raw.rstrip())

    @staticmethod
    def _substep_line(substep: _SubStepDraft, raw: str) -> None:
        if not raw.strip():
            substep.description.append("")
            return
        bullet = BULLET_PATTERN.match(raw)
        if bullet:
            substep.bullets.append(bullet.group(1).strip())
        elif raw[:1].isspace() and substep.bullets:
            substep.bullets[-1] = f"{substep.bullets[-1]} {raw.strip()}"
        else:
            substep.description.append(raw.rstrip())

    @staticmethod
    def _item_line(items: list[str], raw: str) -> None:
        if not raw.strip():
            return
        bullet = BULLET_PATTERN.match(raw)
        if bullet:
            items.append(bullet.group(1).strip())
        elif raw[:1].isspace() and items:
            items[-1] = f"{items[-1]} {raw.strip()}"
        else:
            items.append(raw.strip())

    def build(self) -> Document | ParseError:
        self._close_step()
        if self.title is None:
            return ParseError(message="missing title: no first-level '#' heading found")
        return Document(
            title=self.title,
            summary=tuple(self.summary),
            steps=tuple(self.steps),
            manual_testing_plan=tuple(self.testing_plan),
        )


def parse_document(text: str, config: ParserConfig | None = None) -> Document | ParseError:
    """Parse runbook text into a Document.

    Args:
        text: Raw runbook content
        config: Heading aliases; defaults to ParserConfig()

    Returns:
        The parsed Document, or a ParseError describing the missing or
        malformed section. Missing optional sections (summary, testing plan)
        produce empty sequences rather than errors.
    """
    text = text.removeprefix("\ufeff")
    builder = _DocumentBuilder(config or ParserConfig())
    fence: str | None = None

    for lineno, raw in enumerate(text.splitlines(), start=1):
        fence_match = FENCE_PATTERN.match(raw)
        if fence is not None:
            # A fence closes on a marker of the same character, at least as long
            if fence_match and fence_match.group(1)[0] == fence[0]:
                if len(fence_match.group(1)) >= len(fence):
                    fence = None
                    builder.code(raw, is_fence=True)
                    continue
            builder.code(raw, is_fence=False)
            continue
        if fence_match:
            fence = fence_match.group(1)
            builder.code(raw, is_fence=True)
            continue

        heading = HEADING_PATTERN.match(raw)
        if heading:
            error = builder.heading(len(heading.group(1)), heading.group(2) or "", lineno)
            if error is not None:
                logger.debug(f"parse error: {error}")
                return error
            continue

        builder.text(raw)

    return builder.build()
