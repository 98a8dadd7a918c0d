"""Document models for parsed runbooks.

A runbook is parsed once into an immutable tree of Document, Step and
SubStep values. The parser captures what the text says verbatim; the
validator decides whether it is well formed.
"""

from pydantic import BaseModel, ConfigDict, Field


class SubStep(BaseModel):
    """Numbered sub-step of a step (``#### 1.1: Name``).

    Attributes:
        index: Dotted numeral exactly as written (e.g. "1.1").
        name: Sub-step title from the heading.
        bullets: Action items in author order, duplicates kept.
        description: Non-bullet text inside the sub-step.
        line: 1-based line number of the heading.
    """

    model_config = ConfigDict(frozen=True)

    index: str = Field(description="Dotted sub-step numeral, e.g. '1.1'")
    name: str = Field(description="Sub-step title")
    bullets: tuple[str, ...] = Field(default=(), description="Action items in order")
    description: str = Field(default="", description="Free text outside bullets")
    line: int | None = Field(default=None, description="Source line of the heading")


class Step(BaseModel):
    """Numbered top-level step (``### Step 1: Name``).

    Example:
        >>> step = Step(
        ...     index=1,
        ...     name="Upgrade dependencies",
        ...     substeps=(SubStep(index="1.1", name="Bump versions"),),
        ... )
    """

    model_config = ConfigDict(frozen=True)

    index: int = Field(description="Step number as written in the heading")
    name: str = Field(description="Step title")
    description: str = Field(default="", description="Text before the first sub-step")
    substeps: tuple[SubStep, ...] = Field(default=(), description="Sub-steps in order")
    line: int | None = Field(default=None, description="Source line of the heading")


class Document(BaseModel):
    """One parsed runbook.

    A document is valid only when it has a title, at least one step and a
    non-empty manual testing plan. Those checks belong to the validator;
    this model only holds what was found.
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(description="First-level heading text")
    summary: tuple[str, ...] = Field(default=(), description="Summary of changes items")
    steps: tuple[Step, ...] = Field(default=(), description="Steps in document order")
    manual_testing_plan: tuple[str, ...] = Field(
        default=(), description="Manual testing plan items"
    )
