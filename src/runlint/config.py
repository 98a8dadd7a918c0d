"""Configuration management for runlint."""

import tomllib
from enum import Enum
from pathlib import Path

import tomli_w
from pydantic import BaseModel, Field, ValidationError

from .constants import CONFIG_FILE, DEFAULT_MAX_WORKERS, DEFAULT_PATTERN
from .models import Severity, ViolationKind


class ConfigError(Exception):
    """Error loading or validating configuration."""


class ReportFormat(str, Enum):
    """Report output formats."""

    TEXT = "text"
    JSON = "json"


class ReportConfig(BaseModel):
    """Configuration for the report generator."""

    format: ReportFormat = ReportFormat.TEXT
    fail_on_warnings: bool = False


class RulesConfig(BaseModel):
    """Severity per structural rule.

    Every rule defaults to ``error`` except ``empty_summary``, which is off
    unless a project opts in.
    """

    missing_title: Severity = Severity.ERROR
    no_steps: Severity = Severity.ERROR
    step_index_gap: Severity = Severity.ERROR
    substep_index_mismatch: Severity = Severity.ERROR
    empty_manual_testing_plan: Severity = Severity.ERROR
    empty_step_name: Severity = Severity.ERROR
    empty_summary: Severity = Severity.OFF

    def get_severity(self, kind: ViolationKind) -> Severity:
        """Get configured severity for a violation kind."""
        return getattr(self, _RULE_FIELDS[kind])


_RULE_FIELDS: dict[ViolationKind, str] = {
    ViolationKind.MISSING_TITLE: "missing_title",
    ViolationKind.NO_STEPS: "no_steps",
    ViolationKind.STEP_INDEX_GAP: "step_index_gap",
    ViolationKind.SUBSTEP_INDEX_MISMATCH: "substep_index_mismatch",
    ViolationKind.EMPTY_MANUAL_TESTING_PLAN: "empty_manual_testing_plan",
    ViolationKind.EMPTY_STEP_NAME: "empty_step_name",
    ViolationKind.EMPTY_SUMMARY: "empty_summary",
}


class ParserConfig(BaseModel):
    """Heading aliases recognized by the document parser (case-insensitive)."""

    summary_headings: list[str] = Field(
        default=["summary of changes", "summary"],
        description="Headings that open the summary section",
    )
    testing_plan_headings: list[str] = Field(
        default=["manual testing plan", "manual testing", "testing plan"],
        description="Headings that open the manual testing plan section",
    )


class BatchConfig(BaseModel):
    """Configuration for checking many documents."""

    pattern: str = DEFAULT_PATTERN
    max_workers: int = Field(default=DEFAULT_MAX_WORKERS, ge=1)


class RunlintConfig(BaseModel):
    """Root configuration for runlint."""

    report: ReportConfig = Field(default_factory=ReportConfig)
    rules: RulesConfig = Field(default_factory=RulesConfig)
    parser: ParserConfig = Field(default_factory=ParserConfig)
    batch: BatchConfig = Field(default_factory=BatchConfig)


def load_config(config_path: Path) -> RunlintConfig:
    """Load config from a TOML file.

    Args:
        config_path: Path to the config file (usually .runlint.toml)

    Returns:
        Loaded configuration, or defaults if the file doesn't exist

    Raises:
        ConfigError: If the file is not valid TOML or fails validation
    """
    if not config_path.exists():
        return RunlintConfig()
    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e
    try:
        return RunlintConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config in {config_path}: {e}") from e


def write_config_template(directory: Path) -> Path:
    """Write default config template.

    Args:
        directory: Directory to write the config file into

    Returns:
        Path to the written config file
    """
    config_path = directory / CONFIG_FILE
    defaults = RunlintConfig()
    template = {
        "report": {"format": "text", "fail_on_warnings": False},
        # Severity per rule: "error", "warning" or "off"
        "rules": {name: sev.value for name, sev in defaults.rules.model_dump().items()},
        "parser": defaults.parser.model_dump(),
        "batch": {"pattern": DEFAULT_PATTERN, "max_workers": DEFAULT_MAX_WORKERS},
    }
    with open(config_path, "wb") as f:
        tomli_w.dump(template, f)
    return config_path
