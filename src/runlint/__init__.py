"""runlint: structural linter for Markdown runbooks."""

__version__ = "0.1.0"
