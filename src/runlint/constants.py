"""Constants for runlint CLI."""

CONFIG_FILE = ".runlint.toml"
DEFAULT_PATTERN = "*.md"
DEFAULT_MAX_WORKERS = 4  # documents checked in parallel
