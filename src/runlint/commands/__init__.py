"""CLI command implementations for runlint.

This package contains the implementation of each CLI command,
separated from the CLI framework setup in cli.py.
"""

from .check import check
from .init import init
from .refs import refs

__all__ = [
    "check",
    "init",
    "refs",
]
