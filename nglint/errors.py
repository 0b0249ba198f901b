"""Failure taxonomy for lint invocations.

Findings are never raised; these exceptions cover the cases where no report
can be produced at all.
"""

from __future__ import annotations


class LintError(Exception):
    """Base class for every failure surfaced by a lint invocation."""


class ConfigurationError(LintError):
    """Settings are missing or malformed; raised before any file is opened."""


class FileReadError(LintError):
    """An input file could not be opened, read or decoded."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path


class ParseError(LintError):
    """The markup tokenizer gave up on an input file."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot parse {path}: {reason}")
        self.path = path
