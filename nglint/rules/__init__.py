"""Rule protocol shared by every attribute check."""

from __future__ import annotations

from typing import Protocol

from nglint.parser import TagSnapshot
from nglint.result import LintResult
from nglint.settings import LintSettings

BINDING_PREFIX = "ng-"


class Rule(Protocol):
    """Protocol implemented by all rule evaluators."""

    name: str

    def evaluate(self, tag: TagSnapshot, settings: LintSettings, result: LintResult) -> None:
        """Inspect one tag's attributes and append findings to ``result``."""
