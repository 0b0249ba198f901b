"""Ordered rule registry and per-tag evaluation."""

from __future__ import annotations

from typing import List, Sequence

from .parser import TagSnapshot
from .result import LintResult
from .rules import Rule
from .rules.attributes import DuplicateAttributeRule, EmptyAttributeRule, MutuallyExclusiveRule
from .rules.directives import (
    NgInitRule,
    NgOptionsExpressionRule,
    NgOptionsTrackByRule,
    NgRepeatTrackByRule,
    NgTrimRule,
)
from .settings import LintSettings


def load_rules() -> List[Rule]:
    return [
        MutuallyExclusiveRule(),
        DuplicateAttributeRule(),
        NgTrimRule(),
        NgInitRule(),
        NgRepeatTrackByRule(),
        NgOptionsExpressionRule(),
        NgOptionsTrackByRule(),
        EmptyAttributeRule(),
    ]


DEFAULT_RULES: Sequence[Rule] = tuple(load_rules())


class RuleEngine:
    """Run every rule, in registration order, against each tag of one document.

    One engine collects the findings of one parse; rules only ever append.
    """

    def __init__(self, settings: LintSettings, rules: Sequence[Rule] = DEFAULT_RULES) -> None:
        self.settings = settings
        self.rules = rules
        self.result = LintResult()

    def evaluate(self, tag: TagSnapshot) -> None:
        for rule in self.rules:
            rule.evaluate(tag, self.settings, self.result)
