"""Checks that look at the attribute set as a whole."""

from __future__ import annotations

from typing import Sequence, Tuple

from nglint.parser import TagSnapshot
from nglint.result import Finding, LintResult
from nglint.settings import LintSettings
from nglint.severity import Severity

from . import BINDING_PREFIX

MUTUALLY_EXCLUSIVE_GROUPS: Sequence[Tuple[str, ...]] = (
    ("ng-show", "ng-hide"),
    ("ng-bind", "ng-bind-html", "ng-bind-template"),
    ("href", "ng-href"),
    ("pattern", "ng-pattern"),
    ("required", "ng-required"),
    ("src", "ng-src"),
)

# Directives that are meaningful without a value.
ALLOWED_EMPTY_ATTRIBUTES = frozenset({"ng-cloak", "ng-transclude"})


class MutuallyExclusiveRule:
    """Flag attributes from the same exclusive group used together."""

    name = "mutually_exclusive"

    def __init__(self, groups: Sequence[Tuple[str, ...]] = MUTUALLY_EXCLUSIVE_GROUPS) -> None:
        self._groups = groups

    def evaluate(self, tag: TagSnapshot, settings: LintSettings, result: LintResult) -> None:
        for group in self._groups:
            common = tuple(name for name in group if name in tag.attrs)
            if len(common) < 2:
                continue
            result.add_finding(
                Finding(
                    location=tag.location,
                    severity=Severity.ERROR,
                    attrs=common,
                    message=f"Mutually exclusive attributes {', '.join(common)}",
                    rule=self.name,
                )
            )


class DuplicateAttributeRule:
    """Flag attribute names written more than once on the same tag."""

    name = "duplicate_attribute"

    def evaluate(self, tag: TagSnapshot, settings: LintSettings, result: LintResult) -> None:
        for duplicate in tag.duplicates:
            result.add_finding(
                Finding(
                    location=tag.location,
                    severity=Severity.ERROR,
                    attrs=(duplicate,),
                    message=f"Duplicate attribute {duplicate}",
                    rule=self.name,
                )
            )


class EmptyAttributeRule:
    """Warn about framework attributes left without a value."""

    name = "empty_attribute"

    def __init__(self, allowed_empty: frozenset = ALLOWED_EMPTY_ATTRIBUTES) -> None:
        self._allowed_empty = allowed_empty

    def evaluate(self, tag: TagSnapshot, settings: LintSettings, result: LintResult) -> None:
        for key in tag.attr_keys:
            if tag.attrs[key]:
                continue
            if not key.startswith(BINDING_PREFIX):
                continue
            if key in self._allowed_empty or key in settings.ignore_attributes:
                continue
            result.add_finding(
                Finding(
                    location=tag.location,
                    severity=Severity.WARNING,
                    attrs=(key,),
                    message=f"Empty attribute {key}",
                    rule=self.name,
                )
            )
