"""Checks for discouraged or malformed usage of individual directives."""

from __future__ import annotations

import re

from nglint.parser import TagSnapshot
from nglint.result import Finding, LintResult
from nglint.settings import LintSettings
from nglint.severity import Severity

# Same grammar ngOptions itself accepts:
# select (as label)? (group by g)? (disable when d)? for (k,)?v in collection (track by t)?
NG_OPTIONS_PATTERN = re.compile(
    r"^\s*([\s\S]+?)"
    r"(?:\s+as\s+([\s\S]+?))?"
    r"(?:\s+group\s+by\s+([\s\S]+?))?"
    r"(?:\s+disable\s+when\s+([\s\S]+?))?"
    r"\s+for\s+(?:([$\w][$\w]*)|(?:\(\s*([$\w][$\w]*)\s*,\s*([$\w][$\w]*)\s*\)))"
    r"\s+in\s+([\s\S]+?)"
    r"(?:\s+track\s+by\s+([\s\S]+?))?\Z"
)
SELECT_AS_TRACK_BY_PATTERN = re.compile(r"\s+as\s+(.*?)\strack\s+by\s")
TRACK_BY_NOT_LAST_PATTERN = re.compile(r"\strack\s+by\s+\S+\s+\S+")
PARENTHESIZED_PATTERN = re.compile(r"\(([^()]*)\)")
WHITESPACE_PATTERN = re.compile(r"\s+")
MASK_OPEN = "\x00"
MASK_CLOSE = "\x01"
UNMASK_PARENTHESES = str.maketrans({MASK_OPEN: "(", MASK_CLOSE: ")"})


class NgTrimRule:
    """ng-trim does nothing on password inputs."""

    name = "ng_trim"

    def evaluate(self, tag: TagSnapshot, settings: LintSettings, result: LintResult) -> None:
        attrs = tag.attrs
        if "ng-trim" not in attrs or tag.tag_name != "input" or attrs.get("type") != "password":
            return
        result.add_finding(
            Finding(
                location=tag.location,
                severity=Severity.WARNING,
                attrs=("ng-trim",),
                message="ng-trim parameter is ignored for input[type=password] controls, which will never trim the input",
                rule=self.name,
            )
        )


class NgInitRule:
    """ng-init is only sanctioned for aliasing ng-repeat properties."""

    name = "ng_init"

    def evaluate(self, tag: TagSnapshot, settings: LintSettings, result: LintResult) -> None:
        attrs = tag.attrs
        if "ng-repeat" in attrs or "ng-init" not in attrs:
            return
        result.add_finding(
            Finding(
                location=tag.location,
                severity=Severity.WARNING,
                attrs=("ng-init",),
                message=(
                    "The only appropriate use of ngInit is for aliasing special properties of ngRepeat. "
                    "Besides this case, you should use controllers rather than ngInit to initialize values on a scope."
                ),
                rule=self.name,
            )
        )


class NgRepeatTrackByRule:
    """track by must be the last clause of an ng-repeat expression."""

    name = "ng_repeat_track_by"

    def evaluate(self, tag: TagSnapshot, settings: LintSettings, result: LintResult) -> None:
        if "ng-repeat" not in tag.attrs:
            return
        value = _collapse_parentheses(tag.attrs["ng-repeat"])
        if not TRACK_BY_NOT_LAST_PATTERN.search(value):
            return
        result.add_finding(
            Finding(
                location=tag.location,
                severity=Severity.ERROR,
                attrs=("ng-repeat",),
                message="track by must always be the last expression",
                rule=self.name,
            )
        )


def _collapse_parentheses(value: str) -> str:
    """Strip whitespace inside balanced parentheses, innermost groups first.

    ``fn( a , g(b, c) )`` becomes ``fn(a,g(b,c))`` so call arguments count as a
    single token. Collapsed groups are masked until every level is done.
    """

    while True:
        value, count = PARENTHESIZED_PATTERN.subn(_mask_group, value)
        if not count:
            return value.translate(UNMASK_PARENTHESES)


def _mask_group(match: re.Match) -> str:
    return MASK_OPEN + WHITESPACE_PATTERN.sub("", match.group(1)) + MASK_CLOSE


class NgOptionsExpressionRule:
    """Reject ng-options expressions ngOptions would fail to parse."""

    name = "ng_options_expression"

    def evaluate(self, tag: TagSnapshot, settings: LintSettings, result: LintResult) -> None:
        options = tag.attrs.get("ng-options")
        if not options or NG_OPTIONS_PATTERN.match(options):
            return
        result.add_finding(
            Finding(
                location=tag.location,
                severity=Severity.ERROR,
                attrs=("ng-options",),
                message=(
                    "Expected expression in form of '_select_ (as _label_)? for (_key_,)?_value_ in _collection_' "
                    f"but got '{options}'. Element: '<{tag.tag_name}>'"
                ),
                rule=self.name,
            )
        )


class NgOptionsTrackByRule:
    """select as and track by cannot be combined in ng-options."""

    name = "ng_options_track_by"

    def evaluate(self, tag: TagSnapshot, settings: LintSettings, result: LintResult) -> None:
        options = tag.attrs.get("ng-options")
        if not options or not SELECT_AS_TRACK_BY_PATTERN.search(options):
            return
        result.add_finding(
            Finding(
                location=tag.location,
                severity=Severity.ERROR,
                attrs=("ng-options",),
                message="Do not use select as and track by in the same expression. They are not designed to work together.",
                rule=self.name,
            )
        )
