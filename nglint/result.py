"""Core result data structures for the linter."""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Dict, Iterable, List, Sequence, Tuple

from .severity import Severity

SEVERITY_ORDER: Sequence[Severity] = (
    Severity.ERROR,
    Severity.WARNING,
)


@dataclass(frozen=True)
class Location:
    """A 1-based line inside one source file."""

    path: str
    line: int

    @classmethod
    def parse(cls, marker: str) -> "Location":
        """Build a location from a ``<path>:<line>`` marker value."""

        path, sep, line = marker.rpartition(":")
        if not sep or not line.isdigit():
            raise ValueError(f"Malformed location marker {marker!r}")
        return cls(path=path, line=int(line))

    def __str__(self) -> str:
        return f"{self.path}:{self.line}"


@dataclass(frozen=True)
class Finding:
    """Capture a single rule evaluation result."""

    location: Location
    severity: Severity
    attrs: Tuple[str, ...]
    message: str
    rule: str

    def to_dict(self) -> Dict[str, object]:
        return {
            "location": str(self.location),
            "type": self.severity.value,
            "attrs": list(self.attrs),
            "message": self.message,
            "rule": self.rule,
        }


@dataclass
class Summary:
    """Aggregate finding counts by severity."""

    error: int = 0
    warning: int = 0

    def increment(self, severity: Severity) -> None:
        attr = severity.value
        setattr(self, attr, getattr(self, attr) + 1)

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)

    def as_rows(self) -> List[Tuple[str, int]]:
        """Return severity/count pairs ordered for reporting."""

        return [(severity.value, getattr(self, severity.value)) for severity in SEVERITY_ORDER]

    @property
    def total(self) -> int:
        return sum(getattr(self, severity.value) for severity in SEVERITY_ORDER)


@dataclass
class LintResult:
    """Bundle lint summary and the ordered findings list."""

    summary: Summary = field(default_factory=Summary)
    findings: List[Finding] = field(default_factory=list)

    @classmethod
    def from_findings(cls, findings: Iterable[Finding]) -> "LintResult":
        result = cls()
        for finding in findings:
            result.add_finding(finding)
        return result

    @property
    def passed(self) -> bool:
        return self.summary.error == 0

    def add_finding(self, finding: Finding) -> None:
        self.summary.increment(finding.severity)
        self.findings.append(finding)

    def to_dict(self) -> Dict[str, object]:
        return {
            "summary": self.summary.to_dict(),
            "findings": [finding.to_dict() for finding in self.findings],
            "passed": self.passed,
        }

    def exit_code(self, fail_on_warning: bool = False) -> int:
        if self.summary.error > 0:
            return 1
        if fail_on_warning and self.summary.warning > 0:
            return 1
        return 0


def format_summary_table(result: LintResult) -> str:
    """Create a human-readable summary table for console output."""

    lines: List[str] = []
    lines.append("Lint Summary")
    lines.append("=" * 40)
    header = f"{'Severity':<10} | {'Count':>5}"
    lines.append(header)
    lines.append("-" * len(header))
    for severity, count in result.summary.as_rows():
        lines.append(f"{severity:<10} | {count:>5}")
    lines.append("-" * len(header))
    status = "PASS" if result.passed else "FAIL"
    lines.append(f"Status    : {status}")
    lines.append(f"Findings  : {result.summary.total}")
    return "\n".join(lines)


def format_findings(result: LintResult) -> str:
    """Render one ``path:line: type: message`` line per finding."""

    return "\n".join(
        f"{finding.location}: {finding.severity.value}: {finding.message}" for finding in result.findings
    )
