"""Static linter for AngularJS template-binding attributes in HTML."""

from importlib.metadata import version, PackageNotFoundError

from .errors import ConfigurationError, FileReadError, LintError, ParseError
from .pipeline import lint, lint_file, lint_files, lint_sync
from .result import Finding, LintResult, Location
from .settings import LintSettings
from .severity import Severity

try:
    __version__ = version("ng-attr-lint")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.1.0-dev"

__all__ = [
    "__version__",
    "ConfigurationError",
    "FileReadError",
    "Finding",
    "LintError",
    "LintResult",
    "LintSettings",
    "Location",
    "ParseError",
    "Severity",
    "lint",
    "lint_file",
    "lint_files",
    "lint_sync",
]
