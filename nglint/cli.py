"""Command-line entry point for the AngularJS attribute linter."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import List

from .errors import LintError
from .pipeline import lint_files
from .result import LintResult, format_findings, format_summary_table
from .settings import DEFAULT_CONFIG_FILE, LintSettings, load_config_file

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nglint",
        description="Report misused AngularJS binding attributes in HTML templates",
    )
    parser.add_argument(
        "files",
        nargs="*",
        help="HTML files to lint (defaults to the files listed in the config file).",
    )
    parser.add_argument(
        "--config",
        default=DEFAULT_CONFIG_FILE,
        help="YAML file with files, ignore_attributes and file_encoding keys.",
    )
    parser.add_argument(
        "--ignore-attribute",
        "-i",
        dest="ignore_attributes",
        action="append",
        default=[],
        help="Attribute allowed to be empty (repeatable).",
    )
    parser.add_argument(
        "--encoding",
        dest="file_encoding",
        default=None,
        help="Text encoding of the input files (defaults to utf-8).",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Report format (defaults to text).",
    )
    parser.add_argument(
        "--out",
        "--output",
        dest="output_path",
        type=str,
        default=None,
        help="Path to write the JSON report (e.g., artifacts/nglint.json).",
    )
    parser.add_argument(
        "--fail-on-warning",
        action="store_true",
        help="Exit non-zero when only warnings were found.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log progress to stderr.",
    )
    return parser


def resolve_settings(args: argparse.Namespace) -> LintSettings:
    """Merge config-file options with command-line overrides."""

    options = load_config_file(Path(args.config))
    if args.files:
        options["files"] = args.files
    if args.ignore_attributes:
        configured = options.get("ignore_attributes") or []
        if isinstance(configured, str):
            configured = [configured]
        if isinstance(configured, (list, tuple)):
            options["ignore_attributes"] = list(configured) + args.ignore_attributes
    if args.file_encoding:
        options["file_encoding"] = args.file_encoding
    return LintSettings.from_options(options)


def write_output(result: LintResult, output_path: str | None, report_format: str) -> None:
    if report_format == "text":
        findings = format_findings(result)
        if findings:
            print(findings)
            print()
    print(format_summary_table(result))

    if report_format == "json":
        payload = json.dumps(result.to_dict(), indent=2)
        if output_path:
            output_file = Path(output_path)
            output_file.parent.mkdir(parents=True, exist_ok=True)
            output_file.write_text(payload, encoding="utf-8")
            print(f"\nReport written to {output_path}")
        else:
            print("\nJSON Report")
            print(payload)


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        settings = resolve_settings(args)
        findings = asyncio.run(lint_files(settings))
    except LintError as exc:
        logger.debug("Lint run aborted", exc_info=True)
        print(f"nglint: {exc}", file=sys.stderr)
        return 2
    result = LintResult.from_findings(findings)
    write_output(result, args.output_path, args.format)
    return result.exit_code(fail_on_warning=args.fail_on_warning)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
