import asyncio

import pytest

from nglint import pipeline
from nglint.errors import ConfigurationError, FileReadError
from nglint.pipeline import lint, lint_file, lint_files, lint_sync
from nglint.settings import LintSettings
from nglint.utils import fileio

PAGE = (
    "<html>\n"
    "<body>\n"
    '  <div ng-show="a" ng-hide="b"></div>\n'
    "  <form>\n"
    '    <input type="password" ng-trim="false">\n'
    "  </form>\n"
    "</body>\n"
    "</html>\n"
)


def write(tmp_path, name, content, encoding="utf-8"):
    path = tmp_path / name
    path.write_bytes(content.encode(encoding) if isinstance(content, str) else content)
    return str(path)


@pytest.mark.asyncio
async def test_lint_file_reports_findings_with_source_lines(tmp_path):
    path = write(tmp_path, "page.html", PAGE)

    findings = await lint_file(path, LintSettings(files=(path,)))

    assert [(str(f.location), f.severity.value, f.rule) for f in findings] == [
        (f"{path}:3", "error", "mutually_exclusive"),
        (f"{path}:5", "warning", "ng_trim"),
    ]


@pytest.mark.asyncio
async def test_small_read_chunks_do_not_change_attribution(tmp_path, monkeypatch):
    path = write(tmp_path, "page.html", PAGE)
    expected = await lint_file(path, LintSettings(files=(path,)))

    def tiny_chunks(name, encoding="utf-8"):
        return fileio.iter_text_chunks(name, encoding=encoding, chunk_size=3)

    monkeypatch.setattr(pipeline, "iter_text_chunks", tiny_chunks)

    assert await lint_file(path, LintSettings(files=(path,))) == expected


@pytest.mark.asyncio
async def test_crlf_files_keep_line_numbers(tmp_path):
    path = write(tmp_path, "crlf.html", "<p>\r\n\r\n<div ng-init=\"x\">\r\n")

    findings = await lint_file(path, LintSettings(files=(path,)))

    assert [f.location.line for f in findings] == [3]


@pytest.mark.asyncio
async def test_results_follow_submission_order_not_completion_order(tmp_path, monkeypatch):
    first = write(tmp_path, "first.html", '<div ng-init="a">')
    second = write(tmp_path, "second.html", '<div ng-foo="">')
    completed = []
    real_lint_file = pipeline.lint_file

    async def slow_first(path, settings):
        if path == first:
            await asyncio.sleep(0.05)
        findings = await real_lint_file(path, settings)
        completed.append(path)
        return findings

    monkeypatch.setattr(pipeline, "lint_file", slow_first)

    findings = await lint_files(LintSettings(files=(first, second)))

    assert completed == [second, first]
    assert [f.location.path for f in findings] == [first, second]


@pytest.mark.asyncio
async def test_no_files_yields_empty_result():
    assert await lint({"files": []}) == []


@pytest.mark.asyncio
async def test_missing_files_property_fails_before_io(monkeypatch):
    async def unexpected(path, settings):
        raise AssertionError("file pipeline should not run")

    monkeypatch.setattr(pipeline, "lint_file", unexpected)

    with pytest.raises(ConfigurationError):
        await lint({})


@pytest.mark.asyncio
async def test_unreadable_file_fails_whole_run(tmp_path):
    good = write(tmp_path, "good.html", '<div ng-init="a">')
    missing = str(tmp_path / "missing.html")

    with pytest.raises(FileReadError) as excinfo:
        await lint({"files": [good, missing]})

    assert excinfo.value.path == missing


@pytest.mark.asyncio
async def test_undecodable_file_is_read_error(tmp_path):
    path = write(tmp_path, "latin.html", b'<p title="caf\xe9" ng-foo="">')

    with pytest.raises(FileReadError):
        await lint({"files": path})


@pytest.mark.asyncio
async def test_configured_encoding_is_used(tmp_path):
    path = write(tmp_path, "latin.html", '<p title="café" ng-foo="">', encoding="latin-1")

    findings = await lint({"files": path, "file_encoding": "latin-1"})

    assert [f.attrs for f in findings] == [("ng-foo",)]


def test_lint_sync_honours_ignore_attributes(tmp_path):
    path = write(tmp_path, "page.html", '<div ng-foo="" ng-bar="">')

    findings = lint_sync({"files": [path], "ignore_attributes": "ng-foo"})

    assert [f.attrs for f in findings] == [("ng-bar",)]


def test_lint_sync_accepts_camel_case_ignore_attributes(tmp_path):
    path = write(tmp_path, "page.html", '<div ng-foo="" ng-bar="">')

    findings = lint_sync({"files": [path], "ignoreAttributes": ["ng-foo"]})

    assert [f.attrs for f in findings] == [("ng-bar",)]
