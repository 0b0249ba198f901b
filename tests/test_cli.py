import json

from nglint import cli


def make_page(tmp_path, name, content):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return str(path)


def test_cli_reports_errors_in_text_format(tmp_path, capsys):
    page = make_page(tmp_path, "page.html", '<p>\n<div ng-show="a" ng-hide="b">\n')

    exit_code = cli.main([page, "--config", str(tmp_path / "none.yaml")])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert f"{page}:2: error: Mutually exclusive attributes ng-show, ng-hide" in captured.out
    assert "Lint Summary" in captured.out
    assert "Status    : FAIL" in captured.out


def test_cli_generates_json_report(tmp_path, capsys):
    page = make_page(tmp_path, "page.html", '<div ng-init="x">')
    output_path = tmp_path / "reports" / "nglint.json"

    exit_code = cli.main(
        [
            page,
            "--config",
            str(tmp_path / "none.yaml"),
            "--format",
            "json",
            "--out",
            str(output_path),
        ]
    )

    capsys.readouterr()
    assert exit_code == 0
    data = json.loads(output_path.read_text(encoding="utf-8"))
    assert data["summary"] == {"error": 0, "warning": 1}
    assert data["passed"] is True
    assert data["findings"][0]["location"] == f"{page}:1"
    assert data["findings"][0]["type"] == "warning"
    assert data["findings"][0]["attrs"] == ["ng-init"]


def test_cli_fail_on_warning(tmp_path, capsys):
    page = make_page(tmp_path, "page.html", '<div ng-foo="">')

    exit_code = cli.main([page, "--config", str(tmp_path / "none.yaml"), "--fail-on-warning"])

    capsys.readouterr()
    assert exit_code == 1


def test_cli_reads_files_and_ignores_from_config(tmp_path, capsys):
    page = make_page(tmp_path, "page.html", '<div ng-foo="" ng-bar="">')
    config = tmp_path / "nglint.yaml"
    config.write_text(f"files:\n  - {page}\nignore_attributes:\n  - ng-foo\n", encoding="utf-8")

    exit_code = cli.main(["--config", str(config), "--ignore-attribute", "ng-bar"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "Findings  : 0" in captured.out


def test_cli_missing_file_is_system_failure(tmp_path, capsys):
    exit_code = cli.main([str(tmp_path / "missing.html"), "--config", str(tmp_path / "none.yaml")])

    captured = capsys.readouterr()
    assert exit_code == 2
    assert "Cannot read" in captured.err


def test_cli_without_files_is_configuration_failure(tmp_path, capsys):
    exit_code = cli.main(["--config", str(tmp_path / "none.yaml")])

    captured = capsys.readouterr()
    assert exit_code == 2
    assert "Empty files property" in captured.err


def test_cli_non_string_file_entry_is_configuration_failure(tmp_path, capsys):
    config = tmp_path / "nglint.yaml"
    config.write_text("files:\n  - 123\n", encoding="utf-8")

    exit_code = cli.main(["--config", str(config)])

    captured = capsys.readouterr()
    assert exit_code == 2
    assert "list of file names" in captured.err
