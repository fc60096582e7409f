from __future__ import annotations

import json

from vulnreport.app.cli import app
from vulnreport.infra.yaml_report import read_report, report_to_yaml


def test_cli_help_shows_commands(runner):
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "show" in result.output
    assert "check" in result.output


def test_cli_show_yaml(runner, reports_dir):
    path = reports_dir / "GO-2022-0001.yaml"
    result = runner.invoke(app, ["show", str(path)])
    assert result.exit_code == 0, result.output
    assert result.output == report_to_yaml(read_report(path))


def test_cli_show_json(runner, reports_dir):
    result = runner.invoke(app, ["show", "--json", str(reports_dir / "GO-2022-0001.yaml")])
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["module"] == "golang.org/x/crypto"
    assert data["cves"] == ["CVE-2022-27191"]
    assert data["published"] == "2022-03-15T00:00:00Z"
    assert "withdrawn" not in data


def test_cli_show_invalid_report_exits_1(runner, reports_dir):
    result = runner.invoke(app, ["show", str(reports_dir / "GO-2022-0002.yaml")])
    assert result.exit_code == 1
    assert "unexpected_field" in result.output


def test_cli_check(runner, reports_dir):
    good = str(reports_dir / "GO-2022-0001.yaml")
    bad = str(reports_dir / "GO-2022-0002.yaml")

    result = runner.invoke(app, ["check", good])
    assert result.exit_code == 0, result.output
    assert f"{good}: ok" in result.output

    result = runner.invoke(app, ["check", good, bad, str(reports_dir / "missing.yaml")])
    assert result.exit_code == 1
    assert f"{good}: ok" in result.output
    assert "2 of 3 reports failed" in result.output


def test_cli_log_level_option(runner, reports_dir):
    result = runner.invoke(app, ["--log-level", "debug", "check", str(reports_dir / "GO-2022-0001.yaml")])
    assert result.exit_code == 0, result.output


def test_cli_invalid_log_level_is_usage_error(runner, reports_dir):
    result = runner.invoke(app, ["--log-level", "foo", "check", str(reports_dir / "GO-2022-0001.yaml")])
    assert result.exit_code == 2
    assert not isinstance(result.exception, ValueError)
    assert "foo" in result.output


def test_cli_invalid_log_level_from_env(runner, reports_dir, monkeypatch):
    monkeypatch.setenv("VULNREPORT_LOG_LEVEL", "verbose")
    result = runner.invoke(app, ["check", str(reports_dir / "GO-2022-0001.yaml")])
    assert result.exit_code == 2
    assert "verbose" in result.output
