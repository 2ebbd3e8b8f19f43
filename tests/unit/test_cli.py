"""Tests for CLI commands."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from qmlkit import __version__
from qmlkit.cli import app


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a temporary directory with QML files and make it the cwd."""
    (tmp_path / "good.qml").write_text('Rectangle {\n  color: "#ff0000"\n}\n')
    (tmp_path / "bad.qml").write_text("Item {\n  Foo ? bar\n}\n")
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestParseCommand:
    def test_otml_output(self, cli_runner: CliRunner, project: Path) -> None:
        result = cli_runner.invoke(app, ["parse", "good.qml", "--format", "otml"])
        assert result.exit_code == 0
        assert "Widget\n  background-color: #ff0000" in result.stdout

    def test_raw_skips_normalization(self, cli_runner: CliRunner, project: Path) -> None:
        result = cli_runner.invoke(app, ["parse", "good.qml", "--format", "otml", "--raw"])
        assert result.exit_code == 0
        assert "Rectangle\n  color: #ff0000" in result.stdout

    def test_json_output(self, cli_runner: CliRunner, project: Path) -> None:
        result = cli_runner.invoke(app, ["parse", "good.qml", "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["tag"] == "doc"
        assert data["children"][0]["tag"] == "Widget"
        assert data["children"][0]["children"][0]["source"] == "good.qml:2"

    def test_tree_output(self, cli_runner: CliRunner, project: Path) -> None:
        result = cli_runner.invoke(app, ["parse", "good.qml"])
        assert result.exit_code == 0
        assert "Widget" in result.stdout
        assert "background-color" in result.stdout

    def test_parse_error(self, cli_runner: CliRunner, project: Path) -> None:
        result = cli_runner.invoke(app, ["parse", "bad.qml"])
        assert result.exit_code == 1
        assert "Parse error" in result.output
        assert "Unexpected character '?'" in result.output

    def test_missing_file(self, cli_runner: CliRunner, project: Path) -> None:
        result = cli_runner.invoke(app, ["parse", "nope.qml"])
        assert result.exit_code == 1
        assert "unable to read file 'nope.qml'" in result.output

    def test_config_components(self, cli_runner: CliRunner, project: Path) -> None:
        (project / "button.qml").write_text('Button { text: "Go" }\n')
        (project / "qmlkit.toml").write_text(
            '[components.Button]\ntag = "PushButton"\nrename = { text = "button-text" }\n'
        )
        result = cli_runner.invoke(app, ["parse", "button.qml", "--format", "otml"])
        assert result.exit_code == 0
        assert "PushButton\n  button-text: Go" in result.stdout

    def test_search_paths_from_config(self, cli_runner: CliRunner, project: Path) -> None:
        (project / "ui").mkdir()
        (project / "ui" / "panel.qml").write_text("Text { text: hi }\n")
        config = project / "custom.toml"
        config.write_text('[resources]\nsearch_paths = ["ui"]\n')
        result = cli_runner.invoke(
            app, ["parse", "panel.qml", "--format", "otml", "--config", str(config)]
        )
        assert result.exit_code == 0
        assert "Label\n  text: hi" in result.stdout

    def test_bad_config(self, cli_runner: CliRunner, project: Path) -> None:
        result = cli_runner.invoke(app, ["parse", "good.qml", "--config", "missing.toml"])
        assert result.exit_code == 1
        assert "Config error" in result.output


class TestCheckCommand:
    def test_all_pass(self, cli_runner: CliRunner, project: Path) -> None:
        result = cli_runner.invoke(app, ["check", "good.qml"])
        assert result.exit_code == 0
        assert "good.qml" in result.stdout

    def test_failure_sets_exit_code(self, cli_runner: CliRunner, project: Path) -> None:
        result = cli_runner.invoke(app, ["check", "good.qml", "bad.qml"])
        assert result.exit_code == 1
        assert "✓ good.qml" in result.output
        assert "✗ bad.qml" in result.output
        assert "1 of 2 file(s) failed" in result.output


class TestVersion:
    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "qmlkit version" in result.stdout
        assert __version__ in result.stdout
        assert __version__ != "0.0.0"
