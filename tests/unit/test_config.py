"""Tests for qmlkit.toml loading and environment overrides."""

import os
from pathlib import Path

import pytest

from qmlkit.core.config import load_config
from qmlkit.core.errors import ConfigError
from qmlkit.core.normalizer import COMPONENT_RULES, ChildRename, ComponentRule


class TestDefaults:
    def test_no_config_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        config = load_config()
        assert config.path is None
        assert config.resources.search_paths == []
        assert config.resources.encoding == "utf-8"
        assert config.logging.level == "WARNING"
        assert config.component_rules() == COMPONENT_RULES

    def test_picks_up_cwd_config(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "qmlkit.toml").write_text('[logging]\nlevel = "info"\n')
        monkeypatch.chdir(tmp_path)
        config = load_config()
        assert config.path.resolve() == (tmp_path / "qmlkit.toml").resolve()
        assert config.logging.level == "INFO"


class TestToml:
    def test_full_file(self, tmp_path: Path) -> None:
        path = tmp_path / "qmlkit.toml"
        path.write_text(
            """
[resources]
search_paths = ["ui", "modules"]
encoding = "latin-1"

[components.Button]
tag = "PushButton"
rename = { text = "button-text" }
"""
        )
        config = load_config(path)
        assert config.resources.search_paths == ["ui", "modules"]
        assert config.resources.encoding == "latin-1"
        assert config.components["Button"] == ComponentRule(
            "PushButton", (ChildRename("text", "button-text"),)
        )

        rules = config.component_rules()
        assert rules["Button"].tag == "PushButton"
        assert rules["Rectangle"] == COMPONENT_RULES["Rectangle"]

    def test_component_overrides_builtin(self, tmp_path: Path) -> None:
        path = tmp_path / "qmlkit.toml"
        path.write_text('[components.Text]\ntag = "RichLabel"\n')
        rules = load_config(path).component_rules()
        assert rules["Text"] == ComponentRule("RichLabel")

    def test_search_paths_relative_to_config(self, tmp_path: Path) -> None:
        (tmp_path / "ui").mkdir()
        (tmp_path / "ui" / "main.qml").write_text("Item {}")
        path = tmp_path / "qmlkit.toml"
        path.write_text('[resources]\nsearch_paths = ["ui"]\n')

        resources = load_config(path).resource_manager()
        assert resources.resolve("main.qml") == tmp_path / "ui" / "main.qml"

    def test_missing_explicit_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "nope.toml")

    def test_malformed_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "qmlkit.toml"
        path.write_text("[resources\nsearch_paths = ")
        with pytest.raises(ConfigError, match="Invalid config file"):
            load_config(path)

    def test_component_without_tag(self, tmp_path: Path) -> None:
        path = tmp_path / "qmlkit.toml"
        path.write_text('[components.Button]\nrename = { text = "t" }\n')
        with pytest.raises(ConfigError, match="needs a 'tag'"):
            load_config(path)

    @pytest.mark.parametrize(
        "content,message",
        [
            ("resources = 5\n", "'resources' must be a table"),
            ('components = "x"\n', "'components' must be a table"),
            ('logging = ["debug"]\n', "'logging' must be a table"),
            ('[resources]\nsearch_paths = "ui"\n', "must be a list of paths"),
        ],
    )
    def test_wrong_section_types(self, tmp_path: Path, content: str, message: str) -> None:
        path = tmp_path / "qmlkit.toml"
        path.write_text(content)
        with pytest.raises(ConfigError, match=message):
            load_config(path)


class TestEnvironment:
    def test_search_path_override(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        a = tmp_path / "a"
        b = tmp_path / "b"
        monkeypatch.setenv("QMLKIT_SEARCH_PATH", f"{a}{os.pathsep}{b}")
        monkeypatch.chdir(tmp_path)
        config = load_config()
        assert config.resources.search_paths == [str(a.resolve()), str(b.resolve())]

    def test_env_beats_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = tmp_path / "qmlkit.toml"
        path.write_text('[logging]\nlevel = "ERROR"\n')
        monkeypatch.setenv("QMLKIT_LOG_LEVEL", "debug")
        assert load_config(path).logging.level == "DEBUG"
