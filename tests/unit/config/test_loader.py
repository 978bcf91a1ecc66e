"""Tests for treeshell.config.loader and schema modules."""

import json
import os
from pathlib import Path

import pytest
from pydantic import ValidationError

from treeshell.config import ShellConfig, load_config
from treeshell.core.errors import ConfigError


@pytest.fixture
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point Path.home() at an empty temporary directory."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: home_dir))
    return home_dir


@pytest.fixture
def project(tmp_path: Path) -> Path:
    project_dir = tmp_path / "project"
    project_dir.mkdir()
    return project_dir


def _write_config(base: Path, data: dict) -> Path:
    config_dir = base / ".treeshell"
    config_dir.mkdir(exist_ok=True)
    path = config_dir / "config.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestShellConfig:
    """Tests for the ShellConfig model."""

    def test_defaults(self):
        config = ShellConfig()
        assert config.prompt == "# "
        assert config.edit_mode == "emacs"
        assert config.complete_style == "readline"
        assert config.history_file is None
        assert config.confirm_exit is True
        assert config.log_level == "warning"
        assert config.log_file is None

    def test_unknown_key_rejected(self):
        with pytest.raises(ValidationError):
            ShellConfig.model_validate({"promt": "> "})

    def test_log_level_off_accepted(self):
        assert ShellConfig(log_level="off").log_level == "off"

    def test_bad_edit_mode_rejected(self):
        with pytest.raises(ValidationError):
            ShellConfig(edit_mode="nano")

    def test_paths_expand_user(self):
        config = ShellConfig(history_file="~/hist", log_file="~/logs/shell.log")
        assert config.history_file == os.path.expanduser("~/hist")
        assert not config.log_file.startswith("~")


class TestLoadConfig:
    """Tests for load_config layering."""

    def test_no_files_gives_defaults(self, home, project):
        assert load_config(cwd=project) == ShellConfig()

    def test_global_layer(self, home, project):
        _write_config(home, {"prompt": "g> "})
        assert load_config(cwd=project).prompt == "g> "

    def test_local_overrides_global(self, home, project):
        _write_config(home, {"prompt": "g> ", "edit_mode": "vi"})
        _write_config(project, {"prompt": "p> "})

        config = load_config(cwd=project)

        assert config.prompt == "p> "
        assert config.edit_mode == "vi"

    def test_cwd_is_home(self, home):
        """The home directory is read once when it is also the cwd."""
        _write_config(home, {"prompt": "h> "})
        assert load_config(cwd=home).prompt == "h> "

    def test_invalid_json_raises_config_error(self, home, project):
        config_dir = project / ".treeshell"
        config_dir.mkdir()
        (config_dir / "config.json").write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigError) as exc_info:
            load_config(cwd=project)

        assert "Invalid JSON" in exc_info.value.message

    def test_validation_error_names_sources(self, home, project):
        path = _write_config(project, {"log_level": "chatty"})

        with pytest.raises(ConfigError) as exc_info:
            load_config(cwd=project)

        assert str(path) in exc_info.value.message

    def test_explicit_path_skips_layers(self, home, project, tmp_path):
        _write_config(home, {"prompt": "g> "})
        explicit = tmp_path / "custom.json"
        explicit.write_text('{"confirm_exit": false}', encoding="utf-8")

        config = load_config(explicit, cwd=project)

        assert config.confirm_exit is False
        assert config.prompt == "# "

    def test_explicit_missing_path(self, tmp_path):
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.json")
        assert "Config file not found" in exc_info.value.message

    def test_explicit_path_validation_error(self, tmp_path):
        explicit = tmp_path / "custom.json"
        explicit.write_text('{"edit_mode": "nano"}', encoding="utf-8")

        with pytest.raises(ConfigError) as exc_info:
            load_config(explicit)

        assert "Config validation failed" in exc_info.value.message


class TestConfigFileParsing:
    """Tests for reading a single config file."""

    def test_blank_file_gives_defaults(self, tmp_path):
        explicit = tmp_path / "blank.json"
        explicit.write_text("  \n\t ", encoding="utf-8")
        assert load_config(explicit) == ShellConfig()

    def test_utf8_bom_is_accepted(self, tmp_path):
        """Files saved with a BOM by Windows editors still load."""
        explicit = tmp_path / "bom.json"
        explicit.write_bytes(b'\xef\xbb\xbf{"prompt": "$ "}')
        assert load_config(explicit).prompt == "$ "

    @pytest.mark.parametrize("content", ["[1, 2]", '"text"', "42"])
    def test_non_object_rejected(self, tmp_path, content):
        explicit = tmp_path / "scalar.json"
        explicit.write_text(content, encoding="utf-8")

        with pytest.raises(ConfigError) as exc_info:
            load_config(explicit)

        assert "Expected object" in exc_info.value.message

    def test_directory_is_not_a_config_file(self, tmp_path):
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_blank_local_layer_keeps_global(self, home, project):
        _write_config(home, {"prompt": "g> "})
        local_dir = project / ".treeshell"
        local_dir.mkdir()
        (local_dir / "config.json").write_text("", encoding="utf-8")

        assert load_config(cwd=project).prompt == "g> "
