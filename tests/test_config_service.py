"""Tests for configuration loading."""

from pathlib import Path

import pytest

from deploy_pipeline.exceptions import ConfigError
from deploy_pipeline.models import Config
from deploy_pipeline.services import ConfigService, load_config


def test_defaults_without_file(tmp_path) -> None:
    config = ConfigService(environ={}, working_dir=tmp_path).load_config()

    assert config.state_dir == "~/.deploy-pipeline"
    assert config.non_interactive is False
    assert config.log_level == "WARNING"
    assert config.config_file is None


def test_project_file_is_discovered(tmp_path, monkeypatch) -> None:
    (tmp_path / ".deploy-pipeline.yaml").write_text(
        "state_dir: ${STATE_ROOT}/state\nlog_level: info\n", encoding="utf-8"
    )
    monkeypatch.setenv("STATE_ROOT", str(tmp_path))

    config = ConfigService(environ={}, working_dir=tmp_path).load_config()

    assert config.state_path == tmp_path / "state"
    assert config.log_level == "INFO"
    assert config.config_file == str(tmp_path / ".deploy-pipeline.yaml")


def test_environment_overrides_file(tmp_path) -> None:
    config_file = tmp_path / "custom.yaml"
    config_file.write_text("state_dir: /from/file\nnon_interactive: false\n", encoding="utf-8")
    environ = {
        "DEPLOY_PIPELINE_CONFIG": str(config_file),
        "DEPLOY_PIPELINE_STATE_DIR": str(tmp_path / "env"),
        "DEPLOY_PIPELINE_NON_INTERACTIVE": "yes",
        "DEPLOY_PIPELINE_LOG_LEVEL": "debug",
    }

    config = load_config(environ=environ)

    assert config.state_dir == str(tmp_path / "env")
    assert config.non_interactive is True
    assert config.log_level == "DEBUG"


def test_missing_explicit_file(tmp_path) -> None:
    with pytest.raises(ConfigError):
        ConfigService(config_path=tmp_path / "absent.yaml", environ={}).load_config()


@pytest.mark.parametrize("content", ["state_dir: [\n", "- a\n- b\n", "log_level: LOUD\n"])
def test_invalid_files(tmp_path, content: str) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError):
        ConfigService(config_path=path, environ={}).load_config()


def test_config_round_trip() -> None:
    config = Config(state_dir="/tmp/state", non_interactive=True, log_level="error")
    assert Config.from_dict(config.to_dict()) == config
    assert config.state_path == Path("/tmp/state")


@pytest.mark.parametrize(("value", "expected"), [("'false'", False), ("'no'", False), ("'on'", True)])
def test_quoted_boolean_words_in_file(tmp_path, value: str, expected: bool) -> None:
    """Quoted true/false words are parsed, not treated as any non-empty string."""
    path = tmp_path / "config.yaml"
    path.write_text(f"non_interactive: {value}\n", encoding="utf-8")

    config = ConfigService(config_path=path, environ={}).load_config()

    assert config.non_interactive is expected


def test_unset_variable_in_boolean_setting_is_rejected(tmp_path, monkeypatch) -> None:
    """An unexpanded ${VAR} must not switch off the confirmation prompt."""
    monkeypatch.delenv("UNSET_NONINTERACTIVE_FLAG", raising=False)
    path = tmp_path / "config.yaml"
    path.write_text("non_interactive: ${UNSET_NONINTERACTIVE_FLAG}\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        ConfigService(config_path=path, environ={}).load_config()


def test_invalid_environment_boolean_is_rejected(tmp_path) -> None:
    environ = {"DEPLOY_PIPELINE_NON_INTERACTIVE": "maybe"}

    with pytest.raises(ConfigError):
        ConfigService(environ=environ, working_dir=tmp_path).load_config()
