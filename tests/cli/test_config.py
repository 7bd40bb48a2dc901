"""Tests for config loading and validation."""

from pathlib import Path

import pytest
import yaml

from cli.config import find_config, load_config, write_default_config
from cli.config_models import MoodConfig


def test_defaults():
    config = MoodConfig()
    assert config.user_id == "local"
    assert config.analytics.trend_days == 30
    assert config.analytics.top_tags == 8
    assert config.suggester.provider == "random"
    assert config.paths.db_path == Path.home() / ".moodtrack" / "mood.db"
    assert config.logging.level == "INFO"


def test_load_from_file(config_file, tmp_path):
    config = load_config(config_file)
    assert config.user_id == "cli-user"
    assert config.paths.db_path == tmp_path / "mood.db"
    assert config.logging.level == "WARNING"


def test_find_config_uses_env_var(config_file):
    assert find_config() == config_file


def test_missing_file_gives_defaults(tmp_path):
    config = load_config(tmp_path / "nope.yaml")
    assert config.user_id == "local"


def test_log_level_normalized(tmp_path):
    path = tmp_path / "c.yaml"
    path.write_text(yaml.safe_dump({"logging": {"level": "debug", "json": True}}))
    config = load_config(path)
    assert config.logging.level == "DEBUG"
    assert config.logging.json_mode is True


@pytest.mark.parametrize(
    "content",
    [
        "logging: {level: LOUD}",
        "analytics: {trend_days: 0}",
        "suggester: {provider: camera}",
        "- just\n- a list",
        "paths: [unclosed",
    ],
)
def test_invalid_config_raises(tmp_path, content):
    path = tmp_path / "bad.yaml"
    path.write_text(content)
    with pytest.raises(ValueError):
        load_config(path)


def test_jwt_secret_env_expansion(tmp_path, monkeypatch):
    monkeypatch.setenv("MY_SECRET", "s3cret")
    path = tmp_path / "c.yaml"
    path.write_text(yaml.safe_dump({"web": {"jwt_secret": "${MY_SECRET}"}}))
    assert load_config(path).web.jwt_secret == "s3cret"


def test_write_default_config_round_trips(tmp_path):
    path = tmp_path / "sub" / "config.yaml"
    write_default_config(path)
    data = yaml.safe_load(path.read_text())
    assert data["logging"]["json"] is False
    assert load_config(path) == MoodConfig()
