from pathlib import Path

import pytest

from wakti.config import Config

_ENV_VARS = ("LOG_LEVEL", "WAKTI_LANGUAGE")


@pytest.fixture
def clean_env(monkeypatch):
    """Clear config variables and restore them after values loaded from .env files.

    Setting before deleting makes monkeypatch record the original state, so
    anything python-dotenv writes into os.environ is undone on teardown.
    """
    for name in _ENV_VARS:
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)
    return monkeypatch


def test_config_defaults(clean_env, tmp_path: Path) -> None:
    config = Config.from_env(tmp_path / "missing.env")

    assert config == Config(log_level="INFO", language="en")


def test_config_reads_environment(clean_env, tmp_path: Path) -> None:
    clean_env.setenv("LOG_LEVEL", "debug")
    clean_env.setenv("WAKTI_LANGUAGE", " AR ")

    config = Config.from_env(tmp_path / "missing.env")

    assert config == Config(log_level="DEBUG", language="ar")


def test_config_reads_env_file(clean_env, tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("LOG_LEVEL=warning\nWAKTI_LANGUAGE=ar\n", encoding="utf-8")

    config = Config.from_env(env_file)

    assert config == Config(log_level="WARNING", language="ar")


def test_config_invalid_log_level(clean_env, tmp_path: Path) -> None:
    clean_env.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(ValueError, match="LOG_LEVEL"):
        Config.from_env(tmp_path / "missing.env")


def test_config_invalid_language(clean_env, tmp_path: Path) -> None:
    clean_env.setenv("WAKTI_LANGUAGE", "fr")

    with pytest.raises(ValueError, match="WAKTI_LANGUAGE"):
        Config.from_env(tmp_path / "missing.env")
