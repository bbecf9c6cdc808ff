"""Tests for settings loading."""

import pytest

from infrastructure.config import Settings, load_settings

ENV_VARS = ("PLAYGROUND_LOG_LEVEL", "PLAYGROUND_LOG_FILE", "PLAYGROUND_RANDOM_SEED")


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Remove playground variables and point at an empty .env file."""
    for name in ENV_VARS:
        # setenv first so the original state is restored on teardown
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    env_file = tmp_path / ".env"
    env_file.write_text("")
    return env_file


class TestLoadSettings:
    """Test load_settings."""

    def test_defaults(self, clean_env):
        settings = load_settings(clean_env)
        assert settings == Settings(log_level="warning", log_file=None, random_seed=None)

    def test_from_environment(self, clean_env, monkeypatch):
        """Test reading every variable from the environment."""
        monkeypatch.setenv("PLAYGROUND_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("PLAYGROUND_LOG_FILE", "/tmp/playground.log")
        monkeypatch.setenv("PLAYGROUND_RANDOM_SEED", "42")

        settings = load_settings(clean_env)

        assert settings.log_level == "debug"
        assert settings.log_file == "/tmp/playground.log"
        assert settings.random_seed == 42

    def test_from_env_file(self, clean_env):
        """Test reading variables from a .env file."""
        clean_env.write_text("PLAYGROUND_LOG_LEVEL=info\nPLAYGROUND_RANDOM_SEED=7\n")

        settings = load_settings(clean_env)

        assert settings.log_level == "info"
        assert settings.random_seed == 7

    def test_environment_wins_over_env_file(self, clean_env, monkeypatch):
        clean_env.write_text("PLAYGROUND_LOG_LEVEL=info\n")
        monkeypatch.setenv("PLAYGROUND_LOG_LEVEL", "error")

        assert load_settings(clean_env).log_level == "error"

    def test_unknown_log_level(self, clean_env, monkeypatch):
        monkeypatch.setenv("PLAYGROUND_LOG_LEVEL", "verbose")
        with pytest.raises(ValueError, match="Unknown log level"):
            load_settings(clean_env)

    def test_invalid_seed(self, clean_env, monkeypatch):
        monkeypatch.setenv("PLAYGROUND_RANDOM_SEED", "abc")
        with pytest.raises(ValueError, match="must be an integer"):
            load_settings(clean_env)
