"""Tests for environment-driven settings."""
from quiz_bot.config import Settings


class TestSettings:
    """Tests for Settings defaults and overrides."""

    def test_defaults(self, monkeypatch):
        """No env — empty token, built-in quiz, INFO logging."""
        for name in ("BOT_TOKEN", "QUIZ_FILE", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.BOT_TOKEN == ""
        assert settings.QUIZ_FILE == ""
        assert settings.LOG_LEVEL == "INFO"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("BOT_TOKEN", "123:abc")
        monkeypatch.setenv("QUIZ_FILE", "data/quiz.json")

        settings = Settings(_env_file=None)

        assert settings.BOT_TOKEN == "123:abc"
        assert settings.QUIZ_FILE == "data/quiz.json"
