import pytest

from brainstormer.config.settings import load_settings
from brainstormer.core.errors import ConfigurationError


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("API_KEY", raising=False)
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)


def test_missing_api_key_is_fatal():
    with pytest.raises(ConfigurationError, match="API_KEY"):
        load_settings(_env_file=None)


def test_blank_api_key_is_fatal(monkeypatch):
    monkeypatch.setenv("API_KEY", "   ")
    with pytest.raises(ConfigurationError):
        load_settings(_env_file=None)


def test_api_key_from_environment(monkeypatch):
    monkeypatch.setenv("API_KEY", "abc123")
    settings = load_settings(_env_file=None)
    assert settings.api_key == "abc123"
    assert settings.gemini_model == "gemini-2.5-flash"
    assert settings.feedback_warn_threshold == 50


def test_gemini_api_key_alias(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "from-alias")
    assert load_settings(_env_file=None).api_key == "from-alias"


def test_overrides(monkeypatch):
    monkeypatch.setenv("API_KEY", "abc123")
    monkeypatch.setenv("GEMINI_MODEL", "gemini-2.0-flash")
    assert load_settings(_env_file=None).gemini_model == "gemini-2.0-flash"


def test_unrelated_error_is_not_blamed_on_api_key(monkeypatch):
    monkeypatch.setenv("API_KEY", "abc123")
    monkeypatch.setenv("API_PORT", "abc")
    with pytest.raises(ConfigurationError) as exc:
        load_settings(_env_file=None)
    assert "API_PORT" in str(exc.value)
    assert "API_KEY" not in str(exc.value)


def test_missing_key_and_bad_value_both_reported(monkeypatch):
    monkeypatch.setenv("MAX_SESSIONS", "0")
    with pytest.raises(ConfigurationError) as exc:
        load_settings(_env_file=None)
    assert "API_KEY environment variable not set" in str(exc.value)
    assert "MAX_SESSIONS" in str(exc.value)
