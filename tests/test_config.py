import pydantic
import pytest

from milk_subscriptions import config
from milk_subscriptions.config import Settings, get_settings

ENV_VARS = ("APP_NAME", "PORT", "HOST", "LOG_LEVEL", "CORS_ORIGINS", "CALENDAR_TIMEZONE")


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = Settings(_env_file=None)
    assert settings.port == 3000
    assert settings.host == "0.0.0.0"
    assert settings.log_level == "INFO"
    assert settings.cors_origins == ["*"]
    assert settings.calendar_timezone == "UTC"


def test_port_override_from_environment(clean_env):
    clean_env.setenv("PORT", "8080")
    assert Settings(_env_file=None).port == 8080


def test_port_out_of_range_is_rejected(clean_env):
    clean_env.setenv("PORT", "70000")
    with pytest.raises(pydantic.ValidationError):
        Settings(_env_file=None)


def test_cors_origins_are_comma_separated(clean_env):
    clean_env.setenv("CORS_ORIGINS", "http://a.test, http://b.test,")
    assert Settings(_env_file=None).cors_origins == ["http://a.test", "http://b.test"]


def test_log_level_is_normalized(clean_env):
    clean_env.setenv("LOG_LEVEL", "debug")
    assert Settings(_env_file=None).log_level == "DEBUG"


def test_unknown_log_level_is_rejected(clean_env):
    clean_env.setenv("LOG_LEVEL", "chatty")
    with pytest.raises(pydantic.ValidationError):
        Settings(_env_file=None)


def test_calendar_timezone(clean_env):
    clean_env.setenv("CALENDAR_TIMEZONE", "America/New_York")
    settings = Settings(_env_file=None)
    assert settings.calendar_tz.key == "America/New_York"


def test_unknown_calendar_timezone_is_rejected(clean_env):
    clean_env.setenv("CALENDAR_TIMEZONE", "Mars/Olympus_Mons")
    with pytest.raises(pydantic.ValidationError):
        Settings(_env_file=None)


def test_settings_are_built_lazily_through_the_cached_accessor():
    assert not hasattr(config, "settings")
    assert get_settings() is get_settings()
