from __future__ import annotations

from taskassist.core.config import Settings


def test_environment_profiles_apply_defaults() -> None:
    dev = Settings(environment="development")
    assert dev.log_level == "DEBUG"
    assert dev.reload is True
    assert dev.create_tables_on_startup is True
    assert dev.expose_error_messages is True

    test_profile = Settings(environment="test")
    assert test_profile.log_level == "WARNING"
    assert test_profile.reload is False
    assert test_profile.create_tables_on_startup is False

    production = Settings(environment="production")
    assert production.log_level == "INFO"
    assert production.expose_error_messages is False


def test_environment_aliases_are_normalised() -> None:
    assert Settings(environment="DEV").environment == "development"
    assert Settings(environment="prod").environment == "production"
    assert Settings(environment="unknown").environment == "development"


def test_environment_profile_respects_explicit_overrides(monkeypatch) -> None:
    monkeypatch.setenv("TASKASSIST_LOG_LEVEL", "error")
    monkeypatch.setenv("TASKASSIST_EXPOSE_ERROR_MESSAGES", "true")

    overridden = Settings(environment="production")

    assert overridden.log_level == "ERROR"
    assert overridden.expose_error_messages is True


def test_comma_separated_cors_and_positive_limits(monkeypatch) -> None:
    monkeypatch.setenv("TASKASSIST_CORS_ALLOW_ORIGINS", "https://a.example.com, https://b.example.com")

    settings = Settings(environment="test", user_search_limit=0, access_token_expire_minutes="15")

    assert settings.cors_allow_origins == ["https://a.example.com", "https://b.example.com"]
    assert settings.user_search_limit == 1
    assert settings.access_token_expire_minutes == 15
