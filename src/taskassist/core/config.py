"""Application settings powered by ``pydantic-settings``."""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Any, Literal, Sequence

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from .. import __version__ as package_version

EnvironmentName = Literal["development", "test", "production"]

_ENVIRONMENT_ALIASES: dict[str, EnvironmentName] = {
    "development": "development",
    "dev": "development",
    "test": "test",
    "testing": "test",
    "production": "production",
    "prod": "production",
}

_ENVIRONMENT_PROFILES: dict[EnvironmentName, dict[str, Any]] = {
    "development": {
        "log_level": "DEBUG",
        "reload": True,
        "create_tables_on_startup": True,
        "expose_error_messages": True,
    },
    "test": {
        "log_level": "WARNING",
        "reload": False,
        "create_tables_on_startup": False,
        "expose_error_messages": True,
    },
    "production": {
        "log_level": "INFO",
        "reload": False,
        "create_tables_on_startup": False,
        "expose_error_messages": False,
    },
}


class Settings(BaseSettings):
    """Runtime configuration for the TaskAssist service."""

    model_config = SettingsConfigDict(
        env_prefix="TASKASSIST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    project_name: str = "TaskAssist"
    environment: EnvironmentName = Field(default="development")
    api_prefix: str = Field(default="/api")
    version: str = Field(default=package_version)
    database_url: str = Field(default="sqlite+aiosqlite:///./taskassist.db")
    db_echo: bool = Field(default=False)
    create_tables_on_startup: bool = Field(default=True)
    cors_allow_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"],
    )
    cors_allow_credentials: bool = Field(default=True)
    cors_allow_methods: Annotated[list[str], NoDecode] = Field(default_factory=lambda: ["*"])
    cors_allow_headers: Annotated[list[str], NoDecode] = Field(default_factory=lambda: ["*"])
    app_host: str = Field(default="0.0.0.0")
    app_port: int = Field(default=8000)
    log_level: str = Field(default="INFO")
    reload: bool = Field(default=True)
    expose_error_messages: bool = Field(default=True)

    jwt_secret_key: str = Field(default="change-me")
    jwt_algorithm: str = Field(default="HS256")
    access_token_expire_minutes: int = Field(default=60 * 24)
    user_search_limit: int = Field(default=10)

    @field_validator("environment", mode="before")
    @classmethod
    def _normalise_environment(cls, value: object) -> EnvironmentName:
        if isinstance(value, str):
            normalized = value.strip().lower()
        else:
            normalized = ""
        return _ENVIRONMENT_ALIASES.get(normalized, "development")

    @field_validator(
        "cors_allow_origins",
        "cors_allow_methods",
        "cors_allow_headers",
        mode="before",
    )
    @classmethod
    def _coerce_comma_separated(cls, value: object) -> list[str]:
        """Allow comma separated strings for CORS configuration."""

        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        if isinstance(value, Sequence):
            return [str(item) for item in value if str(item).strip()]
        return []

    @field_validator("access_token_expire_minutes", "user_search_limit", mode="before")
    @classmethod
    def _ensure_positive(cls, value: object) -> int:
        try:
            parsed = int(value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return 1
        return max(parsed, 1)

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_log_level(cls, value: object) -> str:
        if not isinstance(value, str):
            return "INFO"
        return value.upper()

    @model_validator(mode="after")
    def _apply_environment_profile(self) -> "Settings":
        profile = _ENVIRONMENT_PROFILES[self.environment]
        fields_set = set(self.model_fields_set)
        for field_name, value in profile.items():
            if field_name not in fields_set:
                setattr(self, field_name, value)
        return self


@lru_cache()
def get_settings() -> Settings:
    """Return a cached ``Settings`` instance."""

    return Settings()


__all__ = ["EnvironmentName", "Settings", "get_settings"]
