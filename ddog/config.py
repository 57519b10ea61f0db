from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, Tuple, Union

from dotenv import dotenv_values
from pydantic import AliasChoices, BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

API_KEY_ENV = "DD_API_KEY"
APPLICATION_KEY_ENV = "DD_APPLICATION_KEY"


class Settings(BaseSettings):
    DD_API_KEY: Optional[str] = Field(None, validation_alias=AliasChoices("DD_API_KEY", "DATADOG_API_KEY"))
    DD_APPLICATION_KEY: Optional[str] = Field(
        None, validation_alias=AliasChoices("DD_APPLICATION_KEY", "DD_APP_KEY")
    )

    DDOG_LOG_LEVEL: str = Field("INFO", alias="DDOG_LOG_LEVEL")
    # Enables console logging for builders created from settings
    TRACING_SUBSCRIBER: bool = Field(False, alias="TRACING_SUBSCRIBER")

    model_config = SettingsConfigDict(env_file=".env", populate_by_name=True, extra="ignore")


class EnvConfig(BaseModel):
    """
    Datadog credentials read from environment-style key/value data.

    Only `DD_API_KEY` and `DD_APPLICATION_KEY` are recognised; other keys are
    ignored. A key given without a value yields an empty string.
    """

    api_key: Optional[str] = Field(None, description="DD_API_KEY")
    application_key: Optional[str] = Field(None, description="DD_APPLICATION_KEY")

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, Optional[str]]]) -> "EnvConfig":
        """Build from `(key, value)` pairs, e.g. `[("DD_API_KEY", "<api_key>")]`."""
        api_key = None
        application_key = None
        for key, value in pairs:
            key = key.strip()
            if key == API_KEY_ENV:
                api_key = value or ""
            elif key == APPLICATION_KEY_ENV:
                application_key = value or ""
        return cls(api_key=api_key, application_key=application_key)

    @classmethod
    def from_strings(cls, items: Iterable[str]) -> "EnvConfig":
        """Build from `key=value` strings, e.g. `["DD_API_KEY=<api_key>"]`."""
        pairs = []
        for item in items:
            key, _, value = item.strip().partition("=")
            pairs.append((key, value.strip()))
        return cls.from_pairs(pairs)

    @classmethod
    def from_string(cls, value: str) -> "EnvConfig":
        """Build from a comma-separated string: `DD_API_KEY=a,DD_APPLICATION_KEY=b`."""
        return cls.from_strings(value.split(","))

    @classmethod
    def from_dotenv(cls, path: Optional[Union[str, Path]] = None) -> "EnvConfig":
        """Build from a dotenv file (defaults to `.env` in the working directory)."""
        return cls.from_pairs(dotenv_values(path or ".env").items())

    @classmethod
    def from_settings(cls, settings: Settings) -> "EnvConfig":
        return cls(api_key=settings.DD_API_KEY, application_key=settings.DD_APPLICATION_KEY)

    @classmethod
    def parse(cls, value: Any) -> "EnvConfig":
        """Build from a string, a list of `key=value` strings, pairs, or a mapping."""
        if value is None:
            return cls()
        if isinstance(value, str):
            return cls.from_string(value)
        if isinstance(value, Mapping):
            return cls.from_pairs(value.items())
        items = list(value)
        if all(isinstance(item, str) for item in items):
            return cls.from_strings(items)
        return cls.from_pairs(items)


settings = Settings()
