"""Configuration management using Pydantic Settings v2."""

import codecs
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from minigrep.config.constants import DEFAULT_ENCODING
from minigrep.core.exceptions import ConfigurationError

# Load .env into os.environ before any settings class is instantiated,
# since the nested sections only search os.environ.
load_dotenv()


class SearchSettings(BaseSettings):
    """Matching configuration.

    ``case_insensitive`` is read from ``CASE_INSENSITIVE`` and is true
    whenever the variable holds any non-empty value.
    """

    case_insensitive: bool = False

    model_config = SettingsConfigDict(env_prefix="")

    @field_validator("case_insensitive", mode="before")
    @classmethod
    def _non_empty_means_enabled(cls, value: Any) -> bool:
        if isinstance(value, str):
            return value != ""
        return bool(value)


class ReadSettings(BaseSettings):
    """Document loading configuration."""

    encoding: str = DEFAULT_ENCODING

    model_config = SettingsConfigDict(env_prefix="MINIGREP_")

    @field_validator("encoding")
    @classmethod
    def _known_codec(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError:
            raise ValueError(f"unknown encoding: {value}") from None
        return value


class Settings(BaseSettings):
    """Root settings class combining all sections."""

    search: SearchSettings = Field(default_factory=SearchSettings)
    read: ReadSettings = Field(default_factory=ReadSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore prefixed env vars handled by nested classes
    )


_settings_instance: Optional[Settings] = None


def _build_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError("Invalid settings", details=str(e)) from e


def get_settings() -> Settings:
    """Return the global Settings instance (singleton pattern).

    Raises:
        ConfigurationError: If an environment value fails validation.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = _build_settings()
    return _settings_instance


def reload_settings() -> Settings:
    """Reload settings from environment (mainly for testing)."""
    global _settings_instance
    _settings_instance = _build_settings()
    return _settings_instance
