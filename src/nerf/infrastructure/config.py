"""Application configuration — loaded from environment variables."""

from __future__ import annotations

import logging

from pydantic import Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict, SettingsError

from nerf.domain.exceptions import ConfigInvalidError, ConfigMissingError

DEFAULT_PROMPT_PATH = "~/.config/nerf/prompt"


class Settings(BaseSettings):
    """Central configuration loaded from env vars (or ``.env`` file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    chatgpt_api_key: SecretStr
    log_level: str = "WARNING"
    prompt_path: str = Field(
        default=DEFAULT_PROMPT_PATH, validation_alias="NERF_PROMPT_PATH"
    )
    clipboard_command: list[str] = Field(
        default_factory=lambda: ["xclip", "-selection", "clipboard"],
        validation_alias="NERF_CLIPBOARD_COMMAND",
    )

    @field_validator("log_level")
    @classmethod
    def _must_be_known_level(cls, v: str) -> str:
        level = v.strip().upper()
        # getLevelName returns an int only for registered names
        if not isinstance(logging.getLevelName(level), int):
            msg = f"Unknown log level: '{v}'."
            raise ValueError(msg)
        return level


def load_settings(**overrides: object) -> Settings:
    """Build the settings for one run, translating bad or missing values to domain errors."""
    try:
        return Settings(**overrides)  # type: ignore[arg-type]
    except SettingsError as exc:
        raise ConfigInvalidError(f"Invalid configuration: {exc}") from exc
    except ValidationError as exc:
        missing = [
            str(err["loc"][0]).upper()
            for err in exc.errors()
            if err.get("type") == "missing" and err.get("loc")
        ]
        if missing:
            raise ConfigMissingError(
                f"{', '.join(missing)} not set in environment"
            ) from exc
        raise ConfigInvalidError(f"Invalid configuration: {exc}") from exc
