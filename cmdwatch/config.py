"""Configuration management for cmdwatch."""

import logging
import socket

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cmdwatch.utils.error import ConfigError
from cmdwatch.utils.interval import (
    DEFAULT_INTERVAL,
    MAX_INTERVAL_SECONDS,
    format_interval,
    parse_interval,
)

logger = logging.getLogger(__name__)

UNKNOWN_HOSTNAME = "unknown"


class WatchSettings(BaseSettings):
    """Defaults read from CMDWATCH_* environment variables."""

    interval: str = DEFAULT_INTERVAL
    no_title: bool = False

    model_config = SettingsConfigDict(
        env_prefix="CMDWATCH_",
        env_file=".envrc",
        env_file_encoding="utf-8",
        extra="ignore",
    )


class WatchConfig(BaseModel):
    """Immutable settings for one watch session, resolved once at startup."""

    model_config = ConfigDict(frozen=True)

    interval_ms: int = Field(default=1000, ge=0, le=MAX_INTERVAL_SECONDS * 1000)
    sub_second: bool = False
    command: tuple[str, ...] = Field(..., min_length=1)
    hostname: str = UNKNOWN_HOSTNAME
    show_title: bool = True

    @field_validator("command")
    @classmethod
    def require_program(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if not v[0]:
            raise ValueError("command name must not be empty")
        return v

    @property
    def interval_label(self) -> str:
        return format_interval(self.interval_ms, self.sub_second)


def get_hostname() -> str:
    """Return the local host name, or a placeholder if it cannot be read."""
    try:
        name = socket.gethostname()
    except OSError as e:
        logger.debug("Could not read hostname: %s", e)
        return UNKNOWN_HOSTNAME
    return name or UNKNOWN_HOSTNAME


def load_config(
    command,
    interval_ms: int | None = None,
    sub_interval_ms: int | None = None,
    no_title: bool | None = None,
    settings: WatchSettings | None = None,
) -> WatchConfig:
    """Build the watch configuration.

    Priority: CLI flag > env var > defaults. ``sub_interval_ms`` wins over
    ``interval_ms`` when both are given.

    Raises:
        ConfigError: If the environment defaults or the final values are invalid
    """
    if settings is None:
        try:
            settings = WatchSettings()
        except ValidationError as e:
            raise ConfigError(_first_error(e)) from e

    if sub_interval_ms is not None:
        millis = sub_interval_ms
    elif interval_ms is not None:
        millis = interval_ms
    else:
        millis = parse_interval(settings.interval)

    if no_title is None:
        no_title = settings.no_title

    try:
        config = WatchConfig(
            interval_ms=millis,
            command=tuple(command),
            hostname=get_hostname(),
            show_title=not no_title,
            sub_second=sub_interval_ms is not None,
        )
    except ValidationError as e:
        raise ConfigError(_first_error(e)) from e

    logger.debug("Loaded config: %s", config)
    return config


def _first_error(err: ValidationError) -> str:
    """Format the first pydantic validation error as 'field: message'."""
    first = err.errors()[0]
    loc = ".".join(str(part) for part in first["loc"])
    return f"{loc}: {first['msg']}" if loc else first["msg"]
