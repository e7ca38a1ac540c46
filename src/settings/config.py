from __future__ import annotations

from pathlib import Path
from typing import Any

import tomllib
from pydantic import BaseModel, ConfigDict, Field, field_validator

CONFIG_FILENAME = "fixture.toml"

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class FixtureConfig(BaseModel):
    """Configuration for the scripting fixture."""

    model_config = ConfigDict(extra="forbid")

    namespace: str = Field(
        default="Tests",
        description="Namespace the fixture's types are declared under",
    )
    reject_non_finite: bool = Field(
        default=False,
        description="Raise instead of allowing increments to overflow to inf/nan",
    )
    log_level: str = Field(
        default="WARNING",
        description="Level applied to the fixture's loggers",
    )

    @field_validator("namespace")
    @classmethod
    def validate_namespace(cls, v: str) -> str:
        if not v or not all(part.isidentifier() for part in v.split(".")):
            msg = f"namespace must be a dotted identifier, got {v!r}"
            raise ValueError(msg)
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: Any) -> Any:
        """Normalize the level name and reject anything logging doesn't know.

        Runs in `mode="before"` so lowercase TOML values are accepted.
        """
        if not isinstance(v, str):
            msg = "log_level must be a string"
            raise TypeError(msg)

        level = v.upper()
        if level not in VALID_LOG_LEVELS:
            msg = (
                f"Invalid log_level '{v}'. "
                f"Valid levels: {', '.join(sorted(VALID_LOG_LEVELS))}"
            )
            raise ValueError(msg)
        return level


class ConfigError(Exception):
    """Raised when config file exists but cannot be parsed."""


def load_config(root: Path) -> FixtureConfig:
    """Load configuration from fixture.toml if it exists."""
    config_path = Path(root) / CONFIG_FILENAME

    if not config_path.is_file():
        return FixtureConfig()

    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {config_path}: {e}"
        raise ConfigError(msg) from e

    try:
        return FixtureConfig.model_validate(data)
    except Exception as e:
        msg = f"Invalid config in {config_path}: {e}"
        raise ConfigError(msg) from e
