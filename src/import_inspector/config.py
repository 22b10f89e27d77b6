"""Runtime settings read from the environment."""

import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from import_inspector.errors import ConfigurationError

DEFAULT_SCANNERS = ["script-metadata", "ast"]

ENV_PREFIX = "IMPORT_INSPECTOR_"


class Settings(BaseModel):
    """Settings shared by both command-line scripts."""

    scanners: list[str] = Field(default_factory=lambda: list(DEFAULT_SCANNERS))
    encoding: str = "utf-8"
    log_level: str = "WARNING"

    @field_validator("scanners")
    @classmethod
    def _non_empty(cls, value: list[str]) -> list[str]:
        names = [v.strip() for v in value if v.strip()]
        if not names:
            raise ValueError("at least one scanner name is required")
        return names

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``IMPORT_INSPECTOR_*`` variables."""
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}
        scanners = env.get(ENV_PREFIX + "SCANNERS")
        if scanners is not None:
            values["scanners"] = scanners.split(",")
        encoding = env.get(ENV_PREFIX + "ENCODING")
        if encoding:
            values["encoding"] = encoding
        log_level = env.get(ENV_PREFIX + "LOG_LEVEL")
        if log_level:
            values["log_level"] = log_level
        return cls.build(**values)

    @classmethod
    def build(cls, **values: object) -> "Settings":
        """Validate ``values``, turning pydantic errors into ConfigurationError."""
        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigurationError(str(e)) from e

    def with_overrides(self, **overrides: object) -> "Settings":
        """Return a copy with the non-None ``overrides`` applied."""
        values = self.model_dump()
        values.update({k: v for k, v in overrides.items() if v is not None})
        return Settings.build(**values)
