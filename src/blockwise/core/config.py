import json
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from blockwise.logger.logger import logger, resolve_level, trace_logger

__all__ = ["Settings", "settings", "trace"]

ENV_PREFIX = "BLOCKWISE_"


class Settings(BaseModel):
    strict_map: bool = Field(
        True, description="Raise when a map transform returns None."
    )
    trace: bool = Field(False, description="Log a DEBUG summary for every call.")
    log_level: str = Field("WARNING", description="Level of the blockwise logger.")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        resolve_level(value)
        return value.upper()

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Settings":
        """Build settings from an optional JSON file, then environment overrides."""
        config_path = path or Path().home() / ".blockwise.json"

        values = {}
        if config_path.exists():
            with open(config_path, "r") as f:
                values.update(json.load(f))

        for name in cls.model_fields:
            env_value = os.getenv(ENV_PREFIX + name.upper())
            if env_value is not None:
                values[name] = env_value

        return cls(**values)

    def apply(self) -> None:
        """Set the package logger to ``log_level``."""
        logger.setLevel(resolve_level(self.log_level))


def trace(message: str) -> None:
    """Log a call summary when ``settings.trace`` is on."""
    if settings.trace:
        trace_logger.debug(message)


settings = Settings.load()
settings.apply()
