import os
import warnings
from typing import Optional

from pydantic import BaseModel, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL", "NOTSET")

# Spellings the logging module also understands.
LOG_LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}


def normalize_log_level(value: str) -> Optional[str]:
    """Return the canonical level name for ``value``, or None if unknown."""
    level = str(value).strip().upper()
    level = LOG_LEVEL_ALIASES.get(level, level)
    return level if level in LOG_LEVELS else None


class Settings(BaseModel):
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_DATEFMT: str = "%Y-%m-%d %H:%M:%S"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_level(cls, value: str) -> str:
        level = normalize_log_level(value)
        if level is None:
            raise ValueError(
                f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got '{value}'"
            )
        return level

    @classmethod
    def load(cls, environ: Optional[dict] = None) -> "Settings":
        """Build settings from ``FNKIT_*`` environment variables.

        ``FNKIT_LOG_LEVEL`` falls back to the generic ``LOG_LEVEL`` variable.
        An unrecognised level emits a ``RuntimeWarning`` and keeps the default.
        Unset variables keep the field defaults.
        """
        environ = os.environ if environ is None else environ

        values = {}
        level = environ.get("FNKIT_LOG_LEVEL", environ.get("LOG_LEVEL"))
        if level:
            if normalize_log_level(level) is None:
                warnings.warn(
                    f"Ignoring unknown log level '{level}', using "
                    f"{cls.model_fields['LOG_LEVEL'].default}",
                    RuntimeWarning,
                    stacklevel=2,
                )
            else:
                values["LOG_LEVEL"] = level
        if environ.get("FNKIT_LOG_FORMAT"):
            values["LOG_FORMAT"] = environ["FNKIT_LOG_FORMAT"]
        if environ.get("FNKIT_LOG_DATEFMT"):
            values["LOG_DATEFMT"] = environ["FNKIT_LOG_DATEFMT"]

        return cls(**values)


settings = Settings.load()
