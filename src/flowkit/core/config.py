"""Runtime settings for flowkit.

Values are read once from the environment when the module is imported. Every
setting has a default, so the library works without any configuration.
"""

import os

from pydantic import BaseModel

from flowkit.core.types import LogLevel, NonNegativeFloat, NonNegativeInt

__all__ = ["Settings", "settings"]

ENV_PREFIX = "FLOWKIT_"


class Settings(BaseModel):
    MAX_CREATE_LENGTH: NonNegativeInt = 10000
    CLOSE_TOLERANCE: NonNegativeFloat = 1e-15
    LOG_LEVEL: LogLevel = "INFO"

    @classmethod
    def load(cls) -> "Settings":
        """Build settings from environment variables.

        Recognised variables are ``FLOWKIT_MAX_CREATE_LENGTH``,
        ``FLOWKIT_CLOSE_TOLERANCE`` and ``LOG_LEVEL``. Unset variables fall back
        to the field defaults.

        Returns:
            Settings: The validated settings.

        Raises:
            pydantic.ValidationError: If a variable holds a value that does not
                fit its field (e.g. a negative length cap or an unknown log
                level).
        """
        overrides = {}

        max_length = os.getenv(f"{ENV_PREFIX}MAX_CREATE_LENGTH")
        if max_length is not None:
            overrides["MAX_CREATE_LENGTH"] = max_length

        tolerance = os.getenv(f"{ENV_PREFIX}CLOSE_TOLERANCE")
        if tolerance is not None:
            overrides["CLOSE_TOLERANCE"] = tolerance

        log_level = os.getenv("LOG_LEVEL")
        if log_level is not None:
            overrides["LOG_LEVEL"] = log_level.upper()

        return cls(**overrides)


settings = Settings.load()
