import codecs
import logging
import os

from pydantic import BaseModel, ConfigDict, field_validator

logger = logging.getLogger(__name__)

ENV_ENCODING = "LEETPATCH_ENCODING"
ENV_LOG_LEVEL = "LEETPATCH_LOG_LEVEL"


def _env_str(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip()


class ParserSettings(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    encoding: str = "utf-8"
    log_level: str = "WARNING"

    @field_validator("encoding")
    @classmethod
    def check_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {v}") from e
        return v

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v}")
        return level

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


def load_settings() -> ParserSettings:
    """
    Build `ParserSettings` from the environment.

    - `LEETPATCH_ENCODING`: codec used to decode patch lines (default utf-8)
    - `LEETPATCH_LOG_LEVEL`: level name for `setup_logging` (default WARNING)

    Unset or empty variables fall back to the defaults.
    """

    settings = ParserSettings(
        encoding=_env_str(ENV_ENCODING, "utf-8"),
        log_level=_env_str(ENV_LOG_LEVEL, "WARNING"),
    )
    logger.debug("Loaded settings %s", settings)
    return settings
