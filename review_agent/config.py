"""Configuration and logging setup for Review Agent."""

import logging
import os
from collections.abc import Mapping
from typing import Literal

from pydantic import BaseModel, Field, ValidationError, field_validator
from rich.console import Console
from rich.logging import RichHandler

from .exceptions import ConfigurationError

DEFAULT_MODEL = "models/gemini-2.5-pro"
DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"
DEFAULT_EXCLUDE_FILES = "dist,bun.lock,node_modules,.git"

LOG_LEVELS = {
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}

# Third-party loggers that are too chatty at INFO
QUIET_LOGGERS = ("httpx", "httpcore", "openai", "git")


class Settings(BaseModel):
    """Application settings, validated once from environment variables.

    Field aliases are the environment variable names, so a mapping like
    ``os.environ`` can be validated directly. Tests may construct settings
    by field name instead.
    """

    api_key: str = Field(alias="GOOGLE_GENERATIVE_AI_API_KEY", min_length=1)
    model: str = Field(default=DEFAULT_MODEL, alias="GEMINI_MODEL")
    max_tokens: int = Field(default=8192, alias="GEMINI_MAX_TOKENS", gt=0)
    temperature: float = Field(default=0.7, alias="GEMINI_TEMPERATURE", ge=0, le=2)
    environment: Literal["development", "production", "test"] = Field(
        default="development", alias="NODE_ENV"
    )
    log_level: Literal["error", "warn", "info", "debug"] = Field(
        default="info", alias="LOG_LEVEL"
    )
    exclude_files: tuple[str, ...] = Field(
        default=tuple(DEFAULT_EXCLUDE_FILES.split(",")), alias="DEFAULT_EXCLUDE_FILES"
    )
    max_file_size_mb: float = Field(default=10, alias="MAX_FILE_SIZE_MB")
    base_url: str = Field(default=DEFAULT_BASE_URL, alias="GEMINI_BASE_URL")

    model_config = {"extra": "ignore", "frozen": True, "populate_by_name": True}

    @field_validator("exclude_files", mode="before")
    @classmethod
    def split_exclude_files(cls, value: object) -> object:
        """Accept the comma-separated form used in the environment."""
        if isinstance(value, str):
            return tuple(item.strip() for item in value.split(",") if item.strip())
        return value

    @property
    def model_id(self) -> str:
        """Model name as expected by the OpenAI-compatible endpoint."""
        return self.model.removeprefix("models/")

    @property
    def masked_api_key(self) -> str:
        """API key with everything but the edges hidden."""
        if len(self.api_key) <= 12:
            return "*" * len(self.api_key)
        return self.api_key[:6] + "..." + self.api_key[-4:]


def _env_name(field_or_alias: str) -> str:
    """Map a validation error location back to its environment variable."""
    field = Settings.model_fields.get(field_or_alias)
    if field is not None and field.alias:
        return field.alias
    return field_or_alias


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """
    Load and validate settings from the environment.

    Args:
        environ: Mapping to read from. Defaults to ``os.environ``.

    Returns:
        Validated, immutable Settings.

    Raises:
        ConfigurationError: Listing every missing or invalid variable.
    """
    source = os.environ if environ is None else environ
    known = {field.alias for field in Settings.model_fields.values()}
    data = {key: value for key, value in source.items() if key in known}

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        fields: list[str] = []
        details: list[str] = []
        for error in e.errors():
            name = _env_name(str(error["loc"][0])) if error["loc"] else "<root>"
            if name not in fields:
                fields.append(name)
            details.append(f"{name}: {error['msg']}")
        raise ConfigurationError(fields, details) from None


def configure_logging(level: str = "info") -> None:
    """Route log records through Rich on stderr at the configured level."""
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=LOG_LEVELS.get(level, logging.INFO),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
