import codecs
from functools import cached_property
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sitter_parse.config.groups import GrammarConfig, LoggingConfig, RenderConfig


class Settings(BaseSettings):
    """
    sitter-parse settings

    Environment variables use the SITTER_PARSE_ prefix.
    Example: SITTER_PARSE_NODE_CAP=500, SITTER_PARSE_LOG_LEVEL=DEBUG,
    SITTER_PARSE_EXTRA_EXTENSIONS='{"mts": "typescript"}'

    Grouped access:
        settings.render    # RenderConfig
        settings.logging   # LoggingConfig
        settings.grammars  # GrammarConfig
    """

    # An unreadable .env is treated as "not provided".
    _dotenv_path = Path(".env")
    _env_file = ".env" if _dotenv_path.is_file() else None
    try:
        if _env_file is not None:
            _dotenv_path.open("r", encoding="utf-8").close()
    except OSError:
        _env_file = None

    model_config = SettingsConfigDict(
        env_file=_env_file,
        env_file_encoding="utf-8",
        env_prefix="SITTER_PARSE_",
        extra="ignore",
    )

    # Rendering
    node_cap: int = Field(default=2000, ge=1)
    json_indent: int = Field(default=2, ge=0)

    # Logging
    log_level: str = "WARNING"
    log_format: Literal["console", "json"] = "console"

    # Grammars
    encoding: str = "utf-8"
    extra_extensions: dict[str, str] = Field(default_factory=dict)

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Reject codec names Python cannot decode with"""
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {v}") from e
        return v

    @cached_property
    def render(self) -> RenderConfig:
        """Rendering settings group."""
        return RenderConfig(node_cap=self.node_cap, json_indent=self.json_indent)

    @cached_property
    def logging(self) -> LoggingConfig:
        """Logging settings group."""
        return LoggingConfig(level=self.log_level, format=self.log_format)

    @cached_property
    def grammars(self) -> GrammarConfig:
        """Grammar dispatch settings group."""
        return GrammarConfig(encoding=self.encoding, extra_extensions=self.extra_extensions)


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get process-wide settings instance"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
