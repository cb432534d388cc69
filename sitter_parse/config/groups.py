"""
Configuration groups.

Settings are split into logical groups. Each group can be used on its own
and is assembled from the flat environment-backed fields in Settings.
"""

from typing import Literal

from pydantic import BaseModel, Field


class RenderConfig(BaseModel):
    """Tree rendering settings."""

    node_cap: int = Field(default=2000, ge=1, description="Maximum NodeSummary entries in one JSON dump")
    json_indent: int = Field(default=2, ge=0, description="Indent for JSON output")


class LoggingConfig(BaseModel):
    """structlog settings."""

    level: str = Field(default="WARNING", description="Log level (DEBUG, INFO, WARNING, ERROR)")
    format: Literal["console", "json"] = Field(default="console", description="Log renderer")


class GrammarConfig(BaseModel):
    """Grammar dispatch settings."""

    encoding: str = Field(default="utf-8", description="Source file encoding")
    extra_extensions: dict[str, str] = Field(
        default_factory=dict,
        description="Extension -> grammar identifier mappings merged over the built-in table",
    )
