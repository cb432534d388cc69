from sitter_parse.config.groups import GrammarConfig, LoggingConfig, RenderConfig
from sitter_parse.config.settings import Settings, get_settings, reset_settings

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    "reset_settings",
    # Config Groups
    "GrammarConfig",
    "LoggingConfig",
    "RenderConfig",
]
