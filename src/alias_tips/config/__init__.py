"""
Alias Tips Configuration System

    from alias_tips.config import load_config

    config = load_config()
    print(config.tips.text)       # "Alias tip: "
    print(config.git.enabled)     # True
"""

from .loader import (
    ConfigLoader,
    load_config,
    default_config_dir,
)

from .models import (
    AliasTipsConfig,
    AppConfig,
    TipsConfig,
    GitConfig,
    LogLevel,
)

from ..utils.error_handling import ConfigurationError

__all__ = [
    "ConfigLoader",
    "load_config",
    "default_config_dir",
    "ConfigurationError",
    "AliasTipsConfig",
    "AppConfig",
    "TipsConfig",
    "GitConfig",
    "LogLevel",
]
