"""
Alias Tips Utilities

Logging and error handling helpers shared across the package.
"""

from .logging import (
    setup_logging,
    get_logger,
    log_performance,
)

from .error_handling import (
    AliasTipsError,
    ConfigurationError,
    ExternalToolError,
    handle_external_tool,
)

__all__ = [
    # Logging utilities
    "setup_logging",
    "get_logger",
    "log_performance",

    # Error handling utilities
    "AliasTipsError",
    "ConfigurationError",
    "ExternalToolError",
    "handle_external_tool",
]
