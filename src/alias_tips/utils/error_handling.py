"""
Error handling utilities for Alias Tips.

Failures of external tools are converted into ExternalToolError so callers
can degrade gracefully; configuration problems surface as ConfigurationError.
"""

import functools
import logging
import subprocess
from typing import Any, Callable, Dict, Optional

from .logging import get_logger


class AliasTipsError(Exception):
    """Base exception for all Alias Tips errors."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(AliasTipsError):
    """Configuration-related error."""
    pass


class ExternalToolError(AliasTipsError):
    """Error while running an external tool such as git."""
    pass


def handle_external_tool(operation_name: str, logger: Optional[logging.Logger] = None):
    """
    Decorator to standardize external tool error handling.

    Args:
        operation_name: Human-readable name of the operation
        logger: Optional logger instance (defaults to operation-specific logger)
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            _logger = logger or get_logger(f"alias_tips.external.{operation_name}")

            try:
                _logger.debug(f"Starting {operation_name}")
                result = func(*args, **kwargs)
                _logger.debug(f"{operation_name} completed")
                return result

            except ExternalToolError:
                raise

            except subprocess.TimeoutExpired as e:
                _logger.debug(f"{operation_name} timed out after {e.timeout}s")
                raise ExternalToolError(
                    f"{operation_name} timed out",
                    details={"error_type": "timeout", "timeout_seconds": e.timeout}
                ) from e

            except FileNotFoundError as e:
                _logger.debug(f"{operation_name} failed - executable not found: {e}")
                raise ExternalToolError(
                    f"{operation_name} failed: {e}",
                    details={"error_type": "not_found", "original_error": str(e)}
                ) from e

            except UnicodeDecodeError as e:
                _logger.debug(f"{operation_name} failed - output is not UTF-8: {e}")
                raise ExternalToolError(
                    f"{operation_name} failed: {e}",
                    details={"error_type": "decode", "original_error": str(e)}
                ) from e

            except OSError as e:
                _logger.debug(f"{operation_name} failed - os error: {e}")
                raise ExternalToolError(
                    f"{operation_name} failed: {e}",
                    details={"error_type": "os", "original_error": str(e)}
                ) from e

        return wrapper

    return decorator
