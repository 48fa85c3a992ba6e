"""
Phone Agent Creator Shared Utils

This package contains shared configuration, logging and response
helpers for the Phone Agent Creator service.
"""

__version__ = "1.0.0"

from .core.config import get_settings, Settings
from .core.logger import setup_logging, get_logger

from .utils.response_helpers import (
    success_response,
    error_response,
    create_json_response,
    create_error_json_response,
)

__all__ = [
    # Core
    "get_settings",
    "Settings",
    "setup_logging",
    "get_logger",

    # Utils
    "success_response",
    "error_response",
    "create_json_response",
    "create_error_json_response",
]
