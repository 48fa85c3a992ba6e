"""Utility modules for Phone Agent Creator Shared Utils."""

from .response_helpers import (
    success_response,
    error_response,
    create_json_response,
    create_error_json_response,
)

__all__ = [
    "success_response",
    "error_response",
    "create_json_response",
    "create_error_json_response",
]
