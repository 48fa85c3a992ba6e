"""
Response helper utilities for the Phone Agent Creator.

This module provides standardized response formatting functions.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional
from fastapi.responses import JSONResponse


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def success_response(
    data: Any = None,
    message: str = "Success",
    **kwargs
) -> Dict[str, Any]:
    """
    Create a standardized success response.

    Args:
        data: Response data
        message: Success message
        **kwargs: Additional fields to include

    Returns:
        Standardized success response dictionary
    """
    response = {
        "status": "success",
        "message": message,
        "timestamp": _timestamp(),
    }

    if data is not None:
        response["data"] = data

    response.update(kwargs)

    return response


def error_response(
    message: str = "An error occurred",
    error_code: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None,
    **kwargs
) -> Dict[str, Any]:
    """
    Create a standardized error response.

    Args:
        message: Error message
        error_code: Machine-readable error code
        details: Additional error details

    Returns:
        Standardized error response dictionary
    """
    response = {
        "status": "error",
        "message": message,
        "timestamp": _timestamp(),
    }

    if error_code:
        response["error_code"] = error_code

    if details:
        response["details"] = details

    response.update(kwargs)

    return response


def create_json_response(
    data: Any = None,
    message: str = "Success",
    status_code: int = 200,
    **kwargs
) -> JSONResponse:
    """Create a FastAPI JSONResponse with the standard success envelope."""
    response_data = success_response(data, message, **kwargs)
    return JSONResponse(content=response_data, status_code=status_code)


def create_error_json_response(
    message: str = "An error occurred",
    status_code: int = 500,
    error_code: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None,
    **kwargs
) -> JSONResponse:
    """Create a FastAPI JSONResponse with the standard error envelope."""
    response_data = error_response(message, error_code, details, **kwargs)
    return JSONResponse(content=response_data, status_code=status_code)
