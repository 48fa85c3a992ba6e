"""
Provisioning errors

Every failure of a provisioning attempt is one of these; the controller
converts them into a ProvisioningFailure and never lets them escape.
"""

from typing import Optional


class ProvisioningError(Exception):
    """Base class for provisioning failures"""

    error_type = "provisioning_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ProvisioningError):
    """Required input missing; raised before any remote call"""

    error_type = "validation_error"


class WorkflowBusyError(ProvisioningError):
    """A provisioning run is already in progress on this controller"""

    error_type = "workflow_busy"


class RemoteOperationError(ProvisioningError):
    """A remote call answered with a non-success status"""

    error_type = "remote_operation_error"

    def __init__(self, operation: str, status_code: int, message: Optional[str] = None):
        super().__init__(message or f"Failed to {operation}: {status_code}")
        self.operation = operation
        self.status_code = status_code


class UnexpectedError(ProvisioningError):
    """Anything without an HTTP status: transport failures, malformed bodies"""

    error_type = "unexpected_error"

    def __init__(self, message: str = "An unexpected error occurred"):
        super().__init__(message)
