"""
API Models module
"""

from .agent import (
    AgentCreateRequest,
    AgentCreationData,
    AgentCreationResponse,
    ErrorResponse,
    ProgressStep,
)

__all__ = [
    "AgentCreateRequest", "AgentCreationData", "AgentCreationResponse",
    "ErrorResponse", "ProgressStep"
]
