"""
Agent Models
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class AgentCreateRequest(BaseModel):
    """Agent creation form"""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "description": "A friendly customer support agent for a coffee shop that can answer "
                               "questions about menu items, hours of operation, and take reservations.",
                "name": "Coffee Bot",
                "api_key": "sk_test_123"
            }
        }
    )

    description: str = Field(..., description="What the agent should do and how it should behave")
    name: Optional[str] = Field(None, max_length=255, description="Agent name")
    api_key: Optional[str] = Field(
        None,
        description="Vapi API key; the bearer token of the request is used when omitted"
    )


class ProgressStep(BaseModel):
    """Progress indicator entry"""
    position: int
    step: str
    label: str
    status: str


class AgentCreationData(BaseModel):
    """Payload of a successful agent creation"""
    assistant_id: str
    phone_number_id: str
    phone_number: str
    agent_name: str
    state: str
    steps: List[ProgressStep]


class AgentCreationResponse(BaseModel):
    """Agent creation response model"""
    status: str
    message: str
    data: AgentCreationData
    timestamp: str


class ErrorResponse(BaseModel):
    """Standard error envelope"""
    status: str
    message: str
    error_code: Optional[str] = None
    details: Optional[Dict[str, Any]] = None
    timestamp: str
