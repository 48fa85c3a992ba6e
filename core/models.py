"""
Provisioning Models
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class ProvisioningRequest(BaseModel):
    """Input snapshot taken when the user submits the form"""

    model_config = ConfigDict(frozen=True)

    description: str = Field(..., description="What the agent should do and how it should behave")
    display_name: Optional[str] = Field(None, description="Optional agent name")
    credential: str = Field(..., description="Vapi API key")

    def missing_fields(self) -> list[str]:
        """Required fields that are empty after trimming whitespace."""
        missing = []
        if not self.description.strip():
            missing.append("description")
        if not self.credential.strip():
            missing.append("credential")
        return missing


class ProvisioningResult(BaseModel):
    """Outcome of a fully successful provisioning run"""

    model_config = ConfigDict(frozen=True)

    assistant_id: str
    phone_number_id: str
    phone_number: str
    agent_name: str


class ProvisioningFailure(BaseModel):
    """Outcome of a provisioning run that did not complete"""

    model_config = ConfigDict(frozen=True)

    error_type: str
    message: str
    status_code: Optional[int] = None
