"""
Agent creation endpoints for the Phone Agent Creator.

This module turns a form submission into a provisioned phone agent and
serves the contact card for the purchased number.
"""

from typing import Callable, Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse, Response

from agent_creator_shared_utils.core.config import Settings, get_settings
from agent_creator_shared_utils.core.logger import get_logger
from agent_creator_shared_utils.utils.response_helpers import (
    create_error_json_response,
    create_json_response,
)
from api.dependencies import get_bearer_token, get_client_factory
from api.models.agent import AgentCreateRequest, AgentCreationResponse, ErrorResponse
from core.contact_card import build_vcard, content_disposition
from core.models import ProvisioningFailure, ProvisioningRequest
from core.orchestrator.provisioning_controller import ProvisioningController
from core.provisioner.base import RemoteResourceClient

logger = get_logger("agent-creator.agent_creation")
router = APIRouter()

FAILURE_STATUS_CODES = {
    "validation_error": 422,
    "workflow_busy": status.HTTP_409_CONFLICT,
    "remote_operation_error": status.HTTP_502_BAD_GATEWAY,
    "unexpected_error": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=AgentCreationResponse,
    responses={
        422: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def create_agent(
    request: AgentCreateRequest,
    bearer_token: Optional[str] = Depends(get_bearer_token),
    client_factory: Callable[[str], RemoteResourceClient] = Depends(get_client_factory),
    settings: Settings = Depends(get_settings)
) -> JSONResponse:
    """
    Create a phone agent.

    Runs the full provisioning sequence:
    1. Create the assistant from the description
    2. Purchase a phone number
    3. Connect the number to the assistant

    A failed step stops the sequence; anything already created on the
    platform is left as is.
    """
    logger.info("Agent creation requested", agent_name=request.name)

    controller = ProvisioningController(client_factory=client_factory, settings=settings)
    outcome = await controller.submit(
        ProvisioningRequest(
            description=request.description,
            display_name=request.name,
            credential=request.api_key or bearer_token or ""
        )
    )

    if isinstance(outcome, ProvisioningFailure):
        details = {
            "state": controller.state.value,
            "steps": controller.steps(),
        }
        if outcome.status_code is not None:
            details["upstream_status_code"] = outcome.status_code
        return create_error_json_response(
            message=outcome.message,
            status_code=FAILURE_STATUS_CODES.get(outcome.error_type, status.HTTP_500_INTERNAL_SERVER_ERROR),
            error_code=outcome.error_type,
            details=details
        )

    return create_json_response(
        data={
            **outcome.model_dump(),
            "state": controller.state.value,
            "steps": controller.steps(),
        },
        message="Agent created successfully",
        status_code=status.HTTP_201_CREATED
    )


@router.get("/contact-card")
async def download_contact_card(
    name: str = Query(..., min_length=1, description="Agent name"),
    phone_number: str = Query(..., min_length=1, description="Purchased phone number")
) -> Response:
    """Download a vCard for a provisioned agent."""
    logger.info("Contact card requested", agent_name=name)

    return Response(
        content=build_vcard(name, phone_number),
        media_type="text/vcard",
        headers={"Content-Disposition": content_disposition(name)}
    )
