"""
Provisioning Controller - Creates an assistant, buys a number, links them
"""

from typing import Callable, List, Dict, Any, Optional, Union

from agent_creator_shared_utils.core.config import Settings, get_settings
from agent_creator_shared_utils.core.logger import get_logger
from core import errors
from core.models import ProvisioningFailure, ProvisioningRequest, ProvisioningResult
from core.prompts import build_assistant_payload, build_phone_number_payload, resolve_agent_name
from core.provisioner.base import RemoteResourceClient
from core.provisioner.vapi_client import VapiClient
from core.workflow_state import INPUT_STATES, WorkflowState, describe_steps

logger = get_logger("agent-creator.controller")

ClientFactory = Callable[[str], RemoteResourceClient]
StateListener = Callable[[WorkflowState], None]


class ProvisioningController:
    """
    Drives one agent through the three remote provisioning steps.

    The state, result and error message are only ever written here. Steps
    run strictly in order and each state transition happens before the
    remote call it guards, so observers see the step that is in flight.
    A failed step stops the run; resources created by earlier steps are
    left in place.
    """

    def __init__(
        self,
        client_factory: Optional[ClientFactory] = None,
        settings: Optional[Settings] = None,
        on_state_change: Optional[StateListener] = None
    ):
        self.settings = settings or get_settings()
        self.client_factory = client_factory or VapiClient
        self.on_state_change = on_state_change

        self._state = WorkflowState.IDLE
        self._result: Optional[ProvisioningResult] = None
        self._error_message: Optional[str] = None

    @property
    def state(self) -> WorkflowState:
        return self._state

    @property
    def result(self) -> Optional[ProvisioningResult]:
        return self._result

    @property
    def error_message(self) -> Optional[str]:
        return self._error_message

    @property
    def is_busy(self) -> bool:
        """True while input must stay disabled"""
        return self._state not in INPUT_STATES

    def steps(self) -> List[Dict[str, Any]]:
        return describe_steps(self._state)

    def _transition(self, state: WorkflowState) -> None:
        logger.info("Workflow state changed", previous=self._state.value, state=state.value)
        self._state = state
        if self.on_state_change is None:
            return
        # listener failures never change the outcome of a run
        try:
            self.on_state_change(state)
        except Exception as e:
            logger.error("State listener failed", state=state.value, error=str(e))

    def reset(self) -> None:
        """Return to idle so a new agent can be created"""
        if self.is_busy and self._state != WorkflowState.COMPLETE:
            raise errors.WorkflowBusyError("Provisioning is already in progress")

        self._result = None
        self._error_message = None
        if self._state != WorkflowState.IDLE:
            self._transition(WorkflowState.IDLE)

    def _check_submittable(self, request: ProvisioningRequest) -> None:
        if self.is_busy:
            raise errors.WorkflowBusyError("Provisioning is already in progress")

        missing = request.missing_fields()
        if missing:
            logger.warning("Provisioning request rejected", missing_fields=missing)
            raise errors.ValidationError("Please fill in all required fields")

    async def submit(self, request: ProvisioningRequest) -> Union[ProvisioningResult, ProvisioningFailure]:
        """
        Run the full provisioning sequence for a request.

        Args:
            request: Description, optional display name and API key

        Returns:
            ProvisioningResult when all three steps succeed, otherwise a
            ProvisioningFailure describing the first failure
        """
        try:
            self._check_submittable(request)
        except errors.ProvisioningError as e:
            return ProvisioningFailure(error_type=e.error_type, message=e.message)

        self._error_message = None
        self._result = None

        try:
            result = await self._run(request)
        except errors.ProvisioningError as e:
            return self._fail(e)
        except Exception as e:
            logger.error("Unexpected provisioning failure", error=str(e), error_type=type(e).__name__)
            return self._fail(errors.UnexpectedError())

        self._result = result
        self._transition(WorkflowState.COMPLETE)
        logger.info(
            "Agent provisioned successfully",
            assistant_id=result.assistant_id,
            phone_number_id=result.phone_number_id,
            phone_number=result.phone_number
        )
        return result

    async def _run(self, request: ProvisioningRequest) -> ProvisioningResult:
        self._transition(WorkflowState.CREATING_ASSISTANT)
        client = self.client_factory(request.credential.strip())
        assistant_id = await client.create_assistant(
            build_assistant_payload(request.description, request.display_name, self.settings)
        )

        self._transition(WorkflowState.PURCHASING_NUMBER)
        phone_number = await client.purchase_phone_number(
            build_phone_number_payload(request.display_name, self.settings)
        )

        self._transition(WorkflowState.ASSOCIATING)
        await client.associate_phone_number(phone_number.id, assistant_id)

        return ProvisioningResult(
            assistant_id=assistant_id,
            phone_number_id=phone_number.id,
            phone_number=phone_number.number,
            agent_name=resolve_agent_name(request.display_name, self.settings)
        )

    def _fail(self, error: errors.ProvisioningError) -> ProvisioningFailure:
        logger.error(
            "Provisioning failed",
            failed_state=self._state.value,
            error_type=error.error_type,
            error=error.message
        )
        self._error_message = error.message
        self._transition(WorkflowState.ERROR)
        return ProvisioningFailure(
            error_type=error.error_type,
            message=error.message,
            status_code=getattr(error, "status_code", None)
        )
