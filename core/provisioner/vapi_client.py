"""
Vapi Client - Creates assistants and phone numbers on the Vapi platform
"""

import json
from typing import Any, Dict, Optional

import httpx

from agent_creator_shared_utils.core.config import get_settings
from agent_creator_shared_utils.core.logger import get_logger
from core.errors import RemoteOperationError, UnexpectedError
from core.provisioner.base import PhoneNumberRecord

logger = get_logger("agent-creator.vapi-client")


def extract_error_message(response: httpx.Response) -> Optional[str]:
    """
    Best-effort read of the ``message`` field of an error body.

    Returns None when the body is not JSON or carries no usable message;
    callers then fall back to a status-derived message.
    """
    try:
        body = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None

    if not isinstance(body, dict):
        return None

    message = body.get("message")
    if isinstance(message, list):
        message = "; ".join(str(item) for item in message if item)
    if isinstance(message, str) and message.strip():
        return message
    return None


class VapiClient:
    """Vapi REST client authenticated with the user's API key"""

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        settings = get_settings()
        self.base_url = (base_url or settings.vapi_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.vapi_timeout
        self.http_client = http_client
        self.headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

    async def _send(self, method: str, path: str, data: Dict[str, Any]) -> httpx.Response:
        url = f"{self.base_url}{path}"
        if self.http_client is not None:
            return await self.http_client.request(method, url, json=data, headers=self.headers, timeout=self.timeout)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await client.request(method, url, json=data, headers=self.headers)

    async def _make_request(
        self,
        operation: str,
        method: str,
        path: str,
        data: Dict[str, Any]
    ) -> httpx.Response:
        """Issue a request and map failures onto provisioning errors"""
        try:
            response = await self._send(method, path, data)
        except httpx.RequestError as e:
            logger.error("Request error", operation=operation, path=path, error=str(e))
            raise UnexpectedError() from e

        if not response.is_success:
            message = extract_error_message(response)
            logger.error(
                "Remote operation failed",
                operation=operation,
                status_code=response.status_code,
                message=message
            )
            raise RemoteOperationError(operation, response.status_code, message)

        return response

    @staticmethod
    def _read_fields(operation: str, response: httpx.Response, *fields: str) -> Dict[str, str]:
        try:
            body = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error("Malformed response body", operation=operation, error=str(e))
            raise UnexpectedError() from e

        if not isinstance(body, dict) or any(not body.get(field) for field in fields):
            logger.error("Response missing required fields", operation=operation, fields=list(fields))
            raise UnexpectedError()

        return {field: str(body[field]) for field in fields}

    async def create_assistant(self, payload: Dict[str, Any]) -> str:
        """Create an assistant and return its id"""
        operation = "create assistant"
        logger.info("Creating assistant", name=payload.get("name"))

        response = await self._make_request(operation, "POST", "/assistant", payload)
        assistant_id = self._read_fields(operation, response, "id")["id"]

        logger.info("Assistant created", assistant_id=assistant_id)
        return assistant_id

    async def purchase_phone_number(self, payload: Dict[str, Any]) -> PhoneNumberRecord:
        """Buy a phone number in the requested area code"""
        operation = "purchase phone number"
        logger.info("Purchasing phone number", area_code=payload.get("areaCode"))

        response = await self._make_request(operation, "POST", "/phone-number/buy", payload)
        fields = self._read_fields(operation, response, "id", "number")

        logger.info("Phone number purchased", phone_number_id=fields["id"], number=fields["number"])
        return PhoneNumberRecord(id=fields["id"], number=fields["number"])

    async def associate_phone_number(self, phone_number_id: str, assistant_id: str) -> None:
        """Point a phone number at an assistant"""
        operation = "associate phone number"
        logger.info("Associating phone number", phone_number_id=phone_number_id, assistant_id=assistant_id)

        await self._make_request(
            operation,
            "PATCH",
            f"/phone-number/{phone_number_id}",
            {"assistantId": assistant_id}
        )

        logger.info("Phone number associated", phone_number_id=phone_number_id, assistant_id=assistant_id)
