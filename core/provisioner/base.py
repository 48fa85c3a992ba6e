"""
Remote resource client contract
"""

from typing import Any, Dict, NamedTuple, Protocol


class PhoneNumberRecord(NamedTuple):
    """Purchased phone number resource"""
    id: str
    number: str


class RemoteResourceClient(Protocol):
    """Operations the provisioning workflow needs from the voice platform"""

    async def create_assistant(self, payload: Dict[str, Any]) -> str:
        """Create an assistant and return its identifier."""
        ...

    async def purchase_phone_number(self, payload: Dict[str, Any]) -> PhoneNumberRecord:
        """Buy a phone number and return its identifier and dialable number."""
        ...

    async def associate_phone_number(self, phone_number_id: str, assistant_id: str) -> None:
        """Route inbound calls on the phone number to the assistant."""
        ...
