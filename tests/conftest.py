"""Shared pytest fixtures for testing."""

from typing import Any, Dict, List, Optional

import pytest

from agent_creator_shared_utils.core.config import Settings
from core.errors import RemoteOperationError
from core.provisioner.base import PhoneNumberRecord


class FakeRemoteClient:
    """In-memory voice platform recording every call and the controller state at call time"""

    def __init__(
        self,
        assistant_id: str = "a1",
        phone_number: PhoneNumberRecord = PhoneNumberRecord(id="p1", number="+14155551234"),
        failures: Optional[Dict[str, Exception]] = None
    ):
        self.assistant_id = assistant_id
        self.phone_number = phone_number
        self.failures = failures or {}
        self.calls: List[tuple] = []
        self.states_seen: List[str] = []
        self.credentials: List[str] = []
        self.controller = None

    def factory(self, credential: str) -> "FakeRemoteClient":
        self.credentials.append(credential)
        return self

    def _record(self, operation: str, *args: Any) -> None:
        self.calls.append((operation, *args))
        if self.controller is not None:
            self.states_seen.append(self.controller.state.value)
        if operation in self.failures:
            raise self.failures[operation]

    @property
    def operations(self) -> List[str]:
        return [call[0] for call in self.calls]

    async def create_assistant(self, payload: Dict[str, Any]) -> str:
        self._record("create_assistant", payload)
        return self.assistant_id

    async def purchase_phone_number(self, payload: Dict[str, Any]) -> PhoneNumberRecord:
        self._record("purchase_phone_number", payload)
        return self.phone_number

    async def associate_phone_number(self, phone_number_id: str, assistant_id: str) -> None:
        self._record("associate_phone_number", phone_number_id, assistant_id)


@pytest.fixture
def settings() -> Settings:
    """Settings with defaults only, independent of the environment."""
    return Settings(_env_file=None)


@pytest.fixture
def fake_client() -> FakeRemoteClient:
    return FakeRemoteClient()


@pytest.fixture
def quota_exceeded() -> RemoteOperationError:
    return RemoteOperationError("purchase phone number", 402, "quota exceeded")


@pytest.fixture
def make_client():
    """Build fake clients with custom responses or failures."""
    return FakeRemoteClient
