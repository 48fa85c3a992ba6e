"""
FastAPI dependencies for the agent creation endpoints.
"""

from typing import Callable, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from agent_creator_shared_utils.core.config import Settings, get_settings
from core.provisioner.base import RemoteResourceClient
from core.provisioner.vapi_client import VapiClient

security = HTTPBearer(auto_error=False)


def get_client_factory(
    settings: Settings = Depends(get_settings)
) -> Callable[[str], RemoteResourceClient]:
    """Build Vapi clients for a given API key."""

    def factory(api_key: str) -> RemoteResourceClient:
        return VapiClient(api_key, base_url=settings.vapi_base_url, timeout=settings.vapi_timeout)

    return factory


async def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> Optional[str]:
    """Bearer token of the request, if any."""
    if credentials is None:
        return None
    return credentials.credentials
