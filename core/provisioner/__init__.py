"""
Core provisioner module
"""

from .base import PhoneNumberRecord, RemoteResourceClient
from .vapi_client import VapiClient

__all__ = ["PhoneNumberRecord", "RemoteResourceClient", "VapiClient"]
