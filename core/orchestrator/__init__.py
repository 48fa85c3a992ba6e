"""
Core orchestrator module
"""

from .provisioning_controller import ProvisioningController

__all__ = ["ProvisioningController"]
