"""
Core module for the Phone Agent Creator
"""

from .orchestrator.provisioning_controller import ProvisioningController
from .workflow_state import WorkflowState, StepStatus, get_step_status

__all__ = ["ProvisioningController", "WorkflowState", "StepStatus", "get_step_status"]
