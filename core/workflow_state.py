"""
Workflow state and progress step derivation
"""

from enum import Enum
from typing import Any, Dict, List


class WorkflowState(str, Enum):
    """Provisioning workflow state enumeration"""
    IDLE = "idle"
    CREATING_ASSISTANT = "creating_assistant"
    PURCHASING_NUMBER = "purchasing_number"
    ASSOCIATING = "associating"
    COMPLETE = "complete"
    ERROR = "error"


class StepStatus(str, Enum):
    """Progress indicator status enumeration"""
    PENDING = "pending"
    ACTIVE = "active"
    COMPLETED = "completed"


STEP_ORDER = [
    WorkflowState.CREATING_ASSISTANT,
    WorkflowState.PURCHASING_NUMBER,
    WorkflowState.ASSOCIATING,
    WorkflowState.COMPLETE,
]

# States in which a new submission is accepted
INPUT_STATES = frozenset({WorkflowState.IDLE, WorkflowState.ERROR})

STEP_LABELS = {
    WorkflowState.CREATING_ASSISTANT: "Creating AI Assistant",
    WorkflowState.PURCHASING_NUMBER: "Purchasing Phone Number",
    WorkflowState.ASSOCIATING: "Connecting Agent to Number",
}


def get_step_status(state: WorkflowState, step: WorkflowState) -> StepStatus:
    """
    Status of a progress step given the current workflow state.

    Steps before the current one are completed, the current one is active,
    later ones are pending. Idle and error are outside the step order, so
    every step is pending in those states.
    """
    if state not in STEP_ORDER:
        return StepStatus.PENDING

    current_index = STEP_ORDER.index(state)
    target_index = STEP_ORDER.index(step) if step in STEP_ORDER else len(STEP_ORDER)

    if target_index < current_index:
        return StepStatus.COMPLETED
    if target_index == current_index:
        return StepStatus.ACTIVE
    return StepStatus.PENDING


def describe_steps(state: WorkflowState) -> List[Dict[str, Any]]:
    """User-facing progress steps with their derived status"""
    return [
        {
            "position": position,
            "step": step.value,
            "label": label,
            "status": get_step_status(state, step).value,
        }
        for position, (step, label) in enumerate(STEP_LABELS.items(), start=1)
    ]
