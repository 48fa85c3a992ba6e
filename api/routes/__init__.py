"""API routes for the Phone Agent Creator."""

from . import health, agent_creation

__all__ = ["health", "agent_creation"]
