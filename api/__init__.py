"""API modules for the Phone Agent Creator."""

from .routes import health, agent_creation

__all__ = ["health", "agent_creation"]
