"""Core modules for Phone Agent Creator Shared Utils."""

from .config import get_settings, Settings
from .logger import setup_logging, get_logger

__all__ = ["get_settings", "Settings", "setup_logging", "get_logger"]
