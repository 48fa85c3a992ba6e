"""
Configuration management for the Phone Agent Creator.

This module handles all environment variables and application settings.
"""
from functools import lru_cache
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Application settings
    app_env: str = "development"
    debug: bool = False
    log_level: str = "info"
    port: int = 8008

    # CORS settings
    cors_origin: str = "*"

    # Vapi platform
    vapi_base_url: str = "https://api.vapi.ai"
    vapi_timeout: float = 30.0

    # Assistant defaults
    assistant_model_provider: str = "openai"
    assistant_model: str = "gpt-4o"
    voice_provider: str = "11labs"
    voice_id: str = "sarah"
    default_agent_name: str = "VAPI Agent"
    default_greeting_name: str = "your AI assistant"

    # Phone number defaults
    default_area_code: str = "415"
    default_number_name: str = "VAPI Agent Number"

    @property
    def cors_origins(self) -> List[str]:
        """Convert cors_origin string to list for FastAPI CORS middleware."""
        if self.cors_origin == "*":
            return ["*"]
        return [origin.strip() for origin in self.cors_origin.split(",")]


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
