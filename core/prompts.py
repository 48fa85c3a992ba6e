"""
Assistant and phone number payload synthesis

Builds the request bodies sent to the voice platform from the user's
description and optional agent name.
"""

from typing import Any, Dict, Optional

from agent_creator_shared_utils.core.config import Settings, get_settings


SYSTEM_PROMPT_PREAMBLE = "You are an AI assistant created with the following purpose and behavior:"

SYSTEM_PROMPT_GUIDELINES = """Guidelines:
- Be helpful, professional, and conversational
- Stay focused on your defined purpose
- If asked about topics outside your scope, politely redirect the conversation
- Be concise but thorough in your responses
- Maintain a friendly and approachable tone"""


def _clean_name(display_name: Optional[str]) -> Optional[str]:
    if display_name is None:
        return None
    return display_name.strip() or None


def build_system_prompt(description: str) -> str:
    """Wrap the user's description in the fixed preamble and guideline block."""
    return f"{SYSTEM_PROMPT_PREAMBLE}\n\n{description}\n\n{SYSTEM_PROMPT_GUIDELINES}"


def build_greeting(display_name: Optional[str], settings: Optional[Settings] = None) -> str:
    settings = settings or get_settings()
    name = _clean_name(display_name) or settings.default_greeting_name
    return f"Hello! I'm {name}. How can I help you today?"


def resolve_agent_name(display_name: Optional[str], settings: Optional[Settings] = None) -> str:
    """Display name, or the generic agent name when none was given."""
    settings = settings or get_settings()
    return _clean_name(display_name) or settings.default_agent_name


def build_assistant_payload(
    description: str,
    display_name: Optional[str] = None,
    settings: Optional[Settings] = None
) -> Dict[str, Any]:
    """
    Build the create-assistant request body.

    Args:
        description: What the agent should do, inserted into the system prompt
        display_name: Optional agent name; generic fallbacks are used when empty
        settings: Model, voice and fallback name defaults

    Returns:
        Dict ready to be sent as JSON
    """
    settings = settings or get_settings()

    return {
        "name": resolve_agent_name(display_name, settings),
        "model": {
            "provider": settings.assistant_model_provider,
            "model": settings.assistant_model,
            "messages": [
                {
                    "role": "system",
                    "content": build_system_prompt(description),
                },
            ],
        },
        "voice": {
            "provider": settings.voice_provider,
            "voiceId": settings.voice_id,
        },
        "firstMessage": build_greeting(display_name, settings),
    }


def build_phone_number_payload(
    display_name: Optional[str] = None,
    settings: Optional[Settings] = None
) -> Dict[str, Any]:
    """Build the purchase-number request body."""
    settings = settings or get_settings()

    return {
        "areaCode": settings.default_area_code,
        "name": _clean_name(display_name) or settings.default_number_name,
    }
