"""Shared agent settings for API routes."""

from typing import Optional

from burrow.config import AgentSettings

settings: Optional[AgentSettings] = None


def get_settings() -> AgentSettings:
    """Get or load the settings from the environment."""
    global settings
    if settings is None:
        settings = AgentSettings.from_env()
    return settings
