"""
API Dependencies

Shared service instances for endpoint injection. Tests replace
them through ``app.dependency_overrides``.
"""

from functools import lru_cache

from fastapi import Request

from genibi.config import Settings, get_settings
from genibi.infrastructure.llm import OpenAIProvider
from genibi.services.chat.chat_service import ChatService
from genibi.services.safety.emergency_resources import ResourceDirectory
from genibi.services.safety.escalation_manager import EscalationManager


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was created with."""
    return getattr(request.app.state, "settings", None) or get_settings()


@lru_cache()
def get_resource_directory() -> ResourceDirectory:
    settings = get_settings()
    return ResourceDirectory(config_path=settings.chat.resources_config_path)


@lru_cache()
def get_chat_service() -> ChatService:
    """Chat service wired with the OpenAI provider and shared directory."""
    return ChatService(
        provider=OpenAIProvider(),
        escalation=EscalationManager(directory=get_resource_directory()),
        settings=get_settings(),
    )
