"""
Dependency Container
====================

FastAPI dependencies resolving services from the application's DI container.
The container is built by create_application and kept on app.state.
"""
from typing import TYPE_CHECKING

from fastapi import Request

from user_registry.application.services.user_application_service import UserApplicationService

if TYPE_CHECKING:
    from user_registry.di.container import DIContainer


def get_container(request: Request) -> "DIContainer":
    """
    Get the DI container attached to the running application.

    Returns:
        DIContainer instance with all dependencies registered
    """
    return request.app.state.container


def get_user_application_service(request: Request) -> UserApplicationService:
    """
    Get user application service instance (singleton per container).

    Returns:
        UserApplicationService instance
    """
    return get_container(request).get(UserApplicationService)
