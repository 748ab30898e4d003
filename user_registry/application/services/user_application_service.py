"""
User Application Service
========================

Application service that coordinates user-related operations
for the interface layer.
"""
import logging

from user_registry.domain.models.user import User
from user_registry.domain.services.user_service import UserService

logger = logging.getLogger(__name__)


class UserApplicationService:
    """
    Application service for user operations.

    Provides a high-level interface for the controllers and forwards
    to the domain service.
    """

    def __init__(self, user_service: UserService):
        """
        Initialize service with the domain service.

        Args:
            user_service: Domain service for users
        """
        self._user_service = user_service

    def get_user(self, user_id: str) -> User:
        """
        Get a user by ID.

        Args:
            user_id: Unique user identifier

        Returns:
            User entity

        Raises:
            UserNotFoundError: If no user has this ID
        """
        logger.debug(f"Fetching user {user_id}")
        return self._user_service.get_user(user_id)

    def create_user(self, user: User) -> None:
        """
        Create a user.

        Args:
            user: User entity to store
        """
        self._user_service.create_user(user)
        logger.info(f"User {user.id} created")
