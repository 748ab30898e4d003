"""
User Domain Service
===================

Domain operations for users, expressed over the repository interface.
"""
from user_registry.domain.models.user import User
from user_registry.domain.repositories.user_repository import UserRepository


class UserService:
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository):
        self._repository = user_repository

    def get_user(self, user_id: str) -> User:
        """Get a user by ID. Raises UserNotFoundError if absent."""
        return self._repository.get_by_id(user_id)

    def create_user(self, user: User) -> None:
        """Store a new user."""
        self._repository.add(user)
