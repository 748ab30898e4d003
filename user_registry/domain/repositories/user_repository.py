"""
User Repository Interface
=========================

Abstract interface for user data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod

from user_registry.domain.models.user import User


class UserRepository(ABC):
    """
    Abstract repository for user persistence operations.

    This interface defines the contract for user data access so the
    storage mechanism can be swapped without changing callers.
    """

    @abstractmethod
    def get_by_id(self, user_id: str) -> User:
        """
        Get a user by its ID.

        Args:
            user_id: Unique user identifier

        Returns:
            User entity

        Raises:
            UserNotFoundError: If no user has this ID
        """
        pass

    @abstractmethod
    def add(self, user: User) -> None:
        """
        Add a user.

        No uniqueness check is performed; a second user with an existing
        ID is stored as well and shadowed by the first on lookup.

        Args:
            user: User entity to add
        """
        pass
