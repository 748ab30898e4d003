"""
Providers Package
=================

Dependency injection providers for registering dependencies.
"""
from .database_provider import DatabaseProvider, USER_DATABASE_KEY
from .repository_provider import RepositoryProvider
from .user_provider import UserProvider

__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "UserProvider",
    "USER_DATABASE_KEY",
]
