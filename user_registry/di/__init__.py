"""
Dependency Injection
====================

Container and providers wiring store, repositories and services.
"""
from .base_container import BaseContainer
from .container import DIContainer

__all__ = ["BaseContainer", "DIContainer"]
