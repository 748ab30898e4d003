"""
Domain Layer
============

Core business logic and domain models.
This layer has no dependencies on external frameworks or infrastructure.

Contains:
- Models: the User entity
- Repository Interfaces: Abstract contracts for data access
- Services: domain operations over repositories
- Exceptions: typed not-found errors
"""
