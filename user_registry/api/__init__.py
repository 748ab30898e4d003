"""
API/Presentation Layer
======================

HTTP API layer using FastAPI.
This layer handles HTTP requests and responses.

Contains:
- Controllers: FastAPI route handlers and the in-process UserController
- Dependencies: request-scoped access to the DI container
"""
