"""
Application Layer
=================

Application services and DTOs.
This layer orchestrates domain services for the outer interfaces.
"""
