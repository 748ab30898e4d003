"""
User Model
==========

Domain model representing a user in the system.
This is a pure domain object with no infrastructure dependencies.
"""
from dataclasses import dataclass


@dataclass
class User:
    """
    User domain model.

    Fields are stored exactly as supplied by the caller. No hashing,
    validation or normalization happens at this layer.
    """
    id: str
    username: str
    password: str

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, username={self.username!r}, password='***')"
