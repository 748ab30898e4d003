"""
User DTO
========

Pydantic models for user API requests and responses.
"""
from pydantic import BaseModel, ConfigDict, Field


class UserCreateRequest(BaseModel):
    """DTO for creating a user."""
    id: str = Field(..., description="Unique user identifier")
    username: str = Field(..., description="Display name")
    password: str = Field(..., description="User secret, stored as given")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "1",
                "username": "user1",
                "password": "password1"
            }
        }
    )


class UserResponse(BaseModel):
    """DTO for user data. The password is never returned."""
    id: str
    username: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "1",
                "username": "user1"
            }
        }
    )
