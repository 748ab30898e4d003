"""
User Controller
===============

User endpoints: an in-process controller class and the FastAPI routes
exposing the same two operations over HTTP.
"""
import logging

from fastapi import APIRouter, HTTPException, status, Depends

from user_registry.application.dto.user_dto import UserCreateRequest, UserResponse
from user_registry.application.services.user_application_service import UserApplicationService
from user_registry.api.v1.dependencies import get_user_application_service
from user_registry.domain.exceptions import UserNotFoundError
from user_registry.domain.models.user import User

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])


class UserController:
    """In-process controller: builds User entities from raw fields."""

    def __init__(self, user_application_service: UserApplicationService):
        self._service = user_application_service

    def get_user(self, user_id: str) -> User:
        """Get a user by ID. Raises UserNotFoundError if absent."""
        return self._service.get_user(user_id)

    def create_user(self, id: str, username: str, password: str) -> None:
        """Create a user from its three fields."""
        self._service.create_user(User(id=id, username=username, password=password))


def _to_response(user: User) -> UserResponse:
    return UserResponse(id=user.id, username=user.username)


@router.post(
    "/create",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
    description="""
    Store a new user in the in-memory registry.

    No uniqueness check is made: creating a second user with an existing ID
    succeeds, and lookups keep returning the first one.
    """
)
async def create_user(
    request: UserCreateRequest,
    service: UserApplicationService = Depends(get_user_application_service),
) -> UserResponse:
    """Create a user."""
    try:
        user = User(id=request.id, username=request.username, password=request.password)
        service.create_user(user)
        return _to_response(user)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )


@router.get(
    "/get/{user_id}",
    response_model=UserResponse,
    summary="Get user by ID",
    description="Get details of a specific user."
)
async def get_user(
    user_id: str,
    service: UserApplicationService = Depends(get_user_application_service),
) -> UserResponse:
    """Get a specific user by ID."""
    try:
        user = service.get_user(user_id)
    except UserNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )

    return _to_response(user)
