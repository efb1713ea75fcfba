"""
API v1 routes.

Defines REST endpoints for the User Management API. Domain errors raised
by the service are rendered by the handlers in src.api.errors.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status

from src.api.dependencies import get_user_management
from src.api.errors import error_response
from src.api.models import ErrorResponse, UserRequest, UserResponse
from src.domain.management import UserManagementService

router = APIRouter(prefix="/users", tags=["v1"])


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        409: {"model": ErrorResponse, "description": "Email already in use"},
        422: {"description": "Validation error"},
    },
    summary="Create a new user",
    description="Creates a new user with the provided information.",
)
async def create_user(
    request_data: UserRequest,
    service: UserManagementService = Depends(get_user_management),
) -> UserResponse:
    created = service.create_user(request_data.to_domain())
    return UserResponse.from_domain(created)


@router.get(
    "",
    response_model=list[UserResponse],
    summary="Get all users",
    description="Retrieves a list of all users.",
)
async def get_all_users(
    service: UserManagementService = Depends(get_user_management),
) -> list[UserResponse]:
    return [UserResponse.from_domain(user) for user in service.get_all_users()]


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses={
        404: {"model": ErrorResponse, "description": "User not found"},
        422: {"description": "Invalid UUID"},
    },
    summary="Get user by ID",
    description="Retrieves a user by their unique identifier.",
)
async def get_user_by_id(
    user_id: UUID,
    request: Request,
    service: UserManagementService = Depends(get_user_management),
) -> UserResponse | Response:
    user = service.get_user_by_id(user_id)
    if user is None:
        # Reads signal absence with None rather than UserNotFound.
        return error_response(
            request, status.HTTP_404_NOT_FOUND, f"User with id {user_id} not found"
        )
    return UserResponse.from_domain(user)


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    responses={
        404: {"model": ErrorResponse, "description": "User not found"},
        409: {"model": ErrorResponse, "description": "Email already in use"},
        422: {"description": "Validation error"},
    },
    summary="Update user",
    description="Replaces an existing user's information.",
)
async def update_user(
    user_id: UUID,
    request_data: UserRequest,
    service: UserManagementService = Depends(get_user_management),
) -> UserResponse:
    updated = service.update_user(request_data.to_domain(user_id))
    return UserResponse.from_domain(updated)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": ErrorResponse, "description": "User not found"}},
    summary="Delete user",
    description="Deletes a user by their unique identifier.",
)
async def delete_user(
    user_id: UUID,
    service: UserManagementService = Depends(get_user_management),
) -> Response:
    service.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
