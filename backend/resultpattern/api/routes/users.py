"""User Routes: CRUD over UserService, projected through problem_details."""

from fastapi import APIRouter, Depends, Request

from resultpattern.api.dependencies import get_user_service
from resultpattern.api.problem_details import (
    to_api_response, to_created_response, to_no_content_response,
)
from resultpattern.schemas.user import CreateUserRequest, UpdateUserRequest, UserResponse
from resultpattern.services.user_service import UserService

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("")
async def get_all_users(request: Request, service: UserService = Depends(get_user_service)):
    """Get all users."""
    result = service.get_all().map(lambda users: [UserResponse.from_domain(u) for u in users])
    return to_api_response(result, request)


@router.get("/email/{email}")
async def get_user_by_email(
    email: str, request: Request, service: UserService = Depends(get_user_service),
):
    """Get a user by email (case-insensitive)."""
    return to_api_response(service.get_by_email(email).map(UserResponse.from_domain), request)


@router.get("/{user_id}")
async def get_user_by_id(
    user_id: int, request: Request, service: UserService = Depends(get_user_service),
):
    """Get a user by ID."""
    return to_api_response(service.get_by_id(user_id).map(UserResponse.from_domain), request)


@router.post("")
async def create_user(
    body: CreateUserRequest, request: Request,
    service: UserService = Depends(get_user_service),
):
    """Create a new user."""
    return to_created_response(
        service.create(body).map(UserResponse.from_domain),
        lambda user: f"/api/users/{user.id}",
        request,
    )


@router.put("/{user_id}")
async def update_user(
    user_id: int, body: UpdateUserRequest, request: Request,
    service: UserService = Depends(get_user_service),
):
    """Update an existing user. Omitted fields are left unchanged."""
    return to_api_response(
        service.update(user_id, body).map(UserResponse.from_domain), request,
    )


@router.delete("/{user_id}")
async def delete_user(
    user_id: int, request: Request, service: UserService = Depends(get_user_service),
):
    """Delete a user."""
    return to_no_content_response(service.delete(user_id), request)
