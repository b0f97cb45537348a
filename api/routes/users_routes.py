"""User CRUD endpoints.

StoreError is not caught here; the app-level handler in main turns it into a
generic 500. Malformed bodies and non-integer ids become 400 through the
RequestValidationError handler, as do ids outside the INTEGER column range.
"""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Path

from core.database import DbSession
from domain import UserData
from schemas import MessageResponse, UserRequest, UserResponse
from services.users_service import (
    UserNotFoundError,
    UserValidationError,
    get_user,
    list_users,
    modify_user,
    register_user,
    remove_user,
)

router = APIRouter(prefix="/users", tags=["users"])

# users.id is a 32-bit INTEGER column; larger ids are rejected as 400
UserId = Annotated[int, Path(ge=-(2**31), le=2**31 - 1)]

_NOT_FOUND = {404: {"description": "User not found"}}
_BAD_REQUEST = {400: {"description": "Malformed request or validation failed"}}
_STORE_FAILURE = {500: {"description": "Database failure"}}


@router.get("", response_model=list[UserResponse], responses=_STORE_FAILURE)
async def list_users_endpoint(db: DbSession) -> list[UserResponse]:
    """List all users."""
    users = await list_users(db)
    return [UserResponse.model_validate(user) for user in users]


@router.post(
    "",
    response_model=UserResponse,
    status_code=201,
    responses={**_BAD_REQUEST, **_STORE_FAILURE},
)
async def create_user_endpoint(body: UserRequest, db: DbSession) -> UserResponse:
    """Register a new user. The id is generated by the database."""
    try:
        user = await register_user(db, UserData(name=body.name, email=body.email))
    except UserValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return UserResponse.model_validate(user)


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_STORE_FAILURE},
)
async def get_user_endpoint(user_id: UserId, db: DbSession) -> UserResponse:
    """Get a single user by id."""
    try:
        user = await get_user(db, user_id)
    except UserNotFoundError:
        raise HTTPException(status_code=404, detail="User not found")

    return UserResponse.model_validate(user)


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_STORE_FAILURE},
)
async def update_user_endpoint(
    user_id: UserId, body: UserRequest, db: DbSession
) -> UserResponse:
    """Replace name and email of an existing user."""
    user = UserData(id=user_id, name=body.name, email=body.email)
    try:
        await modify_user(db, user)
    except UserValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except UserNotFoundError:
        raise HTTPException(status_code=404, detail="User not found")

    return UserResponse.model_validate(user)


@router.delete(
    "/{user_id}",
    response_model=MessageResponse,
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_STORE_FAILURE},
)
async def delete_user_endpoint(user_id: UserId, db: DbSession) -> MessageResponse:
    """Delete a user by id."""
    try:
        await remove_user(db, user_id)
    except UserNotFoundError:
        raise HTTPException(status_code=404, detail="User not found")

    return MessageResponse(message="User deleted")
