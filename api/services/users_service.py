"""User service for user-related business logic."""

from sqlalchemy.ext.asyncio import AsyncSession

from core import get_logger, set_wide_event_field
from domain import UserData, UserValidationError
from repositories.user_repository import UserNotFoundError, UserRepository
from repositories.utils import StoreError, commit_changes

__all__ = [
    "StoreError",
    "UserNotFoundError",
    "UserValidationError",
    "get_user",
    "list_users",
    "modify_user",
    "register_user",
    "remove_user",
]

logger = get_logger(__name__)


async def list_users(db: AsyncSession) -> list[UserData]:
    return await UserRepository(db).find_all()


async def get_user(db: AsyncSession, user_id: int) -> UserData:
    """Raises UserNotFoundError / StoreError from the repository unchanged."""
    return await UserRepository(db).find_by_id(user_id)


async def register_user(db: AsyncSession, user: UserData) -> UserData:
    """Validate and insert a new user.

    Raises:
        UserValidationError: name or email is empty. The store is not touched.
    """
    user.validate()
    created = await UserRepository(db).create(user)
    await commit_changes(db)
    set_wide_event_field("user_id", created.id)
    logger.info("user.registered", user_id=created.id)
    return created


async def modify_user(db: AsyncSession, user: UserData) -> None:
    """Validate and overwrite name/email of an existing user.

    Raises:
        UserValidationError: name or email is empty. The store is not touched.
        UserNotFoundError: no user with ``user.id``.
    """
    user.validate()
    await UserRepository(db).update(user)
    await commit_changes(db)
    set_wide_event_field("user_id", user.id)
    logger.info("user.modified", user_id=user.id)


async def remove_user(db: AsyncSession, user_id: int) -> None:
    await UserRepository(db).delete(user_id)
    await commit_changes(db)
    set_wide_event_field("user_id", user_id)
    logger.info("user.removed", user_id=user_id)
