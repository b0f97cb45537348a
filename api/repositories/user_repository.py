"""User repository for database operations."""

from sqlalchemy import Row, delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from domain import UserData
from models import User
from repositories.utils import store_operation

# Column order for every SELECT below. _row_to_user unpacks rows by
# position, so reordering this tuple must be mirrored there.
USER_COLUMNS = (User.id, User.name, User.email)


class UserNotFoundError(Exception):
    """Raised when no user row matches the requested id."""

    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__(f"User {user_id} not found")


def _row_to_user(row: Row) -> UserData:
    user_id, name, email = row
    return UserData(id=user_id, name=name, email=email)


class UserRepository:
    """Repository for User database operations.

    Each method issues exactly one SQL statement. Committing is left to the
    service layer; rollback to the request-scoped ``get_db`` dependency.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    @store_operation("find_all_users")
    async def find_all(self) -> list[UserData]:
        """Return every user ordered by id; empty list when the table is empty."""
        result = await self.db.execute(select(*USER_COLUMNS).order_by(User.id))
        return [_row_to_user(row) for row in result.all()]

    @store_operation("find_user_by_id")
    async def find_by_id(self, user_id: int) -> UserData:
        result = await self.db.execute(
            select(*USER_COLUMNS).where(User.id == user_id)
        )
        row = result.first()
        if row is None:
            raise UserNotFoundError(user_id)
        return _row_to_user(row)

    @store_operation("create_user")
    async def create(self, user: UserData) -> UserData:
        """Insert a user and store the generated id on ``user`` in place.

        Validation is the caller's job.
        """
        result = await self.db.execute(
            insert(User).values(name=user.name, email=user.email).returning(User.id)
        )
        user.id = result.scalar_one()
        return user

    @store_operation("update_user")
    async def update(self, user: UserData) -> None:
        result = await self.db.execute(
            update(User)
            .where(User.id == user.id)
            .values(name=user.name, email=user.email)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            raise UserNotFoundError(user.id)

    @store_operation("delete_user")
    async def delete(self, user_id: int) -> None:
        result = await self.db.execute(
            delete(User)
            .where(User.id == user_id)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            raise UserNotFoundError(user_id)
