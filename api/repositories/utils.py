"""Repository utilities: store error translation and slow query logging."""

import time
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import ParamSpec, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.logger import get_logger
from core.wide_event import set_wide_event_fields

logger = get_logger(__name__)

# Threshold for logging slow queries (milliseconds)
SLOW_QUERY_THRESHOLD_MS = 500

P = ParamSpec("P")
R = TypeVar("R")


class StoreError(Exception):
    """Raised when the database fails (connection loss, SQL error, bad result)."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Store operation failed: {operation}")


def store_operation(
    operation_name: str,
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """Decorator for repository methods that talk to the database.

    Translates any SQLAlchemyError into StoreError (original chained as
    __cause__), logs failures at ERROR and slow queries at WARNING.
    Domain errors such as UserNotFoundError pass through untouched.

    Usage:
        @store_operation("find_user_by_id")
        async def find_by_id(self, user_id: int) -> UserData:
            ...
    """

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        @wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            start_time = time.perf_counter()
            try:
                result = await func(*args, **kwargs)
            except SQLAlchemyError as e:
                duration_ms = round((time.perf_counter() - start_time) * 1000, 2)
                set_wide_event_fields(
                    db_query_error=True,
                    db_operation=operation_name,
                    db_duration_ms=duration_ms,
                    db_error_type=type(e).__name__,
                )
                logger.error(
                    "db.query.failed",
                    operation=operation_name,
                    duration_ms=duration_ms,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise StoreError(operation_name) from e

            duration_ms = round((time.perf_counter() - start_time) * 1000, 2)
            if duration_ms > SLOW_QUERY_THRESHOLD_MS:
                set_wide_event_fields(
                    db_slow_query=True,
                    db_operation=operation_name,
                    db_duration_ms=duration_ms,
                )
                logger.warning(
                    "db.query.slow", operation=operation_name, duration_ms=duration_ms
                )
            return result

        return wrapper

    return decorator


@store_operation("commit")
async def commit_changes(db: AsyncSession) -> None:
    """Commit the request transaction; a failed commit surfaces as StoreError."""
    await db.commit()
