"""Repository layer for database operations.

Repositories encapsulate all database queries, keeping routes thin and focused
on HTTP handling. This separation provides:
- Single source of truth for database operations
- Easier testing (repositories can be mocked)
- Store failures translated into StoreError at one boundary
"""

from repositories.user_repository import UserNotFoundError, UserRepository
from repositories.utils import StoreError, store_operation

__all__ = [
    "StoreError",
    "UserNotFoundError",
    "UserRepository",
    "store_operation",
]
