"""SQLAlchemy models for the Users API."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from core.database import Base


class User(Base):
    """Row in the ``users`` table.

    The table is expected to exist already; this mapping is used to build
    statements and to create the schema in tests.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
