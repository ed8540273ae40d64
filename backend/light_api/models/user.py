"""User ORM — the single persisted entity.

Invariants:
    - id is a caller-supplied TEXT primary key (no server default)
    - name is non-nullable, email is nullable
    - Rows are only ever inserted and read; never updated or deleted
"""

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from light_api.db.base import Base


class User(Base):
    """Row of the users table."""
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(Text, primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str | None] = mapped_column(Text, nullable=True)
