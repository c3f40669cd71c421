"""
➡️ But : Colonnes communes à toutes les tables (id + horodatages).

id : attribué par la base, jamais modifié ensuite.

created_at : posé à l'insertion.

updated_at : posé à l'insertion puis rafraîchi par SQLAlchemy à chaque UPDATE
(y compris les UPDATE "bulk" émis par BaseRepository.update_by_id).
"""

from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field
from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    """Horodatage UTC avec fuseau (les datetimes naïfs sont refusés à l'INSERT)."""
    return datetime.now(timezone.utc)


class BaseModelDB(SQLModel, table=False):
    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(
        default_factory=utcnow,
        nullable=False,
        sa_type=DateTime(timezone=True),
    )
    updated_at: datetime = Field(
        default_factory=utcnow,
        nullable=False,
        sa_type=DateTime(timezone=True),
        sa_column_kwargs={"onupdate": utcnow},
    )
