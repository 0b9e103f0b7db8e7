# Base model for database stuff
import uuid
from datetime import datetime
from typing import Any, Dict

from sqlalchemy import String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def new_id() -> str:
    """Opaque string id for server-generated rows."""
    return uuid.uuid4().hex


class Base(DeclarativeBase):
    """Declarative root shared by entity and junction tables."""

    def __repr__(self) -> str:
        pk = ", ".join(f"{c.name}={getattr(self, c.key, None)!r}" for c in self.__table__.primary_key)
        return f"<{self.__class__.__name__}({pk})>"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict for JSON."""
        result = {}
        for column in self.__table__.columns:
            val = getattr(self, column.key)
            if isinstance(val, datetime):
                val = val.isoformat()
            result[column.name] = val
        return result


class BaseModel(Base):
    """Common base for entity tables keyed by an opaque string id."""

    __abstract__ = True

    # ids are opaque strings; notes get theirs from the client
    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=new_id)

    def __eq__(self, other: object) -> bool:
        """Equality by primary key if available and same mapped class."""
        if self is other:
            return True
        if not isinstance(other, self.__class__):
            return NotImplemented  # type: ignore[return-value]
        return self.id is not None and self.id == other.id

    def __hash__(self) -> int:
        return hash((self.__class__, self.id))
