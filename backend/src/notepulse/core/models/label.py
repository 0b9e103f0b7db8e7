# Shared shape for per-user labels (tags and mentions)
from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import Mapped, declared_attr, mapped_column


class LabelMixin:
    """Free-text label owned by one user; unique per (name, user_email)."""

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    user_email: Mapped[str] = mapped_column(String(320), nullable=False, index=True)

    @declared_attr.directive
    def __table_args__(cls):
        return (UniqueConstraint("name", "user_email", name=f"uq_{cls.__tablename__}_name_user"),)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(name='{self.name}', user_email='{self.user_email}')>"
