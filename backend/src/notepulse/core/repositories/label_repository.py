"""Get-or-create registry for per-user labels (tags and mentions)."""

import logging
from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy import and_, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.base import new_id
from ..models.mention import Mention
from ..models.tag import Tag

logger = logging.getLogger(__name__)

LabelT = TypeVar("LabelT", Tag, Mention)

# dialects with INSERT ... ON CONFLICT DO NOTHING
_CONFLICT_IGNORING_INSERTS = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}


class LabelRepository(Generic[LabelT]):
    """Repository for one label table, scoped by owner email.

    Names are matched exactly (case-sensitive, no trimming). An existing row
    is never modified.
    """

    model: Type[LabelT]

    def __init__(self, session: AsyncSession, model: Optional[Type[LabelT]] = None):
        self.session = session
        if model is not None:
            self.model = model

    async def get(self, name: str, user_email: str) -> Optional[LabelT]:
        """Find the label row for (name, owner)."""
        stmt = select(self.model).where(
            and_(self.model.name == name, self.model.user_email == user_email)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_or_create(self, name: str, user_email: str) -> LabelT:
        """Return the label for (name, owner), inserting it if absent.

        The insert ignores a unique-constraint conflict, so two callers
        racing on the same new name both end up with the single stored row.
        Does not commit.
        """
        existing = await self.get(name, user_email)
        if existing is not None:
            return existing

        dialect = self.session.get_bind().dialect.name
        insert_fn = _CONFLICT_IGNORING_INSERTS.get(dialect)
        if insert_fn is not None:
            stmt = (
                insert_fn(self.model)
                .values(id=new_id(), name=name, user_email=user_email)
                .on_conflict_do_nothing(index_elements=["name", "user_email"])
            )
            await self.session.execute(stmt)
        else:
            try:
                async with self.session.begin_nested():
                    self.session.add(self.model(id=new_id(), name=name, user_email=user_email))
            except IntegrityError:
                # someone else created it in the meantime: reload below
                logger.debug(f"{self.model.__name__} '{name}' created concurrently")

        label = await self.get(name, user_email)
        if label is None:
            raise RuntimeError(f"{self.model.__name__} '{name}' vanished after insert")
        return label

    async def get_or_create_many(self, names: List[str], user_email: str) -> List[LabelT]:
        """Resolve names in order, skipping repeats."""
        labels: List[LabelT] = []
        for name in dict.fromkeys(names):
            labels.append(await self.get_or_create(name, user_email))
        return labels

    async def list_names(self, user_email: str) -> List[str]:
        """Every name the owner has used, alphabetically."""
        stmt = (
            select(self.model.name)
            .where(self.model.user_email == user_email)
            .distinct()
            .order_by(self.model.name)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars())


class TagRepository(LabelRepository[Tag]):
    """Tags registry."""

    model = Tag


class MentionRepository(LabelRepository[Mention]):
    """Mentions registry."""

    model = Mention
