"""Tests for the tag/mention get-or-create registry."""

from sqlalchemy import func, select

from notepulse.core.models import Mention, Tag
from notepulse.core.repositories.label_repository import (
    LabelRepository,
    MentionRepository,
    TagRepository,
)


async def test_get_or_create_is_idempotent(test_session):
    repo = TagRepository(test_session)

    first = await repo.get_or_create("urgent", "a@x.com")
    second = await repo.get_or_create("urgent", "a@x.com")

    assert first.id == second.id
    assert first.name == "urgent"
    assert first.user_email == "a@x.com"


async def test_same_name_other_owner_is_a_distinct_row(test_session):
    repo = TagRepository(test_session)

    mine = await repo.get_or_create("urgent", "a@x.com")
    theirs = await repo.get_or_create("urgent", "b@x.com")

    assert mine.id != theirs.id
    assert theirs.user_email == "b@x.com"


async def test_lookup_is_case_sensitive_and_exact(test_session):
    repo = TagRepository(test_session)

    lower = await repo.get_or_create("urgent", "a@x.com")
    upper = await repo.get_or_create("Urgent", "a@x.com")
    padded = await repo.get_or_create(" urgent", "a@x.com")

    assert len({lower.id, upper.id, padded.id}) == 3


async def test_concurrent_insert_is_absorbed(test_session, monkeypatch):
    """A row appearing between the lookup and the insert is reused, not duplicated."""
    repo = TagRepository(test_session)
    racer = Tag(name="urgent", user_email="a@x.com")
    test_session.add(racer)
    await test_session.flush()

    real_get = repo.get
    lookups = []

    async def stale_first_lookup(name, user_email):
        lookups.append(name)
        if len(lookups) == 1:
            return None
        return await real_get(name, user_email)

    monkeypatch.setattr(repo, "get", stale_first_lookup)

    tag = await repo.get_or_create("urgent", "a@x.com")

    assert tag.id == racer.id
    count = await test_session.scalar(select(func.count()).select_from(Tag))
    assert count == 1


async def test_get_or_create_many_skips_repeats(test_session):
    repo = MentionRepository(test_session)

    mentions = await repo.get_or_create_many(["bob", "alice", "bob"], "a@x.com")

    assert [m.name for m in mentions] == ["bob", "alice"]
    count = await test_session.scalar(select(func.count()).select_from(Mention))
    assert count == 2


async def test_list_names_sorted_and_scoped(test_session):
    repo = TagRepository(test_session)
    for name in ["zeta", "alpha", "mid"]:
        await repo.get_or_create(name, "a@x.com")
    await repo.get_or_create("other", "b@x.com")

    assert await repo.list_names("a@x.com") == ["alpha", "mid", "zeta"]
    assert await repo.list_names("b@x.com") == ["other"]
    assert await repo.list_names("nobody@x.com") == []


async def test_generic_repository_binds_any_label_model(test_session):
    repo = LabelRepository(test_session, Mention)
    mention = await repo.get_or_create("carol", "a@x.com")
    assert isinstance(mention, Mention)
