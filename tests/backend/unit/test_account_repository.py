"""
Unit tests for services.account_repository against an in-memory database.
"""
import pytest

from resumehub.core.errors import DuplicateIdentity, NotFound
from resumehub.models.account import Account


pytestmark = pytest.mark.asyncio


async def test_create_assigns_id_and_defaults(repository):
    account = await repository.create("Alice", "a@x.com", "hash")
    assert account.id == 1
    assert account.title == ""
    assert account.bio == ""
    assert account.created_at is not None
    assert account.has_attachment is False


async def test_duplicate_email_rejected_by_unique_index(repository):
    await repository.create("Alice", "a@x.com", "hash")
    with pytest.raises(DuplicateIdentity):
        await repository.create("Someone Else", "a@x.com", "other-hash")
    assert await Account.filter(email="a@x.com").count() == 1


async def test_email_is_case_sensitive_as_stored(repository):
    await repository.create("Alice", "a@x.com", "hash")
    other = await repository.create("Alice Upper", "A@x.com", "hash")
    assert other.id == 2


async def test_find_by_email_includes_hash(repository):
    await repository.create("Alice", "a@x.com", "secret-hash")
    found = await repository.find_by_email("a@x.com")
    assert found.password_hash == "secret-hash"
    assert await repository.find_by_email("nobody@x.com") is None


async def test_find_by_id_omits_hash(repository):
    created = await repository.create("Alice", "a@x.com", "secret-hash", title="Engineer")
    profile = await repository.find_by_id(created.id)
    assert profile.title == "Engineer"
    assert "password_hash" not in profile.model_dump()
    assert "secret-hash" not in profile.model_dump_json()
    assert await repository.find_by_id(999) is None


async def test_update_attachment_sets_both_columns(repository):
    created = await repository.create("Alice", "a@x.com", "hash")
    await repository.update_attachment(created.id, "1-2.pdf", "r.pdf")
    profile = await repository.find_by_id(created.id)
    assert profile.resumeFilename == "1-2.pdf"
    assert profile.resumeOriginalName == "r.pdf"
    assert profile.hasAttachment is True


async def test_update_attachment_unknown_id(repository):
    with pytest.raises(NotFound):
        await repository.update_attachment(404, "1-2.pdf", "r.pdf")


async def test_update_profile_only_changes_given_fields(repository):
    created = await repository.create("Alice", "a@x.com", "hash", title="Engineer", bio="Hi")
    profile = await repository.update_profile(created.id, bio="Hello")
    assert profile.title == "Engineer"
    assert profile.bio == "Hello"
    with pytest.raises(NotFound):
        await repository.update_profile(404, title="x")


async def test_search_is_case_insensitive_substring_newest_first(repository):
    for name, email in [("Alice Smith", "a@x.com"), ("Bob", "b@x.com"), ("alicia", "c@x.com")]:
        await repository.create(name, email, "hash")

    rows = await repository.search("ALIC")
    assert [r.name for r in rows] == ["alicia", "Alice Smith"]

    everyone = await repository.search("")
    assert [r.id for r in everyone] == [3, 2, 1]
    assert await repository.search("zzz-no-match") == []


async def test_search_limit(repository):
    for i in range(5):
        await repository.create(f"user{i}", f"u{i}@x.com", "hash")
    rows = await repository.search("", limit=2)
    assert [r.id for r in rows] == [5, 4]


async def test_search_summary_reports_attachment(repository):
    created = await repository.create("Alice", "a@x.com", "hash")
    await repository.create("Bob", "b@x.com", "hash")
    await repository.update_attachment(created.id, "1-2.pdf", "r.pdf")
    rows = {r.name: r for r in await repository.search("")}
    assert rows["Alice"].hasAttachment is True
    assert rows["Bob"].hasAttachment is False
    assert await repository.attachment_names() == {"1-2.pdf"}
