from datetime import datetime, timedelta

import pytest
from mongomock_motor import AsyncMongoMockClient

from church_portal_api.app.repositories.base import skip_for_page
from church_portal_api.app.repositories.event_repository import EventRepository
from church_portal_api.app.repositories.post_repository import PostRepository
from church_portal_api.app.repositories.registration_repository import RegistrationRepository


@pytest.fixture
def db():
    return AsyncMongoMockClient()["repositories_test"]


def test_skip_for_page():
    assert skip_for_page(1, 28) == 0
    assert skip_for_page(3, 2) == 4
    assert skip_for_page(0, 10) == 0


async def test_insert_find_update_delete(db):
    repo = RegistrationRepository(db)
    record = await repo.insert({"name": "Ama", "check": False})
    assert "_id" not in record

    found = await repo.find_by_id(record["id"])
    assert found["name"] == "Ama"

    updated = await repo.update_by_id(record["id"], {"check": True})
    assert updated["check"] is True
    assert updated["name"] == "Ama"

    assert await repo.delete_by_id(record["id"]) is True
    assert await repo.delete_by_id(record["id"]) is False
    assert await repo.find_by_id(record["id"]) is None


async def test_unknown_and_malformed_ids(db):
    repo = RegistrationRepository(db)
    assert await repo.find_by_id("0123456789abcdef01234567") is None
    assert await repo.find_by_id("bogus") is None
    assert await repo.update_by_id("bogus", {"check": True}) is None
    assert await repo.delete_by_id("bogus") is False
    assert await repo.count() == 0


async def test_post_timestamps(db):
    repo = PostRepository(db)
    record = await repo.insert({"title": "t", "content": "c"})
    assert record["created_at"] == record["updated_at"]

    updated = await repo.update_by_id(record["id"], {"title": "t2"})
    assert updated["updated_at"] >= updated["created_at"]


async def test_title_filter_and_count(db):
    repo = PostRepository(db)
    for title in ("Grace", "GRACEFUL", "Hope"):
        await repo.insert({"title": title, "content": ""})
    filters = PostRepository.title_filter("grace")
    assert await repo.count(filters) == 2
    assert PostRepository.title_filter("") == {}


async def test_find_upcoming(db):
    repo = EventRepository(db)
    now = datetime(2030, 1, 1, 12, 0)
    await repo.insert({"title": "later", "date": now + timedelta(days=2)})
    await repo.insert({"title": "past", "date": now - timedelta(minutes=1)})
    await repo.insert({"title": "now", "date": now})
    await repo.insert({"title": "soon", "date": now + timedelta(hours=1)})

    titles = [e["title"] for e in await repo.find_upcoming(now)]
    assert titles == ["now", "soon", "later"]
