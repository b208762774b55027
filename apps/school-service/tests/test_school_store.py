import asyncio

import pytest

from school_service.errors import SchoolAlreadyExistsError, SchoolStoreError
from school_service.store import SchoolStore


@pytest.mark.asyncio
async def test_insert_find_and_list(settings) -> None:
    store = SchoolStore(settings.DATABASE_URL)
    await store.ensure_ready()
    try:
        first = await store.insert("Green Valley", "12 Main Rd", 18.7, 78.9)
        second = await store.insert("Green Valley", "99 Lake Rd", 17.4, 78.5)

        assert first.id < second.id
        found = await store.find_by_identity("Green Valley", "12 Main Rd")
        assert found == first
        assert await store.find_by_identity("Green Valley", "nowhere") is None
        assert [school.id for school in await store.list_all()] == [first.id, second.id]
    finally:
        await store.close()


@pytest.mark.asyncio
async def test_ensure_ready_is_idempotent_across_restarts(settings) -> None:
    store = SchoolStore(settings.DATABASE_URL)
    await store.ensure_ready()
    await store.ensure_ready()
    await store.insert("Green Valley", "12 Main Rd", 18.7, 78.9)
    await store.close()

    reopened = SchoolStore(settings.DATABASE_URL)
    await reopened.ensure_ready()
    try:
        schools = await reopened.list_all()
        assert len(schools) == 1
        assert schools[0].name == "Green Valley"
    finally:
        await reopened.close()


@pytest.mark.asyncio
async def test_duplicate_insert_raises(settings) -> None:
    store = SchoolStore(settings.DATABASE_URL)
    try:
        await store.insert("Green Valley", "12 Main Rd", 18.7, 78.9)
        with pytest.raises(SchoolAlreadyExistsError):
            await store.insert("Green Valley", "12 Main Rd", 1.0, 2.0)
        assert len(await store.list_all()) == 1
    finally:
        await store.close()


@pytest.mark.asyncio
async def test_concurrent_duplicate_inserts_store_one_row(settings) -> None:
    store = SchoolStore(settings.DATABASE_URL)
    await store.ensure_ready()
    try:
        results = await asyncio.gather(
            *(store.insert("Green Valley", "12 Main Rd", 18.7, 78.9) for _ in range(5)),
            return_exceptions=True,
        )
        successes = [item for item in results if not isinstance(item, Exception)]
        duplicates = [item for item in results if isinstance(item, SchoolAlreadyExistsError)]

        assert len(successes) == 1
        assert len(duplicates) == 4
        assert len(await store.list_all()) == 1
    finally:
        await store.close()


@pytest.mark.asyncio
async def test_unreachable_database_raises_store_error(tmp_path) -> None:
    store = SchoolStore(f"sqlite:///{tmp_path / 'missing' / 'school.db'}")
    try:
        with pytest.raises(SchoolStoreError):
            await store.list_all()
    finally:
        await store.close()
