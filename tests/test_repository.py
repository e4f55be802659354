"""
Tests for the async CRUD repository over SQLite.
"""

import pytest

from app.core.config import Settings
from app.core.errors import StorageError
from app.db import build_engine, build_session_factory, create_tables
from app.models import Employee
from app.repository import ReactiveEmployeeRepository

pytestmark = pytest.mark.anyio


@pytest.fixture
async def engine(anyio_backend):
    engine = build_engine(Settings(DATABASE_URL="sqlite+aiosqlite://"))
    yield engine
    await engine.dispose()


@pytest.fixture
async def repository(engine):
    await create_tables(engine)
    return ReactiveEmployeeRepository(build_session_factory(engine))


async def test_save_assigns_increasing_ids(repository):
    first = await repository.save(Employee(name="Alice", role="Developer"))
    second = await repository.save(Employee(name="Alice", role="Developer"))

    assert first.id == 1
    assert second.id == 2


async def test_save_with_unknown_id_inserts_that_id(repository):
    saved = await repository.save(Employee(id=5, name="Bob", role="Manager"))

    assert saved.id == 5
    found = await repository.find_by_id(5)
    assert (found.name, found.role) == ("Bob", "Manager")


async def test_save_of_mutated_entity_updates_in_place(repository):
    created = await repository.save(Employee(name="Alice", role="Developer"))
    found = await repository.find_by_id(created.id)
    found.role = "Architect"

    updated = await repository.save(found)

    assert updated.id == created.id
    assert [(e.id, e.role) for e in await repository.find_all()] == [(created.id, "Architect")]


async def test_find_by_id_absent_is_none(repository):
    assert await repository.find_by_id(99) is None


async def test_find_all_is_ordered_by_id(repository):
    await repository.save(Employee(id=3, name="Carol", role="Designer"))
    await repository.save(Employee(id=1, name="Alice", role="Developer"))

    assert [e.id for e in await repository.find_all()] == [1, 3]


async def test_delete_by_id_missing_is_noop(repository):
    await repository.save(Employee(name="Alice", role="Developer"))

    await repository.delete_by_id(1)
    await repository.delete_by_id(1)

    assert await repository.find_all() == []


async def test_sqlalchemy_errors_become_storage_errors(engine):
    # no tables created
    repository = ReactiveEmployeeRepository(build_session_factory(engine))

    with pytest.raises(StorageError):
        await repository.find_all()
