"""
pytest configuration and fixtures.
"""

from typing import Generator
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.core.errors import StorageError
from app.main import create_app
from app.models import Employee
from app.repository import get_repository

BASE_PATHS = ["/employees", "/reactive/employees"]


class RecordingEmployeeRepository:
    """In-memory stand-in for the async repository that records every call."""

    def __init__(self):
        self.rows: dict[int, tuple[str, str]] = {}
        self.calls: list[tuple] = []

    def count(self, operation: str) -> int:
        return sum(1 for call in self.calls if call[0] == operation)

    @property
    def writes(self) -> int:
        return self.count("save") + self.count("delete_by_id")

    def _detached(self, employee_id: int) -> Employee:
        name, role = self.rows[employee_id]
        return Employee(id=employee_id, name=name, role=role)

    async def find_all(self) -> list[Employee]:
        self.calls.append(("find_all",))
        return [self._detached(i) for i in sorted(self.rows)]

    async def find_by_id(self, employee_id: int) -> Employee | None:
        self.calls.append(("find_by_id", employee_id))
        if employee_id not in self.rows:
            return None
        return self._detached(employee_id)

    async def save(self, employee: Employee) -> Employee:
        self.calls.append(("save", employee.id))
        employee_id = employee.id
        if employee_id is None:
            employee_id = max(self.rows, default=0) + 1
        self.rows[employee_id] = (employee.name, employee.role)
        return self._detached(employee_id)

    async def delete_by_id(self, employee_id: int) -> None:
        self.calls.append(("delete_by_id", employee_id))
        self.rows.pop(employee_id, None)


class FailingEmployeeRepository:
    """Repository whose every operation fails like a lost database."""

    async def _fail(self, *args):
        raise StorageError("database unavailable")

    find_all = find_by_id = save = delete_by_id = _fail


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def settings() -> Settings:
    """Settings backed by a private in-memory SQLite database."""
    return Settings(DATABASE_URL="sqlite+aiosqlite://", LOG_LEVEL="WARNING")


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """Client over the real SQLite storage."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def fake_repository() -> RecordingEmployeeRepository:
    return RecordingEmployeeRepository()


@pytest.fixture
def fake_client(app: FastAPI, fake_repository: RecordingEmployeeRepository) -> Generator[TestClient, None, None]:
    """Client whose handlers talk to the recording repository."""
    app.dependency_overrides[get_repository] = lambda: fake_repository
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def failing_client(app: FastAPI) -> Generator[TestClient, None, None]:
    app.dependency_overrides[get_repository] = FailingEmployeeRepository
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture(params=BASE_PATHS, ids=["blocking", "reactive"])
def base_path(request) -> str:
    return request.param
