import logging
from typing import Generic, TypeVar
from fastapi import Request
from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker
from app.core.errors import StorageError
from app.db import Base
from app.models import Employee

logger = logging.getLogger("storage")

ModelT = TypeVar("ModelT", bound=Base)


class AsyncCrudRepository(Generic[ModelT]):
    """
    Asynchronous CRUD store over a single table keyed by an integer ``id``.

    Every call runs in its own session and commits before returning, so
    entities handed back are detached and can be mutated and passed to
    ``save`` again.
    """

    model: type[ModelT]

    def __init__(self, session_factory: async_sessionmaker):
        self._session_factory = session_factory

    async def find_all(self) -> list[ModelT]:
        try:
            async with self._session_factory() as session:
                result = await session.execute(select(self.model).order_by(self.model.id))
                return list(result.scalars().all())
        except SQLAlchemyError as exc:
            raise self._failure("find_all", exc) from exc

    async def find_by_id(self, entity_id: int) -> ModelT | None:
        try:
            async with self._session_factory() as session:
                return await session.get(self.model, entity_id)
        except SQLAlchemyError as exc:
            raise self._failure("find_by_id", exc) from exc

    async def save(self, entity: ModelT) -> ModelT:
        """Insert when the id is unset or unknown, update otherwise."""
        try:
            async with self._session_factory() as session:
                persisted = await session.merge(entity)
                await session.commit()
                return persisted
        except SQLAlchemyError as exc:
            raise self._failure("save", exc) from exc

    async def delete_by_id(self, entity_id: int) -> None:
        try:
            async with self._session_factory() as session:
                await session.execute(delete(self.model).where(self.model.id == entity_id))
                await session.commit()
        except SQLAlchemyError as exc:
            raise self._failure("delete_by_id", exc) from exc

    def _failure(self, operation: str, exc: SQLAlchemyError) -> StorageError:
        logger.exception("storage_error", extra={"table": self.model.__tablename__, "operation": operation})
        return StorageError(f"{operation} on {self.model.__tablename__} failed: {exc}")


class ReactiveEmployeeRepository(AsyncCrudRepository[Employee]):
    model = Employee


# FastAPI dependency
def get_repository(request: Request) -> ReactiveEmployeeRepository:
    return ReactiveEmployeeRepository(request.app.state.session_factory)
