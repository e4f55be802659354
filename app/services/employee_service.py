from anyio import from_thread
from fastapi import Depends
from app.models import Employee
from app.repository import ReactiveEmployeeRepository, get_repository


class EmployeeRepositoryService:
    """
    Blocking facade over the asynchronous employee repository.

    Each method hands the coroutine to the application's event loop and
    blocks the calling thread until it resolves. It must be called from a
    worker thread started by that loop, which is what FastAPI does for
    plain ``def`` endpoints. The worker thread is held for the whole
    storage round trip.
    """

    def __init__(self, repository: ReactiveEmployeeRepository):
        self._repository = repository

    def find_all(self) -> list[Employee]:
        return from_thread.run(self._repository.find_all)

    def save(self, employee: Employee) -> Employee:
        return from_thread.run(self._repository.save, employee)

    def find_by_id(self, employee_id: int) -> Employee | None:
        return from_thread.run(self._repository.find_by_id, employee_id)

    def delete_by_id(self, employee_id: int) -> None:
        from_thread.run(self._repository.delete_by_id, employee_id)


def get_employee_service(
    repository: ReactiveEmployeeRepository = Depends(get_repository),
) -> EmployeeRepositoryService:
    return EmployeeRepositoryService(repository)
