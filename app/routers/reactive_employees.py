# app/routers/reactive_employees.py
import logging
from fastapi import APIRouter, Depends, Request, Response, status
from app.core.errors import EmployeeNotFoundError
from app.models import Employee
from app.repository import ReactiveEmployeeRepository, get_repository
from app.routers import docs
from app.schemas import EmployeeId, EmployeeIn, EmployeeOut

# Coroutine endpoints awaiting the repository directly; the event loop is never blocked.
router = APIRouter(prefix="/reactive", tags=["Employee API (reactive)"])
logger = logging.getLogger("employees.reactive")


@router.get(
    "/employees",
    response_model=list[EmployeeOut],
    summary="Get all employees (reactive)",
    description="Returns all employees without blocking. This is a **safe**, **idempotent**, and **cacheable** operation.",
    responses=docs.LIST_RESPONSES,
)
async def all_employees(repository: ReactiveEmployeeRepository = Depends(get_repository)):
    return await repository.find_all()


@router.post(
    "/employees",
    response_model=EmployeeOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new employee (reactive)",
    description="Adds a new employee asynchronously. This is an **unsafe** operation because it modifies the server state.",
    responses=docs.CREATE_RESPONSES,
)
async def new_employee(
    body: EmployeeIn,
    request: Request,
    response: Response,
    repository: ReactiveEmployeeRepository = Depends(get_repository),
):
    saved = await repository.save(Employee(name=body.name, role=body.role))
    response.headers["Location"] = str(request.url_for("one_employee_reactive", employee_id=saved.id))
    logger.info("employee_created", extra={"employee_id": saved.id})
    return saved


@router.get(
    "/employees/{employee_id}",
    name="one_employee_reactive",
    response_model=EmployeeOut,
    summary="Get an employee by ID (reactive)",
    description="Fetches a specific employee asynchronously by ID. **Safe** and **idempotent**.",
    responses=docs.READ_RESPONSES,
)
async def one_employee(employee_id: EmployeeId, repository: ReactiveEmployeeRepository = Depends(get_repository)):
    employee = await repository.find_by_id(employee_id)
    if employee is None:
        raise EmployeeNotFoundError(employee_id)
    return employee


@router.put(
    "/employees/{employee_id}",
    response_model=EmployeeOut,
    summary="Update or create an employee (reactive)",
    description="Replaces an existing employee or creates one if it does not exist. **Unsafe** but **idempotent** operation.",
    responses=docs.REPLACE_RESPONSES,
)
async def replace_employee(
    employee_id: EmployeeId,
    body: EmployeeIn,
    request: Request,
    response: Response,
    repository: ReactiveEmployeeRepository = Depends(get_repository),
):
    response.headers["Content-Location"] = str(request.url_for("one_employee_reactive", employee_id=employee_id))
    existing = await repository.find_by_id(employee_id)
    if existing is None:
        return await _create_with_id(repository, employee_id, body, response)
    return await _update(repository, existing, body, response)


async def _update(repository: ReactiveEmployeeRepository, existing: Employee, body: EmployeeIn, response: Response):
    existing.name = body.name
    existing.role = body.role
    updated = await repository.save(existing)
    response.status_code = status.HTTP_200_OK
    logger.info("employee_replaced", extra={"employee_id": updated.id, "status": response.status_code})
    return updated


async def _create_with_id(repository: ReactiveEmployeeRepository, employee_id: int, body: EmployeeIn, response: Response):
    created = await repository.save(Employee(id=employee_id, name=body.name, role=body.role))
    response.status_code = status.HTTP_201_CREATED
    logger.info("employee_replaced", extra={"employee_id": created.id, "status": response.status_code})
    return created


@router.delete(
    "/employees/{employee_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete an employee by ID (reactive)",
    description="Deletes an employee asynchronously by ID. **Unsafe** but **idempotent** operation.",
    responses=docs.DELETE_RESPONSES,
)
async def delete_employee(employee_id: EmployeeId, repository: ReactiveEmployeeRepository = Depends(get_repository)):
    await repository.delete_by_id(employee_id)
    logger.info("employee_deleted", extra={"employee_id": employee_id})
    return Response(status_code=status.HTTP_204_NO_CONTENT)
