# app/routers/employees.py
import logging
from fastapi import APIRouter, Depends, Request, Response, status
from app.core.errors import EmployeeNotFoundError
from app.models import Employee
from app.routers import docs
from app.schemas import EmployeeId, EmployeeIn, EmployeeOut
from app.services.employee_service import EmployeeRepositoryService, get_employee_service

# Plain ``def`` endpoints: FastAPI runs each request on a threadpool worker,
# and the service blocks that worker on every storage call.
router = APIRouter(tags=["Employee API (blocking)"])
logger = logging.getLogger("employees")


@router.get(
    "/employees",
    response_model=list[EmployeeOut],
    summary="Get all employees",
    description="Returns a list of all employees. This is a **safe**, **idempotent**, and **cacheable** operation.",
    responses=docs.LIST_RESPONSES,
)
def all_employees(service: EmployeeRepositoryService = Depends(get_employee_service)):
    return service.find_all()


@router.post(
    "/employees",
    response_model=EmployeeOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new employee",
    description="Adds a new employee to the system. This is an **unsafe** operation because it modifies the server state.",
    responses=docs.CREATE_RESPONSES,
)
def new_employee(
    body: EmployeeIn,
    request: Request,
    response: Response,
    service: EmployeeRepositoryService = Depends(get_employee_service),
):
    employee = service.save(Employee(name=body.name, role=body.role))
    response.headers["Location"] = str(request.url_for("one_employee", employee_id=employee.id))
    logger.info("employee_created", extra={"employee_id": employee.id})
    return employee


@router.get(
    "/employees/{employee_id}",
    name="one_employee",
    response_model=EmployeeOut,
    summary="Get an employee by ID",
    description="Fetches a specific employee by its unique ID. **Safe** and **idempotent** operation.",
    responses=docs.READ_RESPONSES,
)
def one_employee(employee_id: EmployeeId, service: EmployeeRepositoryService = Depends(get_employee_service)):
    employee = service.find_by_id(employee_id)
    if employee is None:
        raise EmployeeNotFoundError(employee_id)
    return employee


@router.put(
    "/employees/{employee_id}",
    response_model=EmployeeOut,
    summary="Update or create an employee",
    description="Replaces an existing employee or creates a new one if not found. **Unsafe** and **idempotent**.",
    responses=docs.REPLACE_RESPONSES,
)
def replace_employee(
    employee_id: EmployeeId,
    body: EmployeeIn,
    request: Request,
    response: Response,
    service: EmployeeRepositoryService = Depends(get_employee_service),
):
    existing = service.find_by_id(employee_id)
    if existing is not None:
        existing.name = body.name
        existing.role = body.role
        employee = service.save(existing)
        response.status_code = status.HTTP_200_OK
    else:
        employee = service.save(Employee(id=employee_id, name=body.name, role=body.role))
        response.status_code = status.HTTP_201_CREATED
    response.headers["Content-Location"] = str(request.url_for("one_employee", employee_id=employee_id))
    logger.info("employee_replaced", extra={"employee_id": employee_id, "status": response.status_code})
    return employee


@router.delete(
    "/employees/{employee_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete an employee by ID",
    description="Deletes the employee resource. This is an **unsafe**, **idempotent** operation.",
    responses=docs.DELETE_RESPONSES,
)
def delete_employee(employee_id: EmployeeId, service: EmployeeRepositoryService = Depends(get_employee_service)):
    service.delete_by_id(employee_id)
    logger.info("employee_deleted", extra={"employee_id": employee_id})
    return Response(status_code=status.HTTP_204_NO_CONTENT)
