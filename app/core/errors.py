# app/core/errors.py
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


class EmployeeNotFoundError(Exception):
    def __init__(self, employee_id: int):
        self.employee_id = employee_id
        super().__init__(f"Could not find employee {employee_id}")


class StorageError(Exception):
    """Unrecoverable failure of the storage collaborator."""


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(EmployeeNotFoundError)
    async def employee_not_found(request: Request, exc: EmployeeNotFoundError):
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": str(exc)})

    @app.exception_handler(RequestValidationError)
    async def invalid_request(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid request", "detail": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(StorageError)
    async def storage_failure(request: Request, exc: StorageError):
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Storage failure"},
        )
