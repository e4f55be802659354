# app/routers/docs.py
# OpenAPI response metadata shared by the blocking and reactive employee routers.
from app.schemas import EmployeeOut, ErrorOut

EMPLOYEE_LIST_EXAMPLE = [
    {"id": 1, "name": "Alice", "role": "Developer"},
    {"id": 2, "name": "Bob", "role": "Manager"},
    {"id": 3, "name": "Carol", "role": "Designer"},
]
EMPLOYEE_EXAMPLE = {"id": 1, "name": "Alice", "role": "Developer"}

INVALID_INPUT = {400: {"description": "Invalid input"}}

LIST_RESPONSES = {
    200: {
        "description": "List of employees successfully retrieved",
        "content": {"application/json": {"example": EMPLOYEE_LIST_EXAMPLE}},
    },
}

CREATE_RESPONSES = {
    201: {
        "description": "Employee successfully created",
        "content": {"application/json": {"example": EMPLOYEE_EXAMPLE}},
    },
    **INVALID_INPUT,
}

READ_RESPONSES = {
    200: {"description": "Employee found", "model": EmployeeOut},
    404: {
        "description": "Employee not found",
        "model": ErrorOut,
        "content": {"application/json": {"example": {"error": "Could not find employee 99"}}},
    },
}

REPLACE_RESPONSES = {
    200: {"description": "Employee successfully updated", "model": EmployeeOut},
    201: {"description": "Employee created as new resource", "model": EmployeeOut},
    **INVALID_INPUT,
}

DELETE_RESPONSES = {
    204: {"description": "Employee successfully deleted (or did not exist)"},
}
