from typing import Annotated
from fastapi import Path
from pydantic import BaseModel, ConfigDict, Field

# ids are stored as signed 64-bit integers
EmployeeId = Annotated[int, Path(ge=-(2**63), le=2**63 - 1, description="Employee ID")]

class EmployeeIn(BaseModel):
    name: str
    role: str
    # accepted for symmetry with responses; POST ignores it, PUT takes the path value
    id: int | None = Field(default=None, exclude=True)

    model_config = ConfigDict(
        json_schema_extra={"examples": [{"name": "Alice", "role": "Developer"}]}
    )

class EmployeeOut(BaseModel):
    id: int
    name: str
    role: str

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={"examples": [{"id": 1, "name": "Alice", "role": "Developer"}]},
    )

class ErrorOut(BaseModel):
    error: str
