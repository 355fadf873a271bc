# employee_api/schemas/employee.py
from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

# Ids are stored as signed 64-bit integers by both backends
MAX_EMPLOYEE_ID = 2**63 - 1

class EmployeeBase(BaseModel):
    first_name: str
    last_name: str
    email: str
    department: str

    class Config:
        alias_generator = to_camel
        populate_by_name = True

class EmployeeCreate(EmployeeBase):
    # An explicit id turns the create into an overwrite of that record.
    id: Optional[int] = Field(default=None, ge=1, le=MAX_EMPLOYEE_ID)

class EmployeeUpdate(EmployeeBase):
    pass

class EmployeeOut(EmployeeBase):
    id: int

    class Config:
        alias_generator = to_camel
        from_attributes = True
        populate_by_name = True
