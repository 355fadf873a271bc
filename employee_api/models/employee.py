# employee_api/models/employee.py
from typing import Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

class EmployeeModel(BaseModel):
    """An employee record as held by the storage layer.

    ``id`` is ``None`` until the record has been saved once.
    """
    id: Optional[int] = None
    first_name: str
    last_name: str
    email: str
    department: str

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
