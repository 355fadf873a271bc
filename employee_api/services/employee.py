# employee_api/services/employee.py
import logging
from typing import List, Optional

from fastapi import Request

from employee_api.models.employee import EmployeeModel
from employee_api.repositories.base import EmployeeRepository

logger = logging.getLogger(__name__)

class EmployeeService:
    """One method per use case, each a single repository call.

    A miss is reported as ``None``; it is up to the caller to decide what
    that means for the client.
    """

    def __init__(self, repository: EmployeeRepository):
        self.repository = repository

    async def get_all_employees(self) -> List[EmployeeModel]:
        return await self.repository.find_all()

    async def get_employee_by_id(self, employee_id: int) -> Optional[EmployeeModel]:
        employee = await self.repository.find_by_id(employee_id)
        if employee is None:
            logger.debug("Employee %s not found", employee_id)
        return employee

    async def save_employee(self, employee: EmployeeModel) -> EmployeeModel:
        saved = await self.repository.save(employee)
        logger.info("Saved employee %s", saved.id)
        return saved

    async def delete_employee(self, employee_id: int) -> None:
        await self.repository.delete_by_id(employee_id)
        logger.info("Deleted employee %s", employee_id)

def get_employee_service(request: Request) -> EmployeeService:
    return EmployeeService(request.app.state.employee_repository)
