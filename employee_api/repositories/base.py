"""Storage interface for employee records.

Every backend (SQL through SQLAlchemy, MongoDB through motor) implements
``EmployeeRepository``.  The service layer only ever talks to this
interface; which adapter is used is decided once at start-up from
``Settings.STORAGE_BACKEND``.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from employee_api.models.employee import EmployeeModel


class EmployeeRepository(ABC):
    """A persistent collection of employees keyed by integer id."""

    @abstractmethod
    async def find_all(self) -> List[EmployeeModel]:
        """Return every stored employee in insertion order."""

    @abstractmethod
    async def find_by_id(self, employee_id: int) -> Optional[EmployeeModel]:
        """Return the employee with ``employee_id`` or ``None``."""

    @abstractmethod
    async def save(self, employee: EmployeeModel) -> EmployeeModel:
        """Insert ``employee`` when it has no id, overwrite it otherwise.

        Returns the persisted record with its id populated.
        """

    @abstractmethod
    async def delete_by_id(self, employee_id: int) -> None:
        """Remove the employee with ``employee_id``; unknown ids are ignored."""
