# employee_api/repositories/sql.py
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from employee_api.models.record import EmployeeRecord
from employee_api.models.employee import EmployeeModel
from employee_api.repositories.base import EmployeeRepository

class SqlEmployeeRepository(EmployeeRepository):
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def find_all(self) -> List[EmployeeModel]:
        async with self._session_factory() as session:
            result = await session.scalars(select(EmployeeRecord).order_by(EmployeeRecord.id))
            return [EmployeeModel.model_validate(record) for record in result.all()]

    async def find_by_id(self, employee_id: int) -> Optional[EmployeeModel]:
        async with self._session_factory() as session:
            record = await session.get(EmployeeRecord, employee_id)
            if record is None:
                return None
            return EmployeeModel.model_validate(record)

    async def save(self, employee: EmployeeModel) -> EmployeeModel:
        async with self._session_factory() as session:
            record = EmployeeRecord(**employee.model_dump(exclude={"id"}))
            if employee.id is None:
                session.add(record)
            else:
                # merge() overwrites the row with this primary key or inserts it
                record.id = employee.id
                record = await session.merge(record)
            await session.commit()
            await session.refresh(record)
            return EmployeeModel.model_validate(record)

    async def delete_by_id(self, employee_id: int) -> None:
        async with self._session_factory() as session:
            await session.execute(delete(EmployeeRecord).where(EmployeeRecord.id == employee_id))
            await session.commit()
