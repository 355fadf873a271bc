# employee_api/repositories/mongo.py
from typing import Any, Dict, List, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING, ReturnDocument

from employee_api.models.employee import EmployeeModel
from employee_api.repositories.base import EmployeeRepository

COUNTER_ID = "employees"

def to_model(document: Dict[str, Any]) -> EmployeeModel:
    return EmployeeModel(id=document["_id"], **{k: v for k, v in document.items() if k != "_id"})

class MongoEmployeeRepository(EmployeeRepository):
    """Employees stored as documents whose ``_id`` is an integer.

    Ids come from a sequence document in the ``counters`` collection, so
    they behave like an autoincrement column.
    """

    def __init__(self, db: AsyncIOMotorDatabase):
        self._db = db

    async def _next_id(self) -> int:
        counter = await self._db.counters.find_one_and_update(
            {"_id": COUNTER_ID},
            {"$inc": {"seq": 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return counter["seq"]

    async def find_all(self) -> List[EmployeeModel]:
        documents = await self._db.employees.find().sort("_id", ASCENDING).to_list(length=None)
        return [to_model(document) for document in documents]

    async def find_by_id(self, employee_id: int) -> Optional[EmployeeModel]:
        document = await self._db.employees.find_one({"_id": employee_id})
        if document is None:
            return None
        return to_model(document)

    async def save(self, employee: EmployeeModel) -> EmployeeModel:
        employee_id = employee.id
        if employee_id is None:
            employee_id = await self._next_id()
        else:
            # keep the sequence ahead of explicitly chosen ids
            await self._db.counters.update_one(
                {"_id": COUNTER_ID}, {"$max": {"seq": employee_id}}, upsert=True
            )
        document = employee.model_dump(exclude={"id"})
        await self._db.employees.replace_one({"_id": employee_id}, document, upsert=True)
        return employee.model_copy(update={"id": employee_id})

    async def delete_by_id(self, employee_id: int) -> None:
        await self._db.employees.delete_one({"_id": employee_id})
