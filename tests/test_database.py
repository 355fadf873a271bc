import os

import pytest

from employee_api.config import Settings
from employee_api.database import SAMPLE_EMPLOYEES, open_storage
from employee_api.models.employee import EmployeeModel


async def test_sample_data_seeded_once(settings):
    settings = settings.model_copy(update={"SEED_SAMPLE_DATA": True})

    async with open_storage(settings) as repository:
        assert len(await repository.find_all()) == len(SAMPLE_EMPLOYEES)

    async with open_storage(settings) as repository:
        assert len(await repository.find_all()) == len(SAMPLE_EMPLOYEES)


async def test_sample_data_skipped_for_non_empty_store(settings):
    async with open_storage(settings) as repository:
        await repository.save(
            EmployeeModel(first_name="A", last_name="B", email="a@b.com", department="X")
        )

    seeded = settings.model_copy(update={"SEED_SAMPLE_DATA": True})
    async with open_storage(seeded) as repository:
        assert len(await repository.find_all()) == 1


async def test_data_survives_reopen(settings):
    async with open_storage(settings) as repository:
        created = await repository.save(
            EmployeeModel(first_name="A", last_name="B", email="a@b.com", department="X")
        )

    async with open_storage(settings) as repository:
        assert await repository.find_by_id(created.id) == created


def test_unknown_backend_rejected():
    with pytest.raises(ValueError):
        Settings(STORAGE_BACKEND="redis")


@pytest.mark.skipif("TEST_MONGODB_URI" not in os.environ, reason="needs a MongoDB server")
async def test_mongo_repository_roundtrip():
    settings = Settings(
        STORAGE_BACKEND="mongo",
        MONGODB_URI=os.environ["TEST_MONGODB_URI"],
        MONGODB_DB_NAME="employee_management_test",
    )
    async with open_storage(settings) as repository:
        await repository._db.employees.delete_many({})
        await repository._db.counters.delete_many({})

        first = await repository.save(
            EmployeeModel(first_name="A", last_name="B", email="a@b.com", department="X")
        )
        second = await repository.save(
            EmployeeModel(first_name="C", last_name="D", email="c@d.com", department="Y")
        )
        assert (first.id, second.id) == (1, 2)
        assert await repository.find_all() == [first, second]

        await repository.save(second.model_copy(update={"department": "Z"}))
        assert (await repository.find_by_id(second.id)).department == "Z"

        explicit = await repository.save(
            EmployeeModel(id=10, first_name="E", last_name="F", email="e@f.com", department="X")
        )
        following = await repository.save(
            EmployeeModel(first_name="G", last_name="H", email="g@h.com", department="X")
        )
        assert following.id > explicit.id

        await repository.delete_by_id(first.id)
        await repository.delete_by_id(first.id)
        assert await repository.find_by_id(first.id) is None
        assert len(await repository.find_all()) == 3

        await repository._db.client.drop_database("employee_management_test")
