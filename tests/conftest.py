import pytest
from fastapi.testclient import TestClient

from employee_api.config import Settings
from employee_api.database import open_storage
from employee_api.main import create_app
from employee_api.services.employee import EmployeeService


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        STORAGE_BACKEND="sql",
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'employees.db'}",
        SEED_SAMPLE_DATA=False,
    )


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
async def repository(settings):
    async with open_storage(settings) as repo:
        yield repo


@pytest.fixture
def service(repository) -> EmployeeService:
    return EmployeeService(repository)


@pytest.fixture
def jane() -> dict:
    return {
        "firstName": "Jane",
        "lastName": "Doe",
        "email": "jane@co.com",
        "department": "Sales",
    }
