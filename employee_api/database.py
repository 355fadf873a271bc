# employee_api/database.py
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine

from employee_api.config import Settings
from employee_api.models.employee import EmployeeModel
from employee_api.models.record import Base
from employee_api.repositories import (
    EmployeeRepository,
    MongoEmployeeRepository,
    SqlEmployeeRepository,
)

logger = logging.getLogger(__name__)

SAMPLE_EMPLOYEES = [
    {"first_name": "John", "last_name": "Doe", "email": "john.doe@example.com", "department": "Sales"},
    {"first_name": "Jane", "last_name": "Smith", "email": "jane.smith@example.com", "department": "Marketing"},
    {"first_name": "Bob", "last_name": "Johnson", "email": "bob.johnson@example.com", "department": "IT"},
]

async def init_sql_db(engine: AsyncEngine):
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("SQL schema initialized")

async def init_mongo_db(db: AsyncIOMotorDatabase):
    collections = await db.list_collection_names()
    if "employees" not in collections:
        await db.create_collection("employees")

    # Employee indexes
    await db.employees.create_index([("department", ASCENDING)])
    logger.info("MongoDB collections initialized")

async def insert_sample_data(repository: EmployeeRepository):
    # Check if data already exists
    if await repository.find_all():
        logger.info("Sample data already exists. Skipping insertion.")
        return

    for employee in SAMPLE_EMPLOYEES:
        await repository.save(EmployeeModel(**employee))
    logger.info("Inserted %d sample employees", len(SAMPLE_EMPLOYEES))

@asynccontextmanager
async def sql_storage(settings: Settings) -> AsyncIterator[EmployeeRepository]:
    engine = create_async_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
    logger.info("Connected to SQL database: %s", engine.url.render_as_string(hide_password=True))
    try:
        await init_sql_db(engine)
        yield SqlEmployeeRepository(async_sessionmaker(engine, expire_on_commit=False))
    finally:
        await engine.dispose()
        logger.info("Closed SQL database connection")

@asynccontextmanager
async def mongo_storage(settings: Settings) -> AsyncIterator[EmployeeRepository]:
    client = AsyncIOMotorClient(settings.MONGODB_URI)
    logger.info("Connected to MongoDB: %s", settings.MONGODB_DB_NAME)
    try:
        db = client[settings.MONGODB_DB_NAME]
        await init_mongo_db(db)
        yield MongoEmployeeRepository(db)
    finally:
        client.close()
        logger.info("Closed MongoDB connection")

STORAGE_BACKENDS = {
    "sql": sql_storage,
    "mongo": mongo_storage,
}

@asynccontextmanager
async def open_storage(settings: Settings) -> AsyncIterator[EmployeeRepository]:
    """Open the configured backend and yield a ready repository.

    The schema is created if missing and, when ``SEED_SAMPLE_DATA`` is set,
    an empty store receives a few sample employees.  The connection is
    released when the context exits.
    """
    async with STORAGE_BACKENDS[settings.STORAGE_BACKEND](settings) as repository:
        if settings.SEED_SAMPLE_DATA:
            await insert_sample_data(repository)
        yield repository
