# employee_api/repositories/__init__.py
from .base import EmployeeRepository
from .sql import SqlEmployeeRepository
from .mongo import MongoEmployeeRepository
