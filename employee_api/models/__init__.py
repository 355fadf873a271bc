# employee_api/models/__init__.py
from .employee import EmployeeModel
from .record import Base, EmployeeRecord
