# employee_api/services/__init__.py
from .employee import EmployeeService, get_employee_service
