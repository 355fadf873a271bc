# employee_api/schemas/__init__.py
from .employee import EmployeeCreate, EmployeeUpdate, EmployeeOut, MAX_EMPLOYEE_ID
