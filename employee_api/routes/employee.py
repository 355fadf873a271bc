# employee_api/routes/employee.py
from typing import Annotated, List, Dict, Any, Optional
from fastapi import APIRouter, HTTPException, Depends, Path, Response
from employee_api.models.employee import EmployeeModel
from employee_api.schemas.employee import EmployeeCreate, EmployeeUpdate, EmployeeOut, MAX_EMPLOYEE_ID
from employee_api.services.employee import EmployeeService, get_employee_service

router = APIRouter()

EmployeeId = Annotated[int, Path(ge=1, le=MAX_EMPLOYEE_ID)]

def create_error_response(
    message: str, 
    details: Optional[str] = None, 
    example: Optional[str] = None
) -> Dict[str, Any]:
    """Create a detailed error response"""
    response = {
        "message": message,
        "details": details if details else message
    }
    if example:
        response["example"] = example
    return response

def employee_not_found(employee_id: int) -> HTTPException:
    return HTTPException(
        status_code=404,
        detail=create_error_response(
            message="Employee not found",
            details=f"No employee found with ID: {employee_id}",
            example="List employees with GET /employees to find a valid ID"
        )
    )

@router.get("/employees", response_model=List[EmployeeOut])
async def get_employees(service: EmployeeService = Depends(get_employee_service)):
    return await service.get_all_employees()

@router.get("/employees/{employee_id}", response_model=EmployeeOut)
async def get_employee(employee_id: EmployeeId, service: EmployeeService = Depends(get_employee_service)):
    employee = await service.get_employee_by_id(employee_id)
    if employee is None:
        raise employee_not_found(employee_id)
    return employee

@router.post("/employees", response_model=EmployeeOut)
async def create_employee(employee: EmployeeCreate, service: EmployeeService = Depends(get_employee_service)):
    return await service.save_employee(EmployeeModel(**employee.model_dump()))

@router.put("/employees/{employee_id}", response_model=EmployeeOut)
async def update_employee(
    employee_id: EmployeeId,
    employee: EmployeeUpdate,
    service: EmployeeService = Depends(get_employee_service)
):
    # Check if employee exists
    existing_employee = await service.get_employee_by_id(employee_id)
    if existing_employee is None:
        raise employee_not_found(employee_id)

    # Every field is overwritten, the id is kept
    updated_employee = existing_employee.model_copy(update=employee.model_dump())
    return await service.save_employee(updated_employee)

@router.delete("/employees/{employee_id}")
async def delete_employee(employee_id: EmployeeId, service: EmployeeService = Depends(get_employee_service)):
    await service.delete_employee(employee_id)
    return Response(status_code=200)
