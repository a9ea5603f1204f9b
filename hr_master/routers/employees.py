from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from hr_master.core.exceptions import NotFoundError
from hr_master.database import get_db
from hr_master.schemas.employee import (
    EmployeeCreate,
    EmployeeNameId,
    EmployeeResponse,
    EmployeeUpdate,
    EmployeeUpdateResult,
)
from hr_master.services import employee_service

router = APIRouter(tags=["employees"])


@router.get("/get-employees", response_model=List[EmployeeResponse])
def list_employees(db: Session = Depends(get_db)):
    return employee_service.list_employees(db)


@router.get("/get-employee/{employee_id}", response_model=List[EmployeeResponse])
def get_employee(employee_id: str, db: Session = Depends(get_db)):
    """Returns a one-element list, or an empty list when the id is unknown."""
    try:
        return [employee_service.get_employee(db, employee_id)]
    except NotFoundError:
        return []


@router.get("/employee-names", response_model=List[EmployeeNameId])
def list_employee_names(db: Session = Depends(get_db)):
    return employee_service.list_employee_names(db)


@router.post("/employees", response_model=EmployeeResponse)
def create_employee(employee: EmployeeCreate, db: Session = Depends(get_db)):
    return employee_service.create_employee(db, employee)


@router.put("/update-employee/{employee_id}", response_model=EmployeeUpdateResult)
def update_employee(employee_id: str, employee: EmployeeUpdate, db: Session = Depends(get_db)):
    employee_service.update_employee(db, employee_id, employee)
    return {"success": True, "message": "Employee updated successfully"}
