from pydantic import BaseModel, ConfigDict, EmailStr, Field, StringConstraints
from datetime import date, datetime
from decimal import Decimal
from typing import Annotated, Optional

# Request bodies accept the legacy camelCase keys sent by the existing frontend
# as well as the snake_case field names.

class EmployeeBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=100)
    mail: EmailStr = Field(..., alias="mailId")
    department: str = Field(..., min_length=1, max_length=100)
    designation: str = Field(..., min_length=1, max_length=100)
    gender: str = Field(..., min_length=1, max_length=20)
    dob: date
    joining_date: date = Field(..., alias="joiningDate")
    basic_salary: Decimal = Field(..., alias="basicSalary", ge=0, max_digits=10, decimal_places=2)
    allowance: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    # Accepted for compatibility; the stored total is always basic + allowance
    total_salary: Optional[Decimal] = Field(None, alias="totalSalary")
    # Stored verbatim; login compares the exact string
    ess_password: Annotated[str, StringConstraints(strip_whitespace=False)] = Field(..., alias="essPassword", min_length=1)


class EmployeeCreate(EmployeeBase):
    employee_id: str = Field(..., alias="employeeId", min_length=1, max_length=100)


class EmployeeUpdate(EmployeeBase):
    """Full replacement of the mutable fields; partial updates are not supported."""
    pass


class EmployeeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    employee_id: str
    name: str
    mail: str
    department: str
    designation: str
    basic_salary: float
    allowance: float
    total_salary: float
    gender: str
    dob: date
    joining_date: date
    active: bool
    created_at: Optional[datetime] = None


class EmployeeNameId(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    employee_id: str
    name: str


class EmployeeUpdateResult(BaseModel):
    success: bool
    message: str
