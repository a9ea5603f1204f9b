from pydantic import BaseModel, ConfigDict, Field
from datetime import date
from typing import List, Optional

class NewestEmployee(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    position: str
    join_date: date = Field(..., alias="joinDate")

class GenderSlice(BaseModel):
    name: str
    value: int

class DashboardResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_employees: int = Field(..., alias="totalEmployees")
    employees_on_leave: int = Field(..., alias="employeesOnLeave")
    monthly_payroll: float = Field(..., alias="monthlyPayroll")
    newest_employee: Optional[NewestEmployee] = Field(None, alias="newestEmployee")
    gender_distribution: List[GenderSlice] = Field(default_factory=list, alias="genderDistribution")

class EssDashboardResponse(BaseModel):
    employee_id: str
    name: str
    designation: str
    department: str
    joining_date: date
    total_salary: float
    approved_leaves: int
    pending_leaves: int
    rejected_leaves: int
