from pydantic import BaseModel, ConfigDict, Field
from typing import List

class PayrollLine(BaseModel):
    """One employee's net salary for a month. Serialized with the legacy camelCase keys."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    department: str
    designation: str
    basic_salary: float = Field(..., alias="basicSalary")
    allowances: float
    unpaid_leaves: int = Field(..., alias="unpaidLeaves")
    unpaid_deduction: float = Field(..., alias="unpaidDeduction")
    gross_salary: float = Field(..., alias="grossSalary")
    net_salary: float = Field(..., alias="netSalary")


class PayrollResponse(BaseModel):
    success: bool
    month: int
    year: int
    payroll: List[PayrollLine]
