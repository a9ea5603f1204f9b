from pydantic import BaseModel, ConfigDict, Field
from datetime import date, datetime
from typing import Optional

class LeaveApply(BaseModel):
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    employee_id: str = Field(..., min_length=1, max_length=100)
    leave_type: str = Field(..., alias="leaveType", min_length=1, max_length=20)
    start_date: date
    end_date: date
    reason: Optional[str] = None
    # Derived from the date range when omitted
    leave_days: Optional[int] = Field(None, ge=1)
    # Ignored: the name is snapshotted from the employee record and status always starts PENDING
    employee_name: Optional[str] = None
    leave_status: Optional[str] = None


class LeaveResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    employee_id: str
    employee_name: str
    leave_type: str
    start_date: date
    end_date: date
    reason: Optional[str] = None
    leave_days: int
    leave_status: str
    created_at: Optional[datetime] = None


class LeaveApplyResult(BaseModel):
    success: bool
    leave: LeaveResponse


class LeaveDecisionResult(BaseModel):
    success: bool
    leave_status: str


class LeaveSummary(BaseModel):
    approved_days: int = 0
    pending_days: int = 0
    rejected_days: int = 0

# Resolve forward references for Pydantic V2
LeaveApplyResult.model_rebuild()
