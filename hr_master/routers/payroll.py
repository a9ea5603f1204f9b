"""
Payroll Router

Handles HTTP endpoints for payroll operations.
All business logic is delegated to the payroll service layer.
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from hr_master.database import get_db
from hr_master.schemas.payroll import PayrollResponse
from hr_master.services import payroll_service

router = APIRouter(tags=["payroll"])


@router.get("/payroll", response_model=PayrollResponse)
def get_payroll(
    month: int = Query(..., ge=1, le=12),
    year: int = Query(..., ge=1, le=9999),
    db: Session = Depends(get_db),
):
    """
    Net salary of every employee for the given month, after unpaid leave deductions.
    """
    lines = payroll_service.compute_monthly_payroll(db, month, year)
    return PayrollResponse(success=True, month=month, year=year, payroll=lines)
