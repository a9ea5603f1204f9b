"""
Dashboard aggregates for the admin console and the employee self-service (ESS) view.

All admin aggregates are read through one session; any store failure aborts
the whole dashboard rather than returning a partial one.
"""

import logging
from datetime import date
from typing import Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from hr_master.models.employee import Employee
from hr_master.models.leave import LeaveRequest, LeaveStatus
from hr_master.schemas.dashboard import DashboardResponse, EssDashboardResponse, GenderSlice, NewestEmployee
from hr_master.services import employee_service, leave_service

logger = logging.getLogger(__name__)


def count_active_employees(db: Session) -> int:
    return db.query(func.count(Employee.id)).filter(Employee.active.is_(True)).scalar() or 0


def count_employees_on_leave(db: Session, today: date) -> int:
    """Distinct employees inside an approved leave range on `today`, both ends inclusive."""
    return db.query(func.count(func.distinct(LeaveRequest.employee_id))).filter(
        LeaveRequest.leave_status == LeaveStatus.APPROVED.value,
        LeaveRequest.start_date <= today,
        LeaveRequest.end_date >= today,
    ).scalar() or 0


def monthly_payroll_total(db: Session) -> float:
    total = db.query(func.coalesce(func.sum(Employee.total_salary), 0)).filter(
        Employee.active.is_(True)
    ).scalar()
    return float(total or 0)


def newest_employee(db: Session) -> Optional[NewestEmployee]:
    # Ties on joining_date fall back to the latest inserted row; not a stable contract
    employee = db.query(Employee).filter(Employee.active.is_(True)).order_by(
        Employee.joining_date.desc(), Employee.id.desc()
    ).first()
    if not employee:
        return None
    return NewestEmployee(name=employee.name, position=employee.designation, join_date=employee.joining_date)


def gender_distribution(db: Session):
    rows = db.query(Employee.gender, func.count(Employee.id)).filter(
        Employee.active.is_(True)
    ).group_by(Employee.gender).all()
    return [GenderSlice(name=gender, value=count) for gender, count in rows]


def get_dashboard(db: Session, today: Optional[date] = None) -> DashboardResponse:
    today = today or date.today()
    try:
        return DashboardResponse(
            total_employees=count_active_employees(db),
            employees_on_leave=count_employees_on_leave(db, today),
            monthly_payroll=monthly_payroll_total(db),
            newest_employee=newest_employee(db),
            gender_distribution=gender_distribution(db),
        )
    except SQLAlchemyError as e:
        logger.error(f"Dashboard aggregation failed: {e}", exc_info=True)
        raise


def get_ess_dashboard(db: Session, employee_id: str) -> EssDashboardResponse:
    employee = employee_service.get_employee(db, employee_id)
    summary = leave_service.summarize_leaves(db, employee_id)
    return EssDashboardResponse(
        employee_id=employee.employee_id,
        name=employee.name,
        designation=employee.designation,
        department=employee.department,
        joining_date=employee.joining_date,
        total_salary=float(employee.total_salary),
        approved_leaves=summary.approved_days,
        pending_leaves=summary.pending_days,
        rejected_leaves=summary.rejected_days,
    )
