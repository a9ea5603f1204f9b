"""
Leave Ledger

Owns leave request records and their status lifecycle:

    PENDING -> APPROVED | REJECTED

Both decisions are terminal. Repeating the same decision is a no-op; reversing
it raises InvalidTransition.
"""

import calendar
import logging
from datetime import date
from typing import Dict, List

from sqlalchemy import case, func
from sqlalchemy.orm import Session

from hr_master.core.config import settings
from hr_master.core.exceptions import InvalidTransition, NotFoundError, ValidationFailure
from hr_master.models.leave import LeaveRequest, LeaveStatus, TERMINAL_STATUSES
from hr_master.schemas.leave import LeaveApply, LeaveSummary
from hr_master.services import employee_service

logger = logging.getLogger(__name__)


def inclusive_day_count(start_date: date, end_date: date) -> int:
    return (end_date - start_date).days + 1


def month_bounds(month: int, year: int):
    """Return the first and last day of the month, both inclusive."""
    return date(year, month, 1), date(year, month, calendar.monthrange(year, month)[1])


def apply_leave(db: Session, data: LeaveApply) -> LeaveRequest:
    """
    Record a new leave request.

    The status always starts as PENDING and the employee name is taken from the
    directory at the time of application. leave_days is trusted when supplied
    and derived from the inclusive date range otherwise.
    """
    if data.end_date < data.start_date:
        raise ValidationFailure(
            "end_date must be on or after start_date",
            details={"start_date": data.start_date.isoformat(), "end_date": data.end_date.isoformat()},
        )

    employee = employee_service.get_employee(db, data.employee_id)

    if data.leave_status and data.leave_status != LeaveStatus.PENDING.value:
        logger.info(f"Ignored client leave_status {data.leave_status!r} for {data.employee_id}")

    leave_days = data.leave_days
    if leave_days is None:
        leave_days = inclusive_day_count(data.start_date, data.end_date)

    leave = LeaveRequest(
        employee_id=employee.employee_id,
        employee_name=employee.name,
        leave_type=data.leave_type,
        start_date=data.start_date,
        end_date=data.end_date,
        reason=data.reason,
        leave_days=leave_days,
        leave_status=LeaveStatus.PENDING.value,
    )
    db.add(leave)
    employee_service.commit_or_raise(db, "Leave request could not be stored")
    db.refresh(leave)
    logger.info(f"Leave {leave.id} applied by {leave.employee_id} ({leave.leave_type}, {leave_days} days)")
    return leave


def get_leave(db: Session, leave_id: int) -> LeaveRequest:
    leave = db.query(LeaveRequest).filter(LeaveRequest.id == leave_id).first()
    if not leave:
        raise NotFoundError(f"Leave request {leave_id} not found")
    return leave


def _decide(db: Session, leave_id: int, target: LeaveStatus) -> LeaveRequest:
    leave = get_leave(db, leave_id)
    current = LeaveStatus(leave.leave_status)

    if current == target:
        return leave
    if current in TERMINAL_STATUSES:
        logger.warning(f"Rejected transition {current.value} -> {target.value} on leave {leave_id}")
        raise InvalidTransition(current.value, target.value)

    leave.leave_status = target.value
    employee_service.commit_or_raise(db, "Leave request could not be updated")
    db.refresh(leave)
    logger.info(f"Leave {leave_id} {current.value} -> {target.value}")
    return leave


def approve_leave(db: Session, leave_id: int) -> LeaveRequest:
    return _decide(db, leave_id, LeaveStatus.APPROVED)


def reject_leave(db: Session, leave_id: int) -> LeaveRequest:
    return _decide(db, leave_id, LeaveStatus.REJECTED)


def list_pending_leaves(db: Session) -> List[LeaveRequest]:
    return db.query(LeaveRequest).filter(LeaveRequest.leave_status == LeaveStatus.PENDING.value).all()


def list_all_leaves(db: Session) -> List[LeaveRequest]:
    return db.query(LeaveRequest).all()


def list_employee_leaves(db: Session, employee_id: str) -> List[LeaveRequest]:
    return db.query(LeaveRequest).filter(LeaveRequest.employee_id == employee_id).all()


def summarize_leaves(db: Session, employee_id: str) -> LeaveSummary:
    """Total leave days per status bucket for one employee; empty buckets are 0."""

    def bucket(status: LeaveStatus):
        return func.coalesce(
            func.sum(case((LeaveRequest.leave_status == status.value, LeaveRequest.leave_days), else_=0)),
            0,
        )

    approved, pending, rejected = db.query(
        bucket(LeaveStatus.APPROVED),
        bucket(LeaveStatus.PENDING),
        bucket(LeaveStatus.REJECTED),
    ).filter(LeaveRequest.employee_id == employee_id).one()

    return LeaveSummary(
        approved_days=int(approved or 0),
        pending_days=int(pending or 0),
        rejected_days=int(rejected or 0),
    )


def unpaid_days_by_employee(db: Session, month: int, year: int) -> Dict[str, int]:
    """
    Unpaid leave days per employee for a calendar month.

    Only rows tagged exactly "Unpaid" count, regardless of status, and a leave is
    attributed entirely to the month its start_date falls in.
    """
    first, last = month_bounds(month, year)
    rows = db.query(
        LeaveRequest.employee_id,
        func.sum(LeaveRequest.leave_days),
    ).filter(
        LeaveRequest.leave_type == settings.unpaid_leave_type,
        LeaveRequest.start_date >= first,
        LeaveRequest.start_date <= last,
    ).group_by(LeaveRequest.employee_id).all()

    return {employee_id: int(total or 0) for employee_id, total in rows}
