"""
Payroll Service Layer

Computes the net salary of every employee for one calendar month.

Per employee:
- total = basic_salary + allowance (the stored total_salary is not read)
- daily rate = total / days in the month
- unpaid deduction = unpaid leave days * daily rate
- net = total - other deductions - unpaid deduction

Amounts use Decimal arithmetic and are rounded half-up to 2 places. Other
deductions are not modelled yet and are always 0, so gross equals total.

The employee read and the unpaid-leave aggregation run inside one session
transaction, so both see the same snapshot when the isolation level allows it.
"""

import calendar
import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, List

from sqlalchemy.orm import Session

from hr_master.core.config import settings
from hr_master.core.exceptions import ValidationFailure
from hr_master.models.employee import Employee
from hr_master.schemas.payroll import PayrollLine
from hr_master.services import leave_service

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")
NO_DEDUCTIONS = Decimal("0")


def round_money(amount: Decimal) -> Decimal:
    return amount.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def days_in_month(month: int, year: int) -> int:
    return calendar.monthrange(year, month)[1]


def validate_period(month: int, year: int) -> None:
    if not 1 <= month <= 12:
        raise ValidationFailure("month must be between 1 and 12", details={"month": month})
    if not 1 <= year <= 9999:
        raise ValidationFailure("year must be between 1 and 9999", details={"year": year})


def calculate_line(
    employee: Employee,
    unpaid_days: int,
    month_days: int,
    other_deductions: Decimal = NO_DEDUCTIONS,
) -> PayrollLine:
    """Compute one employee's payroll line."""
    basic = Decimal(str(employee.basic_salary or 0))
    allowance = Decimal(str(employee.allowance or 0))
    total = basic + allowance

    daily_rate = total / Decimal(month_days)
    unpaid_deduction = Decimal(unpaid_days) * daily_rate
    gross = total
    net = gross - other_deductions - unpaid_deduction

    return PayrollLine(
        id=employee.employee_id,
        name=employee.name,
        department=employee.department,
        designation=employee.designation,
        basic_salary=float(basic),
        allowances=float(allowance),
        unpaid_leaves=unpaid_days,
        unpaid_deduction=float(round_money(unpaid_deduction)),
        gross_salary=float(gross),
        net_salary=float(round_money(net)),
    )


def _pin_isolation_level(db: Session) -> None:
    if settings.payroll_isolation_level:
        db.connection(execution_options={"isolation_level": settings.payroll_isolation_level})


def compute_monthly_payroll(db: Session, month: int, year: int) -> List[PayrollLine]:
    """
    Calculate payroll for all employees for the given month.

    Args:
        db: Database session
        month: Payroll month (1-12)
        year: Payroll year

    Returns:
        One PayrollLine per employee, in store order
    """
    validate_period(month, year)
    _pin_isolation_level(db)

    employees = db.query(Employee).all()
    unpaid: Dict[str, int] = leave_service.unpaid_days_by_employee(db, month, year)
    month_days = days_in_month(month, year)

    lines = [
        calculate_line(employee, unpaid.get(employee.employee_id, 0), month_days)
        for employee in employees
    ]
    logger.info(
        f"Computed payroll for {month:02d}/{year}: {len(lines)} employees, "
        f"{sum(unpaid.values())} unpaid leave days"
    )
    return lines
