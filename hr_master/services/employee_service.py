"""
Employee Directory

Owns the employee master records consumed by the leave ledger, payroll and
dashboards. Salary totals are always recomputed here as basic + allowance;
a total supplied by the caller is never stored.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.orm import Session

from hr_master.core.exceptions import ConstraintViolation, NotFoundError, StoreUnavailable
from hr_master.models.employee import Employee
from hr_master.schemas.employee import EmployeeBase, EmployeeCreate, EmployeeUpdate

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")


def compute_total_salary(basic_salary: Decimal, allowance: Decimal) -> Decimal:
    return (Decimal(basic_salary) + Decimal(allowance)).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def commit_or_raise(db: Session, conflict_message: str) -> None:
    """Commit the session, translating store errors into domain exceptions."""
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Constraint violation: {e.orig}")
        raise ConstraintViolation(conflict_message) from e
    except OperationalError as e:
        db.rollback()
        logger.error(f"Store unavailable during commit: {e}", exc_info=True)
        raise StoreUnavailable() from e


def _apply_fields(employee: Employee, data: EmployeeBase) -> None:
    employee.name = data.name
    employee.mail = str(data.mail)
    employee.department = data.department
    employee.designation = data.designation
    employee.gender = data.gender
    employee.dob = data.dob
    employee.joining_date = data.joining_date
    employee.basic_salary = data.basic_salary
    employee.allowance = data.allowance
    employee.total_salary = compute_total_salary(data.basic_salary, data.allowance)
    employee.ess_password = data.ess_password


def create_employee(db: Session, data: EmployeeCreate) -> Employee:
    """
    Onboard a new employee.

    Raises:
        ConstraintViolation: employee_id or mail already belongs to another employee.
    """
    clash = db.query(Employee.employee_id).filter(
        or_(Employee.employee_id == data.employee_id, Employee.mail == str(data.mail))
    ).first()
    if clash:
        raise ConstraintViolation("Employee ID or mail is already in use")

    employee = Employee(employee_id=data.employee_id, active=True)
    _apply_fields(employee, data)
    db.add(employee)
    commit_or_raise(db, "Employee ID or mail is already in use")
    db.refresh(employee)

    if data.total_salary is not None and data.total_salary != employee.total_salary:
        logger.info(
            f"Ignored client total_salary {data.total_salary} for {employee.employee_id}; "
            f"stored {employee.total_salary}"
        )
    logger.info(f"Created employee {employee.employee_id}")
    return employee


def get_employee(db: Session, employee_id: str) -> Employee:
    employee = db.query(Employee).filter(Employee.employee_id == employee_id).first()
    if not employee:
        raise NotFoundError(f"Employee {employee_id} not found")
    return employee


def list_employees(db: Session) -> List[Employee]:
    return db.query(Employee).all()


def list_employee_names(db: Session) -> List[dict]:
    rows = db.query(Employee.employee_id, Employee.name).all()
    return [{"employee_id": employee_id, "name": name} for employee_id, name in rows]


def normalize_mail(identifier: str) -> str:
    """Lower-case the domain part, matching how stored mail addresses are normalized."""
    local, at, domain = identifier.rpartition("@")
    if not at:
        return identifier
    return f"{local}@{domain.lower()}"


def find_by_identifier(db: Session, identifier: str) -> Optional[Employee]:
    """Look up an employee by mail or employee_id (the login identifier)."""
    return db.query(Employee).filter(
        or_(Employee.mail == normalize_mail(identifier), Employee.employee_id == identifier)
    ).first()


def update_employee(db: Session, employee_id: str, data: EmployeeUpdate) -> Employee:
    """Replace every mutable field of an employee."""
    employee = get_employee(db, employee_id)

    clash = db.query(Employee.id).filter(
        Employee.mail == str(data.mail), Employee.id != employee.id
    ).first()
    if clash:
        raise ConstraintViolation("Mail is already in use by another employee")

    _apply_fields(employee, data)
    commit_or_raise(db, "Mail is already in use by another employee")
    db.refresh(employee)
    logger.info(f"Updated employee {employee_id}")
    return employee
