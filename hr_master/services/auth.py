"""
Employee and admin login.

Credential checks go through a CredentialVerifier (see hr_master.core.security).
Every failure is reported as a response body, never as an exception, and an
unknown identifier is indistinguishable from a wrong password.
"""

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from hr_master.core.security import CredentialVerifier, get_verifier
from hr_master.models.admin import AdminAccount
from hr_master.schemas.auth import AdminLoginResponse, EmployeeIdentity, LoginResponse
from hr_master.services import employee_service

logger = logging.getLogger(__name__)

MISSING_FIELDS = "Identifier and password required"
INVALID_CREDENTIALS = "Invalid credentials"
SERVER_ERROR = "Server error"


def employee_login(
    db: Session,
    identifier: Optional[str],
    password: Optional[str],
    verifier: Optional[CredentialVerifier] = None,
) -> LoginResponse:
    if not identifier or not password:
        return LoginResponse(success=False, message=MISSING_FIELDS)

    verifier = verifier or get_verifier()
    try:
        employee = employee_service.find_by_identifier(db, identifier)
    except SQLAlchemyError as e:
        logger.error(f"Login lookup failed: {e}", exc_info=True)
        return LoginResponse(success=False, message=SERVER_ERROR)

    if not employee or not employee.active or not verifier.verify(password, employee.ess_password):
        logger.info("Failed employee login", extra={"reason": "invalid_credentials"})
        return LoginResponse(success=False, message=INVALID_CREDENTIALS)

    logger.info(f"Employee {employee.employee_id} logged in")
    return LoginResponse(
        success=True,
        message="Logged In Success",
        employee=EmployeeIdentity(employee_id=employee.employee_id, name=employee.name),
    )


def admin_login(
    db: Session,
    identifier: Optional[str],
    password: Optional[str],
    verifier: Optional[CredentialVerifier] = None,
) -> AdminLoginResponse:
    if not identifier or not password:
        return AdminLoginResponse(success=False, message=MISSING_FIELDS)

    verifier = verifier or get_verifier()
    try:
        admin = db.query(AdminAccount).filter(AdminAccount.username == identifier).first()
    except SQLAlchemyError as e:
        logger.error(f"Admin login lookup failed: {e}", exc_info=True)
        return AdminLoginResponse(success=False, message=SERVER_ERROR)

    if not admin or not verifier.verify(password, admin.password):
        logger.info("Failed admin login", extra={"reason": "invalid_credentials"})
        return AdminLoginResponse(success=False, message=INVALID_CREDENTIALS)

    logger.info(f"Admin {admin.username} logged in")
    return AdminLoginResponse(success=True)
