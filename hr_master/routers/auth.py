from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from hr_master.database import get_db
from hr_master.schemas.auth import AdminLoginResponse, LoginRequest, LoginResponse
from hr_master.services import auth as auth_service

router = APIRouter(tags=["auth"])


@router.post("/login", response_model=LoginResponse, response_model_exclude_none=True)
def login(login_data: LoginRequest, db: Session = Depends(get_db)):
    return auth_service.employee_login(db, login_data.identifier, login_data.password)


@router.post("/admin-login", response_model=AdminLoginResponse, response_model_exclude_none=True)
def admin_login(login_data: LoginRequest, db: Session = Depends(get_db)):
    return auth_service.admin_login(db, login_data.identifier, login_data.password)
