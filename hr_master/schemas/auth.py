from pydantic import BaseModel
from typing import Optional

class LoginRequest(BaseModel):
    # Optional so that a missing field yields the login failure body instead of a 422
    identifier: Optional[str] = None
    password: Optional[str] = None

class EmployeeIdentity(BaseModel):
    employee_id: str
    name: str

class LoginResponse(BaseModel):
    success: bool
    message: str
    employee: Optional[EmployeeIdentity] = None

class AdminLoginResponse(BaseModel):
    success: bool
    message: Optional[str] = None
