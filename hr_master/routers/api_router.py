from fastapi import APIRouter
from hr_master.routers import auth, dashboard, employees, leave, payroll

# Centralized API router hub
# Routers are aggregated here, and main.py only imports this single hub.
api_router = APIRouter()

api_router.include_router(dashboard.router, tags=["Dashboard"])
api_router.include_router(employees.router, tags=["Employees"])
api_router.include_router(auth.router, tags=["Authentication"])
api_router.include_router(leave.router, tags=["Leave"])
api_router.include_router(payroll.router, tags=["Payroll"])
