from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from hr_master.database import get_db
from hr_master.schemas.dashboard import DashboardResponse, EssDashboardResponse
from hr_master.services import dashboard_service

router = APIRouter(tags=["dashboard"])


@router.get("/dashboard", response_model=DashboardResponse)
def get_dashboard(db: Session = Depends(get_db)):
    return dashboard_service.get_dashboard(db)


@router.get("/ess-dashboard/{employee_id}", response_model=EssDashboardResponse)
def get_ess_dashboard(employee_id: str, db: Session = Depends(get_db)):
    return dashboard_service.get_ess_dashboard(db, employee_id)
