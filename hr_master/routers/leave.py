from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from hr_master.database import get_db
from hr_master.schemas.leave import LeaveApply, LeaveApplyResult, LeaveDecisionResult, LeaveResponse
from hr_master.services import leave_service

router = APIRouter(tags=["leave"])


@router.post("/applyleave", response_model=LeaveApplyResult)
def apply_leave(request: LeaveApply, db: Session = Depends(get_db)):
    leave = leave_service.apply_leave(db, request)
    return {"success": True, "leave": leave}


@router.get("/leaves/pending", response_model=List[LeaveResponse])
def list_pending_leaves(db: Session = Depends(get_db)):
    return leave_service.list_pending_leaves(db)


@router.get("/get-leaves", response_model=List[LeaveResponse])
def list_all_leaves(db: Session = Depends(get_db)):
    return leave_service.list_all_leaves(db)


@router.get("/get-ess-leave/{employee_id}", response_model=List[LeaveResponse])
def list_employee_leaves(employee_id: str, db: Session = Depends(get_db)):
    return leave_service.list_employee_leaves(db, employee_id)


@router.put("/leaves/{id}/approve", response_model=LeaveDecisionResult)
def approve_leave(id: int, db: Session = Depends(get_db)):
    leave = leave_service.approve_leave(db, id)
    return {"success": True, "leave_status": leave.leave_status}


@router.put("/leaves/{id}/reject", response_model=LeaveDecisionResult)
def reject_leave(id: int, db: Session = Depends(get_db)):
    leave = leave_service.reject_leave(db, id)
    return {"success": True, "leave_status": leave.leave_status}
