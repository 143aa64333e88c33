from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from sitepulse.core.dependencies import get_current_user, get_leave_approver
from sitepulse.core.errors import database_errors
from sitepulse.database.session import get_db
from sitepulse.schemas.leave import (
    LeaveApplicationOut,
    LeaveApply,
    LeaveBalanceOut,
    LeaveDecision,
    PendingLeaveOut,
)
from sitepulse.schemas.user import TokenUser
from sitepulse.services import leave_service

router = APIRouter(prefix="/leave", tags=["Leave"])


# ======================================
# EMPLOYEE BALANCE
# ======================================
@router.get("/balance", response_model=LeaveBalanceOut)
def get_balance(
    db: Session = Depends(get_db),
    current_user: TokenUser = Depends(get_current_user)
):
    with database_errors(db, "Failed to get leave balance"):
        return leave_service.balance_summary(db, current_user.id)


# ======================================
# EMPLOYEE APPLY LEAVE
# ======================================
@router.post("/apply", status_code=status.HTTP_201_CREATED)
def apply_leave(
    payload: LeaveApply,
    db: Session = Depends(get_db),
    current_user: TokenUser = Depends(get_current_user)
):
    with database_errors(db, "Failed to apply for leave"):
        application = leave_service.apply_for_leave(db, current_user.id, payload)
    return {"message": "Leave application submitted successfully", "leaveId": application.id}


# ======================================
# EMPLOYEE VIEW OWN LEAVES
# ======================================
@router.get("/history", response_model=list[LeaveApplicationOut])
def get_history(
    db: Session = Depends(get_db),
    current_user: TokenUser = Depends(get_current_user)
):
    with database_errors(db, "Failed to fetch leave history"):
        return leave_service.leave_history(db, current_user.id)


# ======================================
# MANAGER / TEAM LEADER QUEUE
# ======================================
@router.get("/approvals", response_model=list[PendingLeaveOut])
def get_approvals(
    db: Session = Depends(get_db),
    approver: TokenUser = Depends(get_leave_approver)
):
    with database_errors(db, "Unable to fetch leave approvals"):
        return leave_service.list_approvals_queue(db)


# ======================================
# MANAGER / TEAM LEADER DECISION
# ======================================
@router.post("/approve/{application_id}")
def decide_leave(
    application_id: int,
    payload: LeaveDecision,
    db: Session = Depends(get_db),
    approver: TokenUser = Depends(get_leave_approver)
):
    with database_errors(db, "Unable to process leave request"):
        return leave_service.decide(db, application_id, approver, payload.status)
