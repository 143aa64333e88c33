from pydantic import BaseModel
from datetime import date, datetime
from typing import Optional


# -------- CREATE --------
class LeaveApply(BaseModel):
    leave_type: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    reason: Optional[str] = None


class LeaveDecision(BaseModel):
    status: Optional[str] = None


# -------- RESPONSE --------
class LeaveBalanceOut(BaseModel):
    year: int
    total_casual: int
    total_sick: int
    total_paid: int
    used_casual: int
    used_sick: int
    used_paid: int
    available_casual: int
    available_sick: int
    available_paid: int


class LeaveApplicationOut(BaseModel):
    id: int
    user_id: int
    leave_type: str
    start_date: date
    end_date: date
    reason: str
    status: str
    approved_by: Optional[int] = None
    approved_at: Optional[datetime] = None
    created_at: datetime

    class Config:
        from_attributes = True


class PendingLeaveOut(LeaveApplicationOut):
    username: str
    employee_id: Optional[str] = None
    user_role: str
