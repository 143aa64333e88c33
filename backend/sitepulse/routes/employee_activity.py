from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from datetime import date

from sitepulse.core.dependencies import get_current_user
from sitepulse.core.errors import database_errors
from sitepulse.core.validation import bad_request, coerce_positive_int, parse_date, parse_month
from sitepulse.database.session import get_db
from sitepulse.schemas.user import TokenUser
from sitepulse.services import activity_service, attendance_service, directory_service

router = APIRouter(prefix="/employee-activity", tags=["Employee Activity"])


# ======================================
# ACTIVITY FEED
# ======================================
@router.get("/activities")
def get_activities(
    page: str | None = Query(default=None),
    limit: str | None = Query(default=None),
    db: Session = Depends(get_db),
    current_user: TokenUser = Depends(get_current_user)
):
    page_num = coerce_positive_int(page, activity_service.DEFAULT_PAGE)
    limit_num = coerce_positive_int(limit, activity_service.DEFAULT_LIMIT)
    with database_errors(db, "Unable to fetch activities"):
        return activity_service.list_activities(db, current_user, page_num, limit_num)


@router.get("/summary")
def get_summary(
    db: Session = Depends(get_db),
    current_user: TokenUser = Depends(get_current_user)
):
    with database_errors(db, "Unable to fetch summary"):
        return activity_service.activity_summary(db, current_user)


@router.get("/absentees")
def get_absentees(
    date_param: str | None = Query(default=None, alias="date"),
    db: Session = Depends(get_db),
    current_user: TokenUser = Depends(get_current_user)
):
    target = date.today() if not date_param else parse_date(date_param)
    if target is None:
        raise bad_request("Invalid date. Use YYYY-MM-DD")
    with database_errors(db, "Unable to fetch absentees"):
        return activity_service.absentees(db, current_user, target)


# ======================================
# HIERARCHY
# ======================================
@router.get("/employees")
def get_employees(
    db: Session = Depends(get_db),
    current_user: TokenUser = Depends(get_current_user)
):
    with database_errors(db, "Failed to get employees"):
        return directory_service.list_employees(db, current_user)


@router.get("/subordinates")
def get_subordinates(
    db: Session = Depends(get_db),
    current_user: TokenUser = Depends(get_current_user)
):
    with database_errors(db, "Unable to fetch subordinates"):
        return directory_service.list_subordinates(db, current_user)


# ======================================
# ATTENDANCE
# ======================================
@router.get("/attendance-overview")
def get_attendance_overview(
    month: str | None = Query(default=None),
    db: Session = Depends(get_db),
    current_user: TokenUser = Depends(get_current_user)
):
    if month:
        parsed = parse_month(month)
        if parsed is None:
            raise bad_request("Invalid month. Use YYYY-MM")
        year, month_num = parsed
    else:
        today = date.today()
        year, month_num = today.year, today.month

    with database_errors(db, "Unable to fetch attendance overview"):
        return attendance_service.attendance_overview(db, year, month_num)


@router.get("/employee-reports/{employee_id}")
def get_employee_reports(
    employee_id: int,
    db: Session = Depends(get_db),
    current_user: TokenUser = Depends(get_current_user)
):
    with database_errors(db, "Failed to get employee reports"):
        return attendance_service.employee_report(db, employee_id, current_user)
