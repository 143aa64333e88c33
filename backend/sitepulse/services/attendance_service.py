from calendar import monthrange
from collections import OrderedDict
from datetime import date, timedelta

from fastapi import HTTPException, status
from sqlalchemy import func
from sqlalchemy.orm import Session

from sitepulse.core.roles import Role
from sitepulse.models.report import DailyTargetReport, HourlyReport
from sitepulse.models.user import User
from sitepulse.schemas.report import DailyReportOut, HourlyReportOut
from sitepulse.schemas.user import TokenUser

PRESENT_LOCATIONS = ("office", "site")
MAX_SHEET_DAYS = 365
RECENT_REPORT_LIMIT = 10
DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def one_month_before(day: date) -> date:
    year, month = (day.year, day.month - 1) if day.month > 1 else (day.year - 1, 12)
    return date(year, month, min(day.day, monthrange(year, month)[1]))


def attendance_overview(db: Session, year: int, month: int, today: date | None = None) -> dict:
    today = today or date.today()
    first_day = date(year, month, 1)
    last_day = date(year, month, monthrange(year, month)[1])

    present_counts = dict(
        db.query(
            DailyTargetReport.user_id,
            func.count(func.distinct(DailyTargetReport.report_date)),
        ).filter(
            DailyTargetReport.user_id != None,  # noqa: E711
            DailyTargetReport.location_type.in_(PRESENT_LOCATIONS),
            DailyTargetReport.report_date >= first_day,
            DailyTargetReport.report_date <= last_day,
        ).group_by(DailyTargetReport.user_id).all()
    )

    employees = []
    for user in db.query(User).order_by(User.username.asc()).all():
        employees.append({
            "id": user.id,
            "username": user.username,
            "role": user.role,
            "employee_id": user.employee_id,
            "dob": user.dob,
            "joining_date": user.joining_date,
            "selected_month_present": present_counts.get(user.id, 0),
            "days_since_joining": (today - user.joining_date).days if user.joining_date else None,
        })

    return {
        "employees": employees,
        "selectedMonth": f"{year:04d}-{month:02d}",
    }


def _resolve_employee(db: Session, employee_id: int, caller: TokenUser) -> User:
    role = caller.access_role
    viewing_own = caller.id == employee_id

    if not viewing_own and not role.is_supervisor:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Access denied. You can only view your own reports, or managers/team leaders can view all reports."
        )

    query = db.query(User).filter(User.id == employee_id)
    if not viewing_own and role is not Role.MANAGER:
        query = query.filter(User.manager_id == caller.id)

    employee = query.first()
    if not employee:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Employee not found or access denied"
        )
    return employee


def build_attendance_sheet(present_dates: set[date], joining_date: date | None, today: date) -> list[dict]:
    start = joining_date or one_month_before(today)
    start = max(start, today - timedelta(days=MAX_SHEET_DAYS))

    sheet = []
    current = start
    while current <= today:
        is_present = current in present_dates
        sheet.append({
            "date": current.isoformat(),
            "day": DAY_NAMES[current.weekday()],
            "isPresent": is_present,
            "status": "Present" if is_present else "Absent",
        })
        current += timedelta(days=1)
    return sheet


def monthly_attendance(sheet: list[dict]) -> list[dict]:
    stats: "OrderedDict[str, dict]" = OrderedDict()
    for day in sheet:
        key = day["date"][:7]
        entry = stats.setdefault(key, {"month": key, "totalDays": 0, "presentDays": 0, "absentDays": 0})
        entry["totalDays"] += 1
        if day["isPresent"]:
            entry["presentDays"] += 1
        else:
            entry["absentDays"] += 1
    return sorted(stats.values(), key=lambda entry: entry["month"])


def employee_report(db: Session, employee_id: int, caller: TokenUser, today: date | None = None) -> dict:
    today = today or date.today()
    employee = _resolve_employee(db, employee_id, caller)

    present_dates = {
        report_date for (report_date,) in db.query(DailyTargetReport.report_date).filter(
            DailyTargetReport.user_id == employee.id,
            DailyTargetReport.location_type.in_(PRESENT_LOCATIONS),
        ).distinct()
    }
    sheet = build_attendance_sheet(present_dates, employee.joining_date, today)

    recent_daily = db.query(DailyTargetReport).filter(
        DailyTargetReport.user_id == employee.id
    ).order_by(DailyTargetReport.report_date.desc()).limit(RECENT_REPORT_LIMIT).all()
    recent_hourly = db.query(HourlyReport).filter(
        HourlyReport.user_id == employee.id
    ).order_by(HourlyReport.created_at.desc()).limit(RECENT_REPORT_LIMIT).all()

    return {
        "employee": {
            "id": employee.id,
            "username": employee.username,
            "role": employee.role,
            "employee_id": employee.employee_id,
            "joining_date": employee.joining_date,
        },
        "attendanceSheet": sheet,
        "monthlyAttendance": monthly_attendance(sheet),
        "recentDailyReports": [DailyReportOut.model_validate(row) for row in recent_daily],
        "recentHourlyReports": [HourlyReportOut.model_validate(row) for row in recent_hourly],
    }
