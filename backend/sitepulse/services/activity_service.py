import logging
from datetime import date, datetime, timezone

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from sitepulse.models.report import DailyTargetReport, HourlyReport
from sitepulse.models.user import User
from sitepulse.schemas.user import TokenUser

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20


def _sort_key(activity: dict) -> datetime:
    created = activity.get("createdAt")
    if created is None:
        return datetime.min.replace(tzinfo=timezone.utc)
    if created.tzinfo is None:
        return created.replace(tzinfo=timezone.utc)
    return created


def _daily_activity(report: DailyTargetReport, user: User | None) -> dict:
    return {
        "id": report.id,
        "reportDate": report.report_date,
        "inTime": report.in_time,
        "outTime": report.out_time,
        "projectNo": report.project_no,
        "locationType": report.location_type,
        "dailyTargetAchieved": report.daily_target_achieved,
        "problemFaced": report.problem_faced,
        "username": user.username if user else report.incharge,
        "employeeId": (user.employee_id if user else None) or "N/A",
        "userId": report.user_id,
        "createdAt": report.created_at,
        "reportType": "daily",
        "customerName": report.customer_name,
        "customerPerson": report.customer_person,
        "custContact": report.customer_contact,
        "endCustName": report.end_customer_name,
        "endCustPerson": report.end_customer_person,
        "endCustContact": report.end_customer_contact,
        "siteLocation": report.site_location,
        "hourlyActivity": None,
    }


def _hourly_activity(report: HourlyReport, user: User | None) -> dict:
    return {
        "id": report.id,
        "reportDate": report.report_date,
        "inTime": None,
        "outTime": None,
        "projectNo": report.project_name,
        "locationType": None,
        "dailyTargetAchieved": report.daily_target,
        "problemFaced": report.problem_faced_by_engineer_hourly,
        "username": user.username if user else "Unknown",
        "employeeId": (user.employee_id if user else None) or "N/A",
        "userId": report.user_id,
        "createdAt": report.created_at,
        "reportType": "hourly",
        "customerName": None,
        "customerPerson": None,
        "custContact": None,
        "endCustName": None,
        "endCustPerson": None,
        "endCustContact": None,
        "siteLocation": None,
        "hourlyActivity": report.hourly_activity,
    }


def _caller_username(db: Session, caller: TokenUser) -> str | None:
    row = db.query(User.username).filter(User.id == caller.id).first()
    return row[0] if row else None


def collect_activities(db: Session, caller: TokenUser) -> list[dict]:
    """Every daily and hourly report visible to the caller, newest first."""
    daily_query = db.query(DailyTargetReport, User).outerjoin(User, DailyTargetReport.user_id == User.id)
    hourly_query = db.query(HourlyReport, User).outerjoin(User, HourlyReport.user_id == User.id)

    if not caller.access_role.is_supervisor:
        username = _caller_username(db, caller)
        daily_match = [DailyTargetReport.user_id == caller.id]
        hourly_match = [HourlyReport.user_id == caller.id]
        if username:
            # rows filed before user_id existed are attributed by username
            daily_match.append(DailyTargetReport.incharge == username)
            hourly_match.append(User.username == username)
        daily_query = daily_query.filter(or_(*daily_match))
        hourly_query = hourly_query.filter(or_(*hourly_match))

    activities = [_daily_activity(report, user) for report, user in daily_query.all()]
    activities.extend(_hourly_activity(report, user) for report, user in hourly_query.all())
    activities.sort(key=_sort_key, reverse=True)
    return activities


def list_activities(db: Session, caller: TokenUser, page: int = DEFAULT_PAGE, limit: int = DEFAULT_LIMIT) -> dict:
    activities = collect_activities(db, caller)
    offset = (page - 1) * limit
    logger.debug("Activity feed for user %s: %s rows, page %s", caller.id, len(activities), page)
    return {
        "success": True,
        "activities": activities[offset:offset + limit],
        "pagination": {
            "page": page,
            "limit": limit,
            "total": len(activities),
        },
    }


def activity_summary(db: Session, caller: TokenUser) -> dict:
    if caller.access_role.is_supervisor:
        total, active = db.query(
            func.count(DailyTargetReport.id),
            func.count(func.distinct(DailyTargetReport.incharge)),
        ).one()
        return {"summary": {"totalActivities": total, "activeEmployees": active}}

    total = db.query(func.count(DailyTargetReport.id)).filter(
        DailyTargetReport.user_id == caller.id
    ).scalar()
    return {"summary": {"totalActivities": total or 0}}


def absentees(db: Session, caller: TokenUser, target_date: date) -> dict:
    if caller.access_role.is_supervisor:
        reported_ids = {
            user_id for (user_id,) in db.query(DailyTargetReport.user_id).filter(
                DailyTargetReport.report_date == target_date
            ).distinct()
        }
        users = db.query(User).order_by(User.username.asc()).all()
        return {
            "date": target_date,
            "absentees": [
                {"id": user.id, "username": user.username, "role": user.role}
                for user in users
                if user.id not in reported_ids
            ],
        }

    submitted = db.query(DailyTargetReport.id).filter(
        DailyTargetReport.user_id == caller.id,
        DailyTargetReport.report_date == target_date
    ).first() is not None
    return {"date": target_date, "hasSubmitted": submitted, "absent": not submitted}
