import logging

from sqlalchemy.orm import Session

from sitepulse.core.validation import require_date, require_non_empty_text
from sitepulse.models.report import DailyTargetReport, HourlyReport
from sitepulse.models.user import User
from sitepulse.schemas.report import DailyReportCreate, HourlyReportCreate
from sitepulse.schemas.user import TokenUser

logger = logging.getLogger(__name__)


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def create_daily_report(db: Session, caller: TokenUser, payload: DailyReportCreate) -> DailyTargetReport:
    report_date = require_date(payload.report_date, "A valid report date is required")
    location_type = _clean(payload.location_type)

    user = db.query(User).filter(User.id == caller.id).first()
    fields = {
        name: _clean(value)
        for name, value in payload.model_dump(exclude={"report_date", "location_type"}).items()
    }
    report = DailyTargetReport(
        user_id=caller.id,
        incharge=user.username if user else caller.username,
        report_date=report_date,
        location_type=location_type.lower() if location_type else None,
        **fields,
    )
    db.add(report)
    db.commit()
    db.refresh(report)

    logger.info("Daily report %s filed by user %s for %s", report.id, caller.id, report_date)
    return report


def create_hourly_report(db: Session, caller: TokenUser, payload: HourlyReportCreate) -> HourlyReport:
    report_date = require_date(payload.report_date, "A valid report date is required")
    hourly_activity = require_non_empty_text(payload.hourly_activity, "Hourly activity is required")

    report = HourlyReport(
        user_id=caller.id,
        report_date=report_date,
        time_period=_clean(payload.time_period),
        project_name=_clean(payload.project_name),
        daily_target=_clean(payload.daily_target),
        hourly_activity=hourly_activity,
        problem_faced_by_engineer_hourly=_clean(payload.problem_faced_by_engineer_hourly),
    )
    db.add(report)
    db.commit()
    db.refresh(report)

    logger.info("Hourly report %s filed by user %s for %s", report.id, caller.id, report_date)
    return report
