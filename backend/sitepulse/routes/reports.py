from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from sitepulse.core.dependencies import get_current_user
from sitepulse.core.errors import database_errors
from sitepulse.database.session import get_db
from sitepulse.schemas.report import DailyReportCreate, DailyReportOut, HourlyReportCreate, HourlyReportOut
from sitepulse.schemas.user import TokenUser
from sitepulse.services.report_service import create_daily_report, create_hourly_report

router = APIRouter(prefix="/reports", tags=["Reports"])


@router.post("/daily", response_model=DailyReportOut, status_code=status.HTTP_201_CREATED)
def submit_daily_report(
    payload: DailyReportCreate,
    db: Session = Depends(get_db),
    current_user: TokenUser = Depends(get_current_user)
):
    with database_errors(db, "Unable to save daily report"):
        return create_daily_report(db, current_user, payload)


@router.post("/hourly", response_model=HourlyReportOut, status_code=status.HTTP_201_CREATED)
def submit_hourly_report(
    payload: HourlyReportCreate,
    db: Session = Depends(get_db),
    current_user: TokenUser = Depends(get_current_user)
):
    with database_errors(db, "Unable to save hourly report"):
        return create_hourly_report(db, current_user, payload)
