from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey, Text
from sqlalchemy.orm import relationship
from sitepulse.database.base import Base


def _utcnow():
    return datetime.now(timezone.utc)


class DailyTargetReport(Base):
    __tablename__ = "daily_target_reports"

    id = Column(Integer, primary_key=True, index=True)

    # legacy rows predate user_id and are attributed through incharge only
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    incharge = Column(String(100), nullable=True, index=True)

    report_date = Column(Date, nullable=False, index=True)
    in_time = Column(String(10), nullable=True)
    out_time = Column(String(10), nullable=True)
    project_no = Column(String(100), nullable=True)
    location_type = Column(String(20), nullable=True)  # office | site | other

    daily_target_achieved = Column(Text, nullable=True)
    problem_faced = Column(Text, nullable=True)

    customer_name = Column(String(255), nullable=True)
    customer_person = Column(String(255), nullable=True)
    customer_contact = Column(String(50), nullable=True)
    end_customer_name = Column(String(255), nullable=True)
    end_customer_person = Column(String(255), nullable=True)
    end_customer_contact = Column(String(50), nullable=True)
    site_location = Column(String(255), nullable=True)

    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)

    user = relationship("User", foreign_keys=[user_id])


class HourlyReport(Base):
    __tablename__ = "hourly_reports"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)

    report_date = Column(Date, nullable=False, index=True)
    time_period = Column(String(50), nullable=True)
    project_name = Column(String(255), nullable=True)
    daily_target = Column(Text, nullable=True)
    hourly_activity = Column(Text, nullable=True)
    problem_faced_by_engineer_hourly = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)

    user = relationship("User", foreign_keys=[user_id])
