from pydantic import BaseModel
from datetime import date, datetime
from typing import Optional


class DailyReportCreate(BaseModel):
    report_date: Optional[str] = None
    in_time: Optional[str] = None
    out_time: Optional[str] = None
    project_no: Optional[str] = None
    location_type: Optional[str] = None
    daily_target_achieved: Optional[str] = None
    problem_faced: Optional[str] = None
    customer_name: Optional[str] = None
    customer_person: Optional[str] = None
    customer_contact: Optional[str] = None
    end_customer_name: Optional[str] = None
    end_customer_person: Optional[str] = None
    end_customer_contact: Optional[str] = None
    site_location: Optional[str] = None


class DailyReportOut(BaseModel):
    id: int
    user_id: Optional[int] = None
    incharge: Optional[str] = None
    report_date: date
    in_time: Optional[str] = None
    out_time: Optional[str] = None
    project_no: Optional[str] = None
    location_type: Optional[str] = None
    daily_target_achieved: Optional[str] = None
    problem_faced: Optional[str] = None
    customer_name: Optional[str] = None
    customer_person: Optional[str] = None
    customer_contact: Optional[str] = None
    end_customer_name: Optional[str] = None
    end_customer_person: Optional[str] = None
    end_customer_contact: Optional[str] = None
    site_location: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True


class HourlyReportCreate(BaseModel):
    report_date: Optional[str] = None
    time_period: Optional[str] = None
    project_name: Optional[str] = None
    daily_target: Optional[str] = None
    hourly_activity: Optional[str] = None
    problem_faced_by_engineer_hourly: Optional[str] = None


class HourlyReportOut(BaseModel):
    id: int
    user_id: Optional[int] = None
    report_date: date
    time_period: Optional[str] = None
    project_name: Optional[str] = None
    daily_target: Optional[str] = None
    hourly_activity: Optional[str] = None
    problem_faced_by_engineer_hourly: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True
