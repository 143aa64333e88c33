from pydantic import BaseModel, field_validator
from datetime import date, datetime
from typing import Optional


class MomPrefill(BaseModel):
    observation: str
    solution: str


class MomCreate(BaseModel):
    customerName: Optional[str] = None
    customerPerson: Optional[str] = None
    custContact: Optional[str] = None
    momDate: Optional[date] = None
    reportingTime: Optional[str] = None
    momCloseTime: Optional[str] = None
    manHours: Optional[str] = None
    enggName: Optional[str] = None
    siteLocation: Optional[str] = None
    projectName: Optional[str] = None
    observation: Optional[str] = None
    solution: Optional[str] = None
    conclusion: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @field_validator("*", mode="before")
    @classmethod
    def normalize_optional_strings(cls, value):
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value

    @field_validator("latitude")
    @classmethod
    def validate_latitude(cls, value: Optional[float]):
        if value is not None and not -90 <= value <= 90:
            raise ValueError("latitude must be between -90 and 90")
        return value

    @field_validator("longitude")
    @classmethod
    def validate_longitude(cls, value: Optional[float]):
        if value is not None and not -180 <= value <= 180:
            raise ValueError("longitude must be between -180 and 180")
        return value


class MomOut(BaseModel):
    id: int
    user_id: int
    customer_name: Optional[str] = None
    customer_person: Optional[str] = None
    customer_contact: Optional[str] = None
    mom_date: Optional[date] = None
    reporting_time: Optional[str] = None
    close_time: Optional[str] = None
    man_hours: Optional[str] = None
    engineer_name: Optional[str] = None
    site_location: Optional[str] = None
    project_name: Optional[str] = None
    observation: Optional[str] = None
    solution: Optional[str] = None
    conclusion: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    created_at: datetime

    model_config = {
        "from_attributes": True
    }
