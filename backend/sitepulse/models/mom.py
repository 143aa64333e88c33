from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, Date, DateTime, Float, ForeignKey, Text
from sqlalchemy.orm import relationship
from sitepulse.database.base import Base


class MinutesOfMeeting(Base):
    __tablename__ = "minutes_of_meeting"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    customer_name = Column(String(255), nullable=True)
    customer_person = Column(String(255), nullable=True)
    customer_contact = Column(String(50), nullable=True)

    mom_date = Column(Date, nullable=True)
    reporting_time = Column(String(20), nullable=True)
    close_time = Column(String(20), nullable=True)
    man_hours = Column(String(20), nullable=True)

    engineer_name = Column(String(100), nullable=True)
    site_location = Column(String(255), nullable=True)
    project_name = Column(String(255), nullable=True)

    observation = Column(Text, nullable=True)
    solution = Column(Text, nullable=True)
    conclusion = Column(Text, nullable=True)

    # captured from the device when the browser grants geolocation
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)

    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False)

    user = relationship("User", foreign_keys=[user_id])
