from sqlalchemy import Column, Integer, String, DateTime, Date, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from sitepulse.database.base import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)

    username = Column(String(100), unique=True, index=True, nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)

    # free text as entered at registration, classified through core.roles
    role = Column(String(100), nullable=False)

    employee_id = Column(String(20), index=True, nullable=True)
    dob = Column(Date, nullable=True)
    mobile = Column(String(20), nullable=True)
    phone_no = Column(String(20), nullable=True)
    joining_date = Column(Date, nullable=True)

    manager_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    manager = relationship("User", remote_side=[id], backref="direct_reports")
