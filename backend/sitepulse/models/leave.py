from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey, Text, UniqueConstraint
from sqlalchemy.orm import relationship
from sitepulse.database.base import Base


class LeaveBalance(Base):
    __tablename__ = "leave_balances"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    leave_year = Column(Integer, nullable=False)

    casual_leaves = Column(Integer, nullable=False, default=0)
    sick_leaves = Column(Integer, nullable=False, default=0)
    paid_leaves = Column(Integer, nullable=False, default=0)

    used_casual = Column(Integer, nullable=False, default=0)
    used_sick = Column(Integer, nullable=False, default=0)
    used_paid = Column(Integer, nullable=False, default=0)

    user = relationship("User", foreign_keys=[user_id])

    __table_args__ = (
        UniqueConstraint("user_id", "leave_year", name="unique_user_leave_year"),
    )


class LeaveApplication(Base):
    __tablename__ = "leave_applications"

    id = Column(Integer, primary_key=True, index=True)

    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    leave_type = Column(String(20), nullable=False)  # casual | sick | paid

    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)

    reason = Column(Text, nullable=False)

    status = Column(String(20), nullable=False, default="pending")
    # pending | approved | rejected

    approved_by = Column(Integer, ForeignKey("users.id"), nullable=True)
    approved_at = Column(DateTime(timezone=True), nullable=True)

    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False)

    # relationships
    employee = relationship("User", foreign_keys=[user_id])
    approver = relationship("User", foreign_keys=[approved_by])
