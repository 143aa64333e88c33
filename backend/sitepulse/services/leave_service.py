import logging
from datetime import date, datetime, timezone

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from sitepulse.config import settings
from sitepulse.core.validation import bad_request, is_blank, parse_date
from sitepulse.models.leave import LeaveApplication, LeaveBalance
from sitepulse.models.user import User
from sitepulse.schemas.leave import LeaveApply, LeaveApplicationOut, PendingLeaveOut
from sitepulse.schemas.user import TokenUser

logger = logging.getLogger(__name__)

# leave type -> (entitlement column, used column)
LEAVE_FIELDS = {
    "casual": ("casual_leaves", "used_casual"),
    "sick": ("sick_leaves", "used_sick"),
    "paid": ("paid_leaves", "used_paid"),
}
DECISIONS = {"approved", "rejected"}


def leave_days(start_date: date, end_date: date) -> int:
    """Inclusive number of calendar days between two dates."""
    return abs((end_date - start_date).days) + 1


def available_leaves(balance: LeaveBalance, leave_type: str) -> int:
    total_field, used_field = LEAVE_FIELDS[leave_type]
    return (getattr(balance, total_field) or 0) - (getattr(balance, used_field) or 0)


def _find_balance(db: Session, user_id: int, year: int) -> LeaveBalance | None:
    return db.query(LeaveBalance).filter(
        LeaveBalance.user_id == user_id,
        LeaveBalance.leave_year == year
    ).first()


def get_or_create_balance(db: Session, user_id: int, year: int | None = None) -> LeaveBalance:
    year = year or date.today().year

    balance = _find_balance(db, user_id, year)
    if balance is None:
        db.add(LeaveBalance(
            user_id=user_id,
            leave_year=year,
            casual_leaves=settings.DEFAULT_CASUAL_LEAVES,
            sick_leaves=settings.DEFAULT_SICK_LEAVES,
        ))
        db.commit()
        balance = _find_balance(db, user_id, year)

    if balance is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create or retrieve leave balance"
        )
    return balance


def balance_summary(db: Session, user_id: int) -> dict:
    balance = get_or_create_balance(db, user_id)
    return {
        "year": balance.leave_year,
        "total_casual": balance.casual_leaves,
        "total_sick": balance.sick_leaves,
        "total_paid": balance.paid_leaves,
        "used_casual": balance.used_casual,
        "used_sick": balance.used_sick,
        "used_paid": balance.used_paid,
        "available_casual": available_leaves(balance, "casual"),
        "available_sick": available_leaves(balance, "sick"),
        "available_paid": available_leaves(balance, "paid"),
    }


def apply_for_leave(db: Session, user_id: int, payload: LeaveApply) -> LeaveApplication:
    if any(is_blank(value) for value in (payload.leave_type, payload.start_date, payload.end_date, payload.reason)):
        raise bad_request("Leave type, start date, end date, and reason are required")

    start_date = parse_date(payload.start_date)
    end_date = parse_date(payload.end_date)
    if start_date is None or end_date is None:
        raise bad_request("Invalid date format")
    if start_date > end_date:
        raise bad_request("Start date cannot be after end date")

    leave_type = payload.leave_type.strip()
    if leave_type not in LEAVE_FIELDS:
        raise bad_request("Invalid leave type")

    requested = leave_days(start_date, end_date)
    available = available_leaves(get_or_create_balance(db, user_id), leave_type)
    if requested > available:
        raise bad_request(
            f"Not enough {leave_type} available. Available: {available}, Requested: {requested}"
        )

    application = LeaveApplication(
        user_id=user_id,
        leave_type=leave_type,
        start_date=start_date,
        end_date=end_date,
        reason=payload.reason.strip(),
        status="pending",
    )
    db.add(application)
    db.commit()
    db.refresh(application)

    logger.info(
        "Leave application %s: user %s requested %s %s day(s)",
        application.id, user_id, requested, leave_type,
    )
    return application


def leave_history(db: Session, user_id: int) -> list[LeaveApplication]:
    return db.query(LeaveApplication).filter(
        LeaveApplication.user_id == user_id
    ).order_by(LeaveApplication.created_at.desc()).all()


def list_approvals_queue(db: Session) -> list[PendingLeaveOut]:
    rows = db.query(LeaveApplication, User).join(
        User, LeaveApplication.user_id == User.id
    ).filter(
        LeaveApplication.status == "pending"
    ).order_by(LeaveApplication.created_at.asc()).all()

    return [
        PendingLeaveOut(
            **LeaveApplicationOut.model_validate(application).model_dump(),
            username=user.username,
            employee_id=user.employee_id,
            user_role=user.role,
        )
        for application, user in rows
    ]


def decide(db: Session, application_id: int, approver: TokenUser, decision: str | None) -> dict:
    normalized = str(decision or "").strip().lower()
    if normalized not in DECISIONS:
        raise bad_request('Invalid status. Must be "approved" or "rejected"')

    application = db.query(LeaveApplication).filter(
        LeaveApplication.id == application_id,
        LeaveApplication.status == "pending"
    ).first()
    if not application:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Leave application not found or already processed"
        )

    used_field = None
    if normalized == "approved" and application.leave_type in LEAVE_FIELDS:
        # lands on the current year's balance, whatever year the leave falls in
        balance = get_or_create_balance(db, application.user_id)
        days = leave_days(application.start_date, application.end_date)
        available = available_leaves(balance, application.leave_type)
        if days > available:
            raise bad_request(
                f"Not enough {application.leave_type} available. Available: {available}, Requested: {days}"
            )
        _, used_field = LEAVE_FIELDS[application.leave_type]
        setattr(balance, used_field, getattr(LeaveBalance, used_field) + days)

    application.status = normalized
    application.approved_by = approver.id
    application.approved_at = datetime.now(timezone.utc)
    db.commit()

    if used_field:
        logger.info(
            "Leave application %s approved by %s; %s += %s for user %s",
            application.id, approver.id, used_field, days, application.user_id,
        )
    else:
        logger.info("Leave application %s %s by %s", application.id, normalized, approver.id)

    return {"message": f"Leave application {normalized} successfully"}
