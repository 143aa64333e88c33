from sqlalchemy.orm import Session

from sitepulse.core.dependencies import require_supervisor
from sitepulse.core.roles import Role
from sitepulse.models.user import User
from sitepulse.schemas.user import EmployeeOut, SubordinateOut, TokenUser


def direct_reports(db: Session, manager_id: int) -> list[User]:
    return db.query(User).filter(
        User.manager_id == manager_id
    ).order_by(User.username.asc()).all()


def list_employees(db: Session, caller: TokenUser) -> dict:
    role = require_supervisor(
        caller,
        "Access denied. Only managers and team leaders can view employee lists.",
    )

    if role is Role.MANAGER:
        users = db.query(User).order_by(User.username.asc()).all()
        employees = [user for user in users if Role.from_text(user.role) is not Role.MANAGER]
    else:
        employees = direct_reports(db, caller.id)

    return {"employees": [EmployeeOut.model_validate(user) for user in employees]}


def list_subordinates(db: Session, caller: TokenUser) -> dict:
    require_supervisor(caller, "Only Team Leaders or Managers can view subordinates")
    return {
        "subordinates": [
            SubordinateOut.model_validate(user) for user in direct_reports(db, caller.id)
        ]
    }
