import logging
from datetime import date

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from sitepulse.core.security import create_user_token, hash_password, verify_password
from sitepulse.core.validation import bad_request, is_blank, is_valid_email, parse_date
from sitepulse.models.user import User
from sitepulse.schemas.user import RegisterRequest
from sitepulse.utils.generator import generate_employee_id

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid username or password"


def _auth_payload(user: User) -> dict:
    return {
        "token": create_user_token(user),
        "username": user.username,
        "role": user.role,
        "employeeId": user.employee_id,
        "id": user.id,
    }


def register_user(db: Session, data: RegisterRequest, today: date | None = None) -> dict:
    today = today or date.today()

    if is_blank(data.username) or is_blank(data.password):
        raise bad_request("Username and password are required")
    if is_blank(data.email):
        raise bad_request("Email is required")
    if is_blank(data.dob):
        raise bad_request("Date of birth is required")
    if is_blank(data.joining_date):
        raise bad_request("Joining date is required")

    username = data.username.strip()
    email = data.email.strip()

    if not is_valid_email(email):
        raise bad_request("Invalid email format")

    dob = parse_date(data.dob)
    if dob is None:
        raise bad_request("Invalid date of birth")
    if dob >= today:
        raise bad_request("Date of birth must be before today (no future dates)")

    joining_date = parse_date(data.joining_date)
    if joining_date is None:
        raise bad_request("Invalid joining date")
    if joining_date > today:
        raise bad_request("Joining date cannot be in the future")

    if is_blank(data.role):
        raise bad_request("Role is required")
    role = data.role.strip()

    if db.query(User.id).filter(User.username == username).first():
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Username already exists")
    if db.query(User.id).filter(User.email == email).first():
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already exists")

    if data.manager_id:
        if not db.query(User.id).filter(User.id == data.manager_id).first():
            raise bad_request("Manager not found")

    employee_id = (data.employee_id or "").strip() or generate_employee_id()
    mobile = (data.mobile or "").strip() or None

    user = User(
        username=username,
        email=email,
        password_hash=hash_password(data.password),
        dob=dob,
        mobile=mobile,
        phone_no=mobile,
        joining_date=joining_date,
        role=role,
        manager_id=data.manager_id or None,
        employee_id=employee_id,
    )
    db.add(user)
    db.commit()
    db.refresh(user)

    logger.info("Registered user %s (id=%s, role=%s)", user.username, user.id, user.role)
    return _auth_payload(user)


def login_user(db: Session, username: str | None, password: str | None) -> dict:
    if is_blank(username) or not password:
        raise bad_request("Username and password are required")

    user = db.query(User).filter(User.username == username.strip()).first()

    # unknown user and wrong password must look the same to the caller
    if not user or not verify_password(password, user.password_hash):
        logger.info("Rejected login for %s", username)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=INVALID_CREDENTIALS)

    logger.info("User %s logged in", user.username)
    return _auth_payload(user)
