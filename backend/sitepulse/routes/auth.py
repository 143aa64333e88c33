from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from sitepulse.core.errors import database_errors
from sitepulse.database.session import get_db
from sitepulse.schemas.user import AuthResponse, LoginRequest, RegisterRequest
from sitepulse.services.auth_service import login_user, register_user

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(data: RegisterRequest, db: Session = Depends(get_db)):
    with database_errors(db, "Unable to register user"):
        return register_user(db, data)


@router.post("/login", response_model=AuthResponse)
def login(data: LoginRequest, db: Session = Depends(get_db)):
    with database_errors(db, "Unable to login"):
        return login_user(db, data.username, data.password)
