from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from sitepulse.core.dependencies import get_current_user
from sitepulse.core.errors import database_errors
from sitepulse.database.session import get_db
from sitepulse.schemas.mom import MomCreate, MomOut, MomPrefill
from sitepulse.schemas.user import TokenUser
from sitepulse.services import mom_service

router = APIRouter(prefix="/mom", tags=["MOM"])


@router.get("/prefill", response_model=MomPrefill)
def get_prefill(
    db: Session = Depends(get_db),
    current_user: TokenUser = Depends(get_current_user)
):
    with database_errors(db, "Unable to prefill MOM"):
        return mom_service.mom_prefill(db, current_user)


@router.post("", response_model=MomOut, status_code=status.HTTP_201_CREATED)
def submit_mom(
    payload: MomCreate,
    db: Session = Depends(get_db),
    current_user: TokenUser = Depends(get_current_user)
):
    with database_errors(db, "Unable to save MOM"):
        return mom_service.create_mom(db, current_user, payload)


@router.get("", response_model=list[MomOut])
def get_moms(
    db: Session = Depends(get_db),
    current_user: TokenUser = Depends(get_current_user)
):
    with database_errors(db, "Unable to fetch MOM records"):
        return mom_service.list_moms(db, current_user)
