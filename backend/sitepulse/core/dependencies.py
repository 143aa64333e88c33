from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from sitepulse.core.roles import Role
from sitepulse.core.security import decode_token
from sitepulse.schemas.user import TokenUser

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme)
) -> TokenUser:
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing or invalid token"
        )

    payload = decode_token(credentials.credentials)
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token"
        )

    try:
        return TokenUser(
            id=int(payload["id"]),
            username=str(payload.get("username") or ""),
            role=str(payload.get("role") or ""),
        )
    except (KeyError, TypeError, ValueError):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token"
        )


def get_leave_approver(
    current_user: TokenUser = Depends(get_current_user)
) -> TokenUser:
    if not current_user.access_role.can_approve_leave:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Forbidden: Only managers and team leaders can manage leave approvals"
        )
    return current_user


def require_supervisor(current_user: TokenUser, detail: str) -> Role:
    role = current_user.access_role
    if not role.is_supervisor:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=detail
        )
    return role
