import uuid
from typing import Annotated, Optional

from fastapi import Depends, Header, HTTPException, status

from libs.auth.models import AuthUser


def _parse_user_id(raw: str) -> uuid.UUID:
    try:
        return uuid.UUID(raw)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid User ID"
        )


async def get_current_user(
    x_user_id: Annotated[Optional[str], Header()] = None,
    x_user_role: Annotated[Optional[str], Header()] = None,
) -> AuthUser:
    """
    Identify the caller from the ``X-User-Id`` / ``X-User-Role`` headers.
    """
    if not x_user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized"
        )

    role = x_user_role if x_user_role in ("admin", "user", "delivery_boy") else "user"
    return AuthUser(user_id=_parse_user_id(x_user_id), role=role)


async def require_admin(
    current_user: Annotated[AuthUser, Depends(get_current_user)]
) -> AuthUser:
    """
    Ensure the caller claims the 'admin' role.
    """
    if not current_user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin privileges required",
        )
    return current_user
