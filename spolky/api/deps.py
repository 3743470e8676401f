"""
Závislosti autentizace a autorizace / Authentication and authorization dependencies.
Vkládají se do rout přes Depends().
"""

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from spolky.database import get_db
from spolky.models.user import Role, User
from spolky.schemas.user import ActingUser
from spolky.utils.auth import decode_token

security = HTTPBearer(auto_error=False)

ALL_ROLES = (Role.ADMIN, Role.CHAIRMAN, Role.PUBLIC, Role.READ_ONLY)
EDITOR_ROLES = (Role.ADMIN, Role.CHAIRMAN)
AUDIT_READER_ROLES = (Role.ADMIN, Role.CHAIRMAN, Role.READ_ONLY)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    db: AsyncSession = Depends(get_db),
) -> User:
    """Uživatel z JWT / Extract and validate user from JWT."""
    if credentials is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    payload = decode_token(credentials.credentials)
    if payload is None or payload.get("type") != "access":
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or expired token")

    user = await db.get(User, str(payload["sub"]))

    if user is None or not user.is_active:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found or inactive")

    return user


def require_roles(*roles: Role):
    """Továrna závislosti ověřující roli / Dependency factory that checks the user's role."""

    async def _check(user: User = Depends(get_current_user)) -> User:
        if user.role in roles:
            return user
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Role required: {', '.join(r.value for r in roles)}",
        )

    return _check


def acting_user(*roles: Role):
    """Jako require_roles, vrací ActingUser pro audit / Like require_roles, returns an ActingUser for audit."""
    check = require_roles(*roles)

    async def _resolve(user: User = Depends(check)) -> ActingUser:
        return ActingUser(id=user.id, username=user.username)

    return _resolve
