"""
Routy autentizace / Authentication routes.
Registrace, přihlášení, obnovení tokenu, profil, odhlášení.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from spolky.config import settings
from spolky.database import get_db
from spolky.models.user import User
from spolky.rate_limit import limiter
from spolky.schemas.auth import LoginRequest, RefreshRequest, TokenResponse
from spolky.schemas.user import UserRead, UserRegister
from spolky.utils.auth import create_access_token, create_refresh_token, decode_token, hash_password, verify_password
from spolky.api.deps import get_current_user

logger = logging.getLogger("spolky.auth")

router = APIRouter()


@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
@limiter.limit(settings.RATE_LIMIT_REGISTER)
async def register(request: Request, data: UserRegister, db: AsyncSession = Depends(get_db)):
    """Registrace uživatele / Register a new user."""
    existing = await db.execute(
        select(User).where((User.username == data.username) | (User.email == data.email))
    )
    if existing.scalars().first():
        raise HTTPException(status_code=400, detail="Username or email already exists")

    user = User(
        username=data.username,
        email=data.email,
        name=data.name,
        surname=data.surname,
        phone=data.phone,
        role=data.role,
        hashed_password=hash_password(data.password),
    )
    db.add(user)
    await db.flush()
    await db.refresh(user)
    logger.info("User %s registered with role %s", user.username, user.role.value)
    return user


@router.post("/login", response_model=TokenResponse)
@limiter.limit(settings.RATE_LIMIT_LOGIN)
async def login(request: Request, data: LoginRequest, db: AsyncSession = Depends(get_db)):
    """Přihlášení / Login with credentials."""
    result = await db.execute(select(User).where(User.username == data.username))
    user = result.scalar_one_or_none()

    if user is None or not verify_password(data.password, user.hashed_password):
        logger.warning("Failed login for %s", data.username)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    if not user.is_active:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Account disabled")

    return TokenResponse(
        access_token=create_access_token(user.id),
        refresh_token=create_refresh_token(user.id),
    )


@router.post("/refresh", response_model=TokenResponse)
async def refresh(data: RefreshRequest, db: AsyncSession = Depends(get_db)):
    """Obnovit tokeny / Refresh tokens."""
    payload = decode_token(data.refresh_token)
    if payload is None or payload.get("type") != "refresh":
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid refresh token")

    user = await db.get(User, str(payload["sub"]))
    if user is None or not user.is_active:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found or inactive")

    return TokenResponse(
        access_token=create_access_token(user.id),
        refresh_token=create_refresh_token(user.id),
    )


@router.get("/me", response_model=UserRead)
async def me(user: User = Depends(get_current_user)):
    """Profil přihlášeného uživatele / Current user profile."""
    return user


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(user: User = Depends(get_current_user)):
    """Odhlášení; tokeny jsou bezstavové, klient je zahodí /
    Logout; tokens are stateless, the client discards them."""
    logger.info("User %s logged out", user.username)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
