"""Auth routes: register, login, profile. Bearer JWT."""
from __future__ import annotations

import logging
import re

from fastapi import APIRouter, HTTPException, status
from sqlalchemy import select

from app.core.security import create_access_token, hash_password, verify_password
from app.models.user import User
from app.routers.deps import CurrentClock, CurrentUser, DbSession
from app.schemas.auth import LoginSchema, ProfileSchema, RegisterSchema, TokenSchema
from app.services.activity import streak_state_of
from app.services.streaks import effective_streak

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger(__name__)

# Simple, practical email check
EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _normalize_email(email: str | None) -> str:
    return (email or "").strip().lower()


@router.post("/register", response_model=TokenSchema, status_code=status.HTTP_201_CREATED)
async def register(body: RegisterSchema, db: DbSession):
    """Create user and return an access token."""
    email_norm = _normalize_email(body.email)
    pwd = body.password or ""

    if not email_norm or not EMAIL_RE.match(email_norm):
        raise HTTPException(status_code=400, detail="Invalid email")

    # minimum password length (characters)
    if len(pwd) < 8:
        raise HTTPException(status_code=400, detail="Password too short")

    # bcrypt hard limit: 72 bytes (UTF-8)
    if len(pwd.encode("utf-8")) > 72:
        raise HTTPException(status_code=400, detail="Password too long")

    result = await db.execute(select(User).where(User.email == email_norm))
    if result.scalar_one_or_none() is not None:
        raise HTTPException(status_code=409, detail="Email already registered")

    user = User(
        email=email_norm,
        hashed_password=hash_password(pwd),
        name=(body.name or "").strip() or None,
        current_streak=0,
        longest_streak=0,
    )
    db.add(user)
    await db.commit()
    logger.info("Registered user %s", user.id)

    return TokenSchema(access_token=create_access_token(user.id))


@router.post("/login", response_model=TokenSchema)
async def login(body: LoginSchema, db: DbSession):
    email_norm = _normalize_email(body.email)
    result = await db.execute(select(User).where(User.email == email_norm))
    user = result.scalar_one_or_none()
    if not user or not verify_password(body.password, user.hashed_password):
        logger.warning("Failed login for %s", email_norm)
        raise HTTPException(status_code=401, detail="Invalid email or password")

    return TokenSchema(access_token=create_access_token(user.id))


@router.get("/me", response_model=ProfileSchema)
async def me(current_user: CurrentUser, clock: CurrentClock):
    """Profile with the streak as it should be displayed today."""
    state = streak_state_of(current_user)
    return ProfileSchema(
        id=current_user.id,
        email=current_user.email,
        name=current_user.name,
        current_streak=state.current_streak,
        longest_streak=state.longest_streak,
        effective_streak=effective_streak(state, clock.today()),
    )
