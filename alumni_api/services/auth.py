"""Auth (signup, login, admin login, account blocking) business logic."""

import logging
from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError

from alumni_api.core import hash_password, verify_password, create_access_token, ROLE_ALUMNI
from alumni_api.db.models import User, Alumni
from alumni_api.dependencies import is_admin_user
from alumni_api.schemas import (
    SignupRequest,
    LoginRequest,
    TokenResponse,
    UserResponse,
    LoginResponse,
    AlumniResponse,
)
from alumni_api.services.profile import completeness_percentage

logger = logging.getLogger(__name__)

_INVALID_CREDENTIALS = "Invalid credentials"


def _normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def user_to_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        username=user.username,
        email=user.email,
        is_admin=bool(user.is_admin),
        user_role=user.user_role or ROLE_ALUMNI,
        account_blocked=bool(user.account_blocked),
    )


async def _get_user_by_email(db: AsyncSession, email: str) -> User | None:
    result = await db.execute(select(User).where(func.lower(User.email) == _normalize_email(email)))
    return result.scalar_one_or_none()


async def _login_response(db: AsyncSession, user: User) -> LoginResponse:
    result = await db.execute(select(Alumni).where(Alumni.user_id == user.id))
    alumni = result.scalar_one_or_none()
    role = user.user_role or ROLE_ALUMNI
    return LoginResponse(
        access_token=create_access_token(subject=str(user.id), role=role),
        user=user_to_response(user),
        alumni=AlumniResponse.model_validate(alumni) if alumni else None,
    )


async def signup(db: AsyncSession, body: SignupRequest) -> TokenResponse:
    """Create a user account and an empty alumni profile."""
    email = _normalize_email(body.email)

    existing = await db.execute(select(User.id).where(func.lower(User.email) == email))
    if existing.scalar_one_or_none():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email already registered")

    user = User(
        username=body.username,
        email=email,
        hashed_password=hash_password(body.password),
        user_role=ROLE_ALUMNI,
    )
    db.add(user)
    try:
        await db.flush()
    except IntegrityError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email already registered")

    alumni = Alumni(
        user_id=user.id,
        first_name=body.first_name,
        last_name=body.last_name,
        email=email,
        batch=body.batch,
    )
    alumni.profile_completion_score = completeness_percentage(alumni)
    db.add(alumni)
    await db.flush()
    logger.info("Created user %s", user.id)

    token = create_access_token(subject=str(user.id), role=ROLE_ALUMNI)
    return TokenResponse(access_token=token)


async def login(db: AsyncSession, body: LoginRequest) -> LoginResponse:
    """Regular login. Administrators must use the admin login path."""
    user = await _get_user_by_email(db, body.email)
    if not user:
        logger.info("Login attempt for unknown email")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=_INVALID_CREDENTIALS)
    if is_admin_user(user):
        logger.info("Admin login attempt blocked on regular login for user %s", user.id)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=_INVALID_CREDENTIALS)
    if user.account_blocked:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Your account has been blocked by the administrator. "
            "Please contact the authority for account activation.",
        )
    if not verify_password(body.password, user.hashed_password):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=_INVALID_CREDENTIALS)
    return await _login_response(db, user)


async def admin_login(db: AsyncSession, body: LoginRequest) -> LoginResponse:
    user = await _get_user_by_email(db, body.email)
    if not user or not is_admin_user(user):
        logger.info("Non-admin or unknown account attempted admin login")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=_INVALID_CREDENTIALS)
    if user.account_blocked:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Your account has been blocked.")
    if not verify_password(body.password, user.hashed_password):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=_INVALID_CREDENTIALS)
    return await _login_response(db, user)


async def set_account_blocked(db: AsyncSession, user_id: str, blocked: bool) -> UserResponse:
    result = await db.execute(select(User).where(User.id == user_id))
    user = result.scalar_one_or_none()
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    user.account_blocked = blocked
    await db.flush()
    logger.info("User %s %s", user.id, "blocked" if blocked else "unblocked")
    return user_to_response(user)


class AuthService:
    """Facade for auth operations."""

    @staticmethod
    async def signup(db: AsyncSession, body: SignupRequest) -> TokenResponse:
        return await signup(db, body)

    @staticmethod
    async def login(db: AsyncSession, body: LoginRequest) -> LoginResponse:
        return await login(db, body)

    @staticmethod
    async def admin_login(db: AsyncSession, body: LoginRequest) -> LoginResponse:
        return await admin_login(db, body)

    @staticmethod
    async def block_user(db: AsyncSession, user_id: str) -> UserResponse:
        return await set_account_blocked(db, user_id, True)

    @staticmethod
    async def unblock_user(db: AsyncSession, user_id: str) -> UserResponse:
        return await set_account_blocked(db, user_id, False)


auth_service = AuthService()
