from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from alumni_api.core import get_settings, limiter
from alumni_api.dependencies import get_db
from alumni_api.schemas import SignupRequest, LoginRequest, TokenResponse, LoginResponse
from alumni_api.services import auth_service

router = APIRouter(prefix="/api/auth", tags=["auth"])

_settings = get_settings()


@router.post("/signup", response_model=TokenResponse)
@limiter.limit(_settings.auth_signup_rate_limit)
async def signup(
    request: Request,
    body: SignupRequest,
    db: AsyncSession = Depends(get_db),
):
    return await auth_service.signup(db, body)


@router.post("/login", response_model=LoginResponse)
@limiter.limit(_settings.auth_login_rate_limit)
async def login(
    request: Request,
    body: LoginRequest,
    db: AsyncSession = Depends(get_db),
):
    return await auth_service.login(db, body)


@router.post("/admin/login", response_model=LoginResponse)
@limiter.limit(_settings.auth_login_rate_limit)
async def admin_login(
    request: Request,
    body: LoginRequest,
    db: AsyncSession = Depends(get_db),
):
    return await auth_service.admin_login(db, body)
