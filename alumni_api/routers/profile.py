from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from alumni_api.db.models import User
from alumni_api.dependencies import get_current_user, get_db
from alumni_api.schemas import AlumniResponse, PatchAlumniRequest, CompletenessResponse
from alumni_api.services import profile_service

router = APIRouter(prefix="/api/alumni/me", tags=["profile"])


@router.get("", response_model=AlumniResponse)
async def get_me(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await profile_service.get_me(db, current_user)


@router.patch("", response_model=AlumniResponse)
async def patch_me(
    body: PatchAlumniRequest,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await profile_service.patch_me(db, current_user, body)


@router.get("/completeness", response_model=CompletenessResponse)
async def get_completeness(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await profile_service.completeness(db, current_user)


@router.patch("/wizard/{step_id}", response_model=AlumniResponse)
async def save_wizard_step(
    step_id: str,
    body: PatchAlumniRequest,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Save one step of the profile completion wizard."""
    return await profile_service.wizard_step(db, current_user, step_id, body)
