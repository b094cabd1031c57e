from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from alumni_api.db.models import User
from alumni_api.dependencies import get_current_admin, get_db
from alumni_api.schemas import UserResponse
from alumni_api.services import auth_service

router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.post("/users/{user_id}/block", response_model=UserResponse)
async def block_user(
    user_id: str,
    _admin: User = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
):
    return await auth_service.block_user(db, user_id)


@router.post("/users/{user_id}/unblock", response_model=UserResponse)
async def unblock_user(
    user_id: str,
    _admin: User = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
):
    return await auth_service.unblock_user(db, user_id)
