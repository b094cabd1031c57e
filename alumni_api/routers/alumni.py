from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from alumni_api.core import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from alumni_api.dependencies import get_db
from alumni_api.schemas import AlumniResponse, AlumniSearchResponse
from alumni_api.services import alumni_service

router = APIRouter(prefix="/api/alumni", tags=["alumni"])


@router.get("/search", response_model=AlumniSearchResponse)
async def search_alumni(
    search: str | None = None,
    batch: str | None = None,
    location: str | None = None,
    industry: str | None = None,
    company: str | None = None,
    graduation_year: int | None = Query(None, alias="graduationYear"),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    offset: int = Query(0, ge=0),
    db: AsyncSession = Depends(get_db),
):
    return await alumni_service.search(
        db,
        search=search,
        batch=batch,
        location=location,
        industry=industry,
        company=company,
        graduation_year=graduation_year,
        limit=limit,
        offset=offset,
    )


@router.get("/{user_id}", response_model=AlumniResponse)
async def get_public_profile(
    user_id: str,
    db: AsyncSession = Depends(get_db),
):
    return await alumni_service.public_profile(db, user_id)
