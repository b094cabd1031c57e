from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from alumni_api.core import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from alumni_api.dependencies import get_db
from alumni_api.schemas import PostListResponse, EventListResponse, JobListResponse
from alumni_api.services import feed_service

router = APIRouter(prefix="/api", tags=["feed"])


@router.get("/posts", response_model=PostListResponse)
async def list_posts(
    search: str | None = None,
    limit: int = Query(10, ge=1, le=MAX_PAGE_SIZE),
    offset: int = Query(0, ge=0),
    db: AsyncSession = Depends(get_db),
):
    return await feed_service.posts(db, search=search, limit=limit, offset=offset)


@router.get("/events", response_model=EventListResponse)
async def list_events(
    search: str | None = None,
    location: str | None = None,
    tag: str | None = None,
    include_inactive: bool = Query(False, alias="includeInactive"),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    offset: int = Query(0, ge=0),
    db: AsyncSession = Depends(get_db),
):
    return await feed_service.events(
        db,
        search=search,
        location=location,
        tag=tag,
        include_inactive=include_inactive,
        limit=limit,
        offset=offset,
    )


@router.get("/jobs", response_model=JobListResponse)
async def list_jobs(
    search: str | None = None,
    location: str | None = None,
    job_type: str | None = Query(None, alias="jobType"),
    industry: str | None = None,
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    offset: int = Query(0, ge=0),
    db: AsyncSession = Depends(get_db),
):
    return await feed_service.jobs(
        db,
        search=search,
        location=location,
        job_type=job_type,
        industry=industry,
        limit=limit,
        offset=offset,
    )
