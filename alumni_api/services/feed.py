"""Posts, events and jobs listings (the collections behind global search)."""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, or_, cast, String
from sqlalchemy.orm import selectinload

from alumni_api.db.models import Post, Event, Job
from alumni_api.schemas import (
    PostResponse,
    PostListResponse,
    EventResponse,
    EventListResponse,
    JobResponse,
    JobListResponse,
)


def _clean(value: str | None) -> str | None:
    v = (value or "").strip()
    return v or None


async def list_posts(
    db: AsyncSession, *, search: str | None = None, limit: int, offset: int = 0
) -> PostListResponse:
    """Active, approved posts, newest first, with their author."""
    stmt = (
        select(Post)
        .options(selectinload(Post.author))
        .where(Post.is_active.is_(True), Post.post_approved.is_(True))
    )
    search = _clean(search)
    if search:
        stmt = stmt.where(Post.content.ilike(f"%{search}%"))
    stmt = stmt.order_by(Post.created_at.desc(), Post.id).offset(offset).limit(limit)
    result = await db.execute(stmt)
    return PostListResponse(posts=[PostResponse.model_validate(p) for p in result.scalars().all()])


async def list_events(
    db: AsyncSession,
    *,
    search: str | None = None,
    location: str | None = None,
    tag: str | None = None,
    include_inactive: bool = False,
    limit: int,
    offset: int = 0,
) -> EventListResponse:
    stmt = select(Event)
    if not include_inactive:
        stmt = stmt.where(Event.is_active.is_(True))
    search, location, tag = _clean(search), _clean(location), _clean(tag)
    if location:
        stmt = stmt.where(Event.location.ilike(f"%{location}%"))
    if search:
        pattern = f"%{search}%"
        stmt = stmt.where(or_(Event.title.ilike(pattern), Event.description.ilike(pattern)))
    if tag:
        # tags is a JSON array; match the quoted element in its text form
        stmt = stmt.where(cast(Event.tags, String).like(f'%"{tag}"%'))
    stmt = stmt.order_by(Event.event_date.asc(), Event.id).offset(offset).limit(limit)
    result = await db.execute(stmt)
    return EventListResponse(events=[EventResponse.model_validate(e) for e in result.scalars().all()])


async def list_jobs(
    db: AsyncSession,
    *,
    search: str | None = None,
    location: str | None = None,
    job_type: str | None = None,
    industry: str | None = None,
    limit: int,
    offset: int = 0,
) -> JobListResponse:
    stmt = select(Job).where(Job.is_active.is_(True))
    search, location = _clean(search), _clean(location)
    job_type, industry = _clean(job_type), _clean(industry)
    if location:
        stmt = stmt.where(Job.location.ilike(f"%{location}%"))
    if job_type:
        stmt = stmt.where(Job.job_type == job_type)
    if industry:
        stmt = stmt.where(Job.industry.ilike(f"%{industry}%"))
    if search:
        pattern = f"%{search}%"
        stmt = stmt.where(
            or_(Job.title.ilike(pattern), Job.company.ilike(pattern), Job.description.ilike(pattern))
        )
    stmt = stmt.order_by(Job.created_at.desc(), Job.id).offset(offset).limit(limit)
    result = await db.execute(stmt)
    return JobListResponse(jobs=[JobResponse.model_validate(j) for j in result.scalars().all()])


class FeedService:
    """Facade for the post, event and job listings."""

    @staticmethod
    async def posts(db: AsyncSession, **kwargs) -> PostListResponse:
        return await list_posts(db, **kwargs)

    @staticmethod
    async def events(db: AsyncSession, **kwargs) -> EventListResponse:
        return await list_events(db, **kwargs)

    @staticmethod
    async def jobs(db: AsyncSession, **kwargs) -> JobListResponse:
        return await list_jobs(db, **kwargs)


feed_service = FeedService()
