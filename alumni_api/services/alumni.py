"""Alumni directory search and public profiles."""

from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, or_

from alumni_api.db.models import Alumni
from alumni_api.schemas import AlumniResponse, AlumniSearchResponse


def _clean(value: str | None) -> str | None:
    v = (value or "").strip()
    return v or None


async def search_alumni(
    db: AsyncSession,
    *,
    search: str | None = None,
    batch: str | None = None,
    location: str | None = None,
    industry: str | None = None,
    company: str | None = None,
    graduation_year: int | None = None,
    limit: int,
    offset: int = 0,
) -> AlumniSearchResponse:
    """Active, public profiles matching every given filter, newest first."""
    stmt = select(Alumni).where(Alumni.is_active.is_(True), Alumni.is_profile_public.is_(True))

    search, batch, location = _clean(search), _clean(batch), _clean(location)
    industry, company = _clean(industry), _clean(company)

    if search:
        pattern = f"%{search}%"
        stmt = stmt.where(
            or_(
                Alumni.first_name.ilike(pattern),
                Alumni.last_name.ilike(pattern),
                Alumni.email.ilike(pattern),
            )
        )
    if batch:
        stmt = stmt.where(Alumni.batch == batch)
    if location:
        stmt = stmt.where(Alumni.location.ilike(f"%{location}%"))
    if industry:
        stmt = stmt.where(Alumni.industry.ilike(f"%{industry}%"))
    if company:
        stmt = stmt.where(Alumni.current_company.ilike(f"%{company}%"))
    if graduation_year is not None:
        stmt = stmt.where(Alumni.graduation_year == graduation_year)

    stmt = stmt.order_by(Alumni.created_at.desc(), Alumni.id).offset(offset).limit(limit)
    result = await db.execute(stmt)
    return AlumniSearchResponse(alumni=[AlumniResponse.model_validate(a) for a in result.scalars().all()])


async def get_public_profile(db: AsyncSession, user_id: str) -> AlumniResponse:
    result = await db.execute(select(Alumni).where(Alumni.user_id == user_id))
    alumni = result.scalar_one_or_none()
    if not alumni or not alumni.is_active or not alumni.is_profile_public:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")
    return AlumniResponse.model_validate(alumni)


class AlumniService:
    """Facade for alumni directory operations."""

    @staticmethod
    async def search(db: AsyncSession, **filters) -> AlumniSearchResponse:
        return await search_alumni(db, **filters)

    @staticmethod
    async def public_profile(db: AsyncSession, user_id: str) -> AlumniResponse:
        return await get_public_profile(db, user_id)


alumni_service = AlumniService()
