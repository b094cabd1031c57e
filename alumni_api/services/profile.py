"""Alumni profile (own profile, completeness, completion wizard) business logic."""

from dataclasses import dataclass
from typing import Any

from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from alumni_api.db.models import User, Alumni
from alumni_api.schemas import AlumniResponse, PatchAlumniRequest, CompletenessResponse


@dataclass(frozen=True)
class WizardStep:
    id: str
    title: str
    fields: tuple[str, ...]
    required: tuple[str, ...] = ()


WIZARD_STEPS: tuple[WizardStep, ...] = (
    WizardStep(
        "basic",
        "Basic Information",
        ("first_name", "last_name", "email", "phone"),
        required=("first_name", "last_name", "email", "phone"),
    ),
    WizardStep(
        "personal",
        "Personal Details",
        ("batch", "gender", "profile_picture"),
        required=("batch", "gender"),
    ),
    WizardStep(
        "professional",
        "Professional Information",
        ("current_company", "current_position", "location", "employment_status", "years_of_experience"),
    ),
    WizardStep("about", "About You", ("bio", "linkedin_url")),
    WizardStep("skills", "Skills & Expertise", ("expertise_areas", "languages_known", "certifications")),
    WizardStep("achievements", "Achievements & Awards", ("achievements", "awards")),
)

_STEPS_BY_ID = {step.id: step for step in WIZARD_STEPS}

# (field, weight): essential 2, important 1.5, professional 1, additional 0.5
COMPLETENESS_WEIGHTS: tuple[tuple[str, float], ...] = (
    ("first_name", 2),
    ("last_name", 2),
    ("email", 2),
    ("phone", 2),
    ("batch", 2),
    ("gender", 2),
    ("profile_picture", 1.5),
    ("bio", 1.5),
    ("current_company", 1.5),
    ("current_position", 1.5),
    ("location", 1.5),
    ("linkedin_url", 1),
    ("employment_status", 1),
    ("years_of_experience", 1),
    ("expertise_areas", 0.5),
    ("languages_known", 0.5),
    ("certifications", 0.5),
    ("achievements", 0.5),
)


def _is_filled(field: str, value: Any) -> bool:
    if value is None:
        return False
    if field == "years_of_experience":
        return isinstance(value, int) and value > 0
    if isinstance(value, (list, tuple)):
        return any(str(v).strip() for v in value)
    return str(value).strip() not in ("", "[]")


def missing_completeness_fields(alumni: Alumni) -> list[str]:
    return [f for f, _ in COMPLETENESS_WEIGHTS if not _is_filled(f, getattr(alumni, f, None))]


def completeness_percentage(alumni: Alumni) -> int:
    total = sum(w for _, w in COMPLETENESS_WEIGHTS)
    done = sum(w for f, w in COMPLETENESS_WEIGHTS if _is_filled(f, getattr(alumni, f, None)))
    return round(done / total * 100) if total > 0 else 0


def next_incomplete_step(alumni: Alumni) -> str | None:
    """First wizard step that still has a blank field, or None when every step is filled."""
    for step in WIZARD_STEPS:
        if any(not _is_filled(f, getattr(alumni, f, None)) for f in step.fields):
            return step.id
    return None


def _apply_updates(alumni: Alumni, updates: dict[str, Any]) -> None:
    for field, value in updates.items():
        setattr(alumni, field, value)
    alumni.profile_completion_score = completeness_percentage(alumni)


async def _get_own_profile(db: AsyncSession, user: User) -> Alumni:
    result = await db.execute(select(Alumni).where(Alumni.user_id == user.id))
    alumni = result.scalar_one_or_none()
    if not alumni:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")
    return alumni


async def get_my_profile(db: AsyncSession, user: User) -> AlumniResponse:
    return AlumniResponse.model_validate(await _get_own_profile(db, user))


async def patch_my_profile(db: AsyncSession, user: User, body: PatchAlumniRequest) -> AlumniResponse:
    alumni = await _get_own_profile(db, user)
    _apply_updates(alumni, body.model_dump(exclude_unset=True))
    await db.flush()
    await db.refresh(alumni)
    return AlumniResponse.model_validate(alumni)


async def get_completeness(db: AsyncSession, user: User) -> CompletenessResponse:
    alumni = await _get_own_profile(db, user)
    return CompletenessResponse(
        percentage=completeness_percentage(alumni),
        missing_fields=missing_completeness_fields(alumni),
        next_step=next_incomplete_step(alumni),
    )


async def save_wizard_step(
    db: AsyncSession, user: User, step_id: str, body: PatchAlumniRequest
) -> AlumniResponse:
    """Apply one wizard step. Fields outside the step are ignored; required fields must end up filled."""
    step = _STEPS_BY_ID.get(step_id)
    if not step:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Unknown wizard step")
    alumni = await _get_own_profile(db, user)
    updates = {k: v for k, v in body.model_dump(exclude_unset=True).items() if k in step.fields}
    missing = [
        f for f in step.required
        if not _is_filled(f, updates[f] if f in updates else getattr(alumni, f, None))
    ]
    if missing:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Missing required fields: {', '.join(missing)}",
        )
    _apply_updates(alumni, updates)
    await db.flush()
    await db.refresh(alumni)
    return AlumniResponse.model_validate(alumni)


class ProfileService:
    """Facade for own-profile operations."""

    @staticmethod
    async def get_me(db: AsyncSession, user: User) -> AlumniResponse:
        return await get_my_profile(db, user)

    @staticmethod
    async def patch_me(db: AsyncSession, user: User, body: PatchAlumniRequest) -> AlumniResponse:
        return await patch_my_profile(db, user, body)

    @staticmethod
    async def completeness(db: AsyncSession, user: User) -> CompletenessResponse:
        return await get_completeness(db, user)

    @staticmethod
    async def wizard_step(
        db: AsyncSession, user: User, step_id: str, body: PatchAlumniRequest
    ) -> AlumniResponse:
        return await save_wizard_step(db, user, step_id, body)


profile_service = ProfileService()
