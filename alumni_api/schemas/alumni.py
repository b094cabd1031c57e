from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AlumniResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    batch: Optional[str] = None
    graduation_year: Optional[int] = None
    gender: Optional[str] = None
    profile_picture: Optional[str] = None
    current_company: Optional[str] = None
    current_position: Optional[str] = None
    location: Optional[str] = None
    industry: Optional[str] = None
    employment_status: Optional[str] = None
    years_of_experience: Optional[int] = None
    bio: Optional[str] = None
    linkedin_url: Optional[str] = None
    expertise_areas: list[str] = []
    languages_known: list[str] = []
    certifications: list[str] = []
    achievements: list[str] = []
    awards: list[str] = []
    is_profile_public: bool = True
    profile_completion_score: int = 0
    created_at: Optional[datetime] = None

    @field_validator(
        "expertise_areas", "languages_known", "certifications", "achievements", "awards",
        mode="before",
    )
    @classmethod
    def _none_to_list(cls, value):
        return value if value is not None else []


class AlumniSearchResponse(BaseModel):
    alumni: list[AlumniResponse]


class PatchAlumniRequest(BaseModel):
    """Partial profile update. Only fields present in the request body are written."""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    batch: Optional[str] = None
    graduation_year: Optional[int] = None
    gender: Optional[str] = None
    profile_picture: Optional[str] = None
    current_company: Optional[str] = None
    current_position: Optional[str] = None
    location: Optional[str] = None
    industry: Optional[str] = None
    employment_status: Optional[str] = None
    years_of_experience: Optional[int] = Field(default=None, ge=0)
    bio: Optional[str] = None
    linkedin_url: Optional[str] = None
    expertise_areas: Optional[list[str]] = None
    languages_known: Optional[list[str]] = None
    certifications: Optional[list[str]] = None
    achievements: Optional[list[str]] = None
    awards: Optional[list[str]] = None
    is_profile_public: Optional[bool] = None


class CompletenessResponse(BaseModel):
    percentage: int
    missing_fields: list[str]
    next_step: Optional[str] = None
