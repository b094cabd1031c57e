"""Posts, events and jobs list payloads."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class AuthorResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    email: str


class PostResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    author_id: str
    content: str
    image_url: Optional[str] = None
    created_at: Optional[datetime] = None
    author: Optional[AuthorResponse] = None


class PostListResponse(BaseModel):
    posts: list[PostResponse]


class EventResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: Optional[str] = None
    location: Optional[str] = None
    event_date: Optional[datetime] = None
    cover_image: Optional[str] = None
    tags: list[str] = []
    organized_by: Optional[str] = None
    is_active: bool = True

    @field_validator("tags", mode="before")
    @classmethod
    def _none_to_list(cls, value):
        return value if value is not None else []


class EventListResponse(BaseModel):
    events: list[EventResponse]


class JobResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    company: str
    location: Optional[str] = None
    job_type: Optional[str] = None
    industry: Optional[str] = None
    description: Optional[str] = None
    posted_by: Optional[str] = None
    created_at: Optional[datetime] = None


class JobListResponse(BaseModel):
    jobs: list[JobResponse]
