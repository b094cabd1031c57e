"""Pydantic request/response schemas."""

from alumni_api.schemas.alumni import (
    AlumniResponse,
    AlumniSearchResponse,
    PatchAlumniRequest,
    CompletenessResponse,
)
from alumni_api.schemas.auth import (
    SignupRequest,
    LoginRequest,
    TokenResponse,
    UserResponse,
    LoginResponse,
)
from alumni_api.schemas.feed import (
    AuthorResponse,
    PostResponse,
    PostListResponse,
    EventResponse,
    EventListResponse,
    JobResponse,
    JobListResponse,
)

__all__ = [
    "AlumniResponse",
    "AlumniSearchResponse",
    "PatchAlumniRequest",
    "CompletenessResponse",
    "SignupRequest",
    "LoginRequest",
    "TokenResponse",
    "UserResponse",
    "LoginResponse",
    "AuthorResponse",
    "PostResponse",
    "PostListResponse",
    "EventResponse",
    "EventListResponse",
    "JobResponse",
    "JobListResponse",
]
