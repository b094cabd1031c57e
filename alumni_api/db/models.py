import uuid
from datetime import datetime, timezone
from sqlalchemy import (
    Column,
    String,
    Text,
    Boolean,
    Integer,
    DateTime,
    ForeignKey,
    Index,
    JSON,
    func,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship

from .session import Base

from alumni_api.core.constants import ROLE_ALUMNI


def uuid4_str():
    return str(uuid.uuid4())


# JSONB on Postgres, plain JSON elsewhere (SQLite in tests)
JSONList = JSON().with_variant(JSONB(), "postgresql")


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=uuid4_str)
    username = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    hashed_password = Column(String(255), nullable=False)
    is_admin = Column(Boolean, default=False, nullable=False)
    user_role = Column(String(50), default=ROLE_ALUMNI, nullable=False)
    account_blocked = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=lambda: datetime.now(timezone.utc))

    alumni = relationship("Alumni", back_populates="user", uselist=False)
    posts = relationship("Post", back_populates="author")


class Alumni(Base):
    """Alumni profile (one row per user)."""
    __tablename__ = "alumni"

    id = Column(String(36), primary_key=True, default=uuid4_str)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True)

    # Basic
    first_name = Column(String(255), nullable=True)
    last_name = Column(String(255), nullable=True)
    email = Column(String(255), nullable=True)
    phone = Column(String(50), nullable=True)

    # Personal
    batch = Column(String(20), nullable=True)
    graduation_year = Column(Integer, nullable=True)
    gender = Column(String(50), nullable=True)
    profile_picture = Column(String(1000), nullable=True)

    # Professional
    current_company = Column(String(255), nullable=True)
    current_position = Column(String(255), nullable=True)
    location = Column(String(255), nullable=True)
    industry = Column(String(255), nullable=True)
    employment_status = Column(String(50), nullable=True)
    years_of_experience = Column(Integer, nullable=True)

    # About
    bio = Column(Text, nullable=True)
    linkedin_url = Column(String(500), nullable=True)

    # Skills and achievements
    expertise_areas = Column(JSONList, nullable=True)
    languages_known = Column(JSONList, nullable=True)
    certifications = Column(JSONList, nullable=True)
    achievements = Column(JSONList, nullable=True)
    awards = Column(JSONList, nullable=True)

    is_active = Column(Boolean, default=True, nullable=False)
    is_profile_public = Column(Boolean, default=True, nullable=False)
    profile_completion_score = Column(Integer, default=0, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=lambda: datetime.now(timezone.utc))

    user = relationship("User", back_populates="alumni")

    __table_args__ = (Index("ix_alumni_batch", "batch"),)


class Post(Base):
    __tablename__ = "feed_posts"

    id = Column(String(36), primary_key=True, default=uuid4_str)
    author_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    content = Column(Text, nullable=False)
    image_url = Column(String(1000), nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    post_approved = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    author = relationship("User", back_populates="posts")

    __table_args__ = (Index("ix_feed_posts_author_id", "author_id"),)


class Event(Base):
    __tablename__ = "events"

    id = Column(String(36), primary_key=True, default=uuid4_str)
    title = Column(String(500), nullable=False)
    description = Column(Text, nullable=True)
    location = Column(String(255), nullable=True)
    event_date = Column(DateTime(timezone=True), nullable=True)
    cover_image = Column(String(1000), nullable=True)
    tags = Column(JSONList, nullable=True)
    organized_by = Column(String(36), ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    organizer = relationship("User")


class Job(Base):
    __tablename__ = "jobs"

    id = Column(String(36), primary_key=True, default=uuid4_str)
    title = Column(String(500), nullable=False)
    company = Column(String(255), nullable=False)
    location = Column(String(255), nullable=True)
    job_type = Column(String(50), nullable=True)
    industry = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    posted_by = Column(String(36), ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    poster = relationship("User")
