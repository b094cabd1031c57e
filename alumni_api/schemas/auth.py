import re

from pydantic import BaseModel, EmailStr, field_validator

from alumni_api.schemas.alumni import AlumniResponse


class SignupRequest(BaseModel):
    email: EmailStr
    password: str
    username: str
    first_name: str | None = None
    last_name: str | None = None
    batch: str | None = None

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        if len(value) < 8:
            raise ValueError("Password must be at least 8 characters")
        if len(value.encode("utf-8")) > 72:
            raise ValueError("Password is too long")
        if not re.search(r"[A-Za-z]", value) or not re.search(r"\d", value):
            raise ValueError("Password must include a letter and a number")
        return value

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str) -> str:
        trimmed = (value or "").strip()
        if not trimmed:
            raise ValueError("Username is required")
        return trimmed


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"


class UserResponse(BaseModel):
    id: str
    username: str
    email: str
    is_admin: bool
    user_role: str
    account_blocked: bool = False


class LoginResponse(TokenResponse):
    user: UserResponse
    alumni: AlumniResponse | None = None
