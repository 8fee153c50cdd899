# jobagent/schemas/auth.py
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class SignUpIn(BaseModel):
    email: EmailStr
    name: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=1, max_length=256)

    # Additional identity fields ride along and are filtered by the auth config.
    model_config = ConfigDict(extra="allow")


class SignInIn(BaseModel):
    email: EmailStr
    password: str


class UserOut(BaseModel):
    id: int
    email: str
    name: str
    email_verified: bool
    image: str | None = None
    role: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class SessionOut(BaseModel):
    id: int
    user_id: int
    expires_at: datetime


class SessionResponse(BaseModel):
    user: UserOut
    session: SessionOut


class SuccessOut(BaseModel):
    success: bool = True
