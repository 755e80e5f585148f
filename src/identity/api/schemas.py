"""Pydantic request/response schemas for the Identity API."""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- Auth Request Schemas ---


class SignUpRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [{"email": "jane.doe@example.com", "password": "s3cret!", "user_metadata": {"name": "Jane"}}]
        }
    }

    email: str = Field(..., max_length=254)
    password: str = Field(..., max_length=255)
    user_metadata: dict | None = None


class SignInRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"email": "jane.doe@example.com", "password": "s3cret!"}]}}

    email: str = Field(..., max_length=254)
    password: str = Field(..., max_length=255)


class UpdateUserRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"data": {"name": "Jane Smith"}}]}}

    data: dict


# --- Profile Request Schemas ---


class CreateProfileRequest(BaseModel):
    model_config = {
        "json_schema_extra": {"examples": [{"email": "jane.doe@example.com", "name": "Jane", "is_admin": False}]}
    }

    email: str = Field(..., max_length=254)
    name: str | None = Field(None, max_length=255)
    is_admin: bool = False
    avatar: str | None = Field(None, max_length=500)


class UpdateProfileRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"name": "Jane Smith"}]}}

    name: str | None = Field(None, max_length=255)
    avatar: str | None = Field(None, max_length=500)


# --- Response Schemas ---


class UserResponse(BaseModel):
    id: str
    email: str
    user_metadata: dict = {}

    @classmethod
    def from_account(cls, account) -> UserResponse:
        return cls(id=str(account.id), email=account.email, user_metadata=account.metadata)


class SessionResponse(BaseModel):
    access_token: str
    user: UserResponse


class ProfileResponse(BaseModel):
    id: str
    email: str
    name: str | None = None
    is_admin: bool = False
    avatar: str | None = None

    @classmethod
    def from_profile(cls, profile) -> ProfileResponse:
        return cls(
            id=str(profile.id),
            email=profile.email,
            name=profile.name,
            is_admin=bool(profile.is_admin),
            avatar=profile.avatar,
        )


class ProfileIdResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"user_id": "a1b2c3d4-e5f6-7890-abcd-ef1234567890"}]}}

    user_id: str


class StatusResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "ok"}]}}

    status: str = "ok"
