"""User schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class RoleRead(BaseModel):
    id: int
    name: str
    alias: str

    model_config = ConfigDict(from_attributes=True)


class UserRead(BaseModel):
    id: int
    username: str
    is_active: bool
    created_at: datetime | None
    last_login: datetime | None
    role: RoleRead

    model_config = ConfigDict(from_attributes=True)


class UserDeletionRequest(BaseModel):
    # Documents the request body; the route reads it leniently and never returns 422.
    username: str | None = Field(
        default=None, description="Username of the account to delete"
    )


class MessageResponse(BaseModel):
    message: str


class DeletionErrorResponse(MessageResponse):
    error: str
