"""
Users module data models.

User is the stored row; UserView is what the API is allowed to show.
The split keeps password_hash and refresh_token out of every response.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base for models that cross the HTTP boundary (camelCase on the wire)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class User(BaseModel):
    """A row of the users table."""

    id: str
    username: str
    email: str
    fullname: str
    password_hash: str
    avatar_url: Optional[str] = None
    cover_image_url: Optional[str] = None
    refresh_token: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_view(self) -> "UserView":
        """Public projection of the user (no credentials)."""
        return UserView(
            id=self.id,
            username=self.username,
            email=self.email,
            fullname=self.fullname,
            avatar_url=self.avatar_url,
            cover_image_url=self.cover_image_url,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class UserView(ApiModel):
    """User as returned by the API."""

    id: str
    username: str
    email: str
    fullname: str
    avatar_url: Optional[str] = None
    cover_image_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UpdateAccountRequest(ApiModel):
    """Body of PATCH /update-account."""

    fullname: str = Field(default="")
    email: str = Field(default="")
