"""User Schemas — registration, login, and public user payloads.

Invariants:
    - UserResponse never carries the password
    - Registration fields are non-empty; username uniqueness is not checked here
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """Registration body."""
    name: str = Field(min_length=1, max_length=200)
    username: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=1, max_length=200)


class LoginRequest(BaseModel):
    username: str
    password: str


class UserResponse(BaseModel):
    """User response — public-facing user data."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    username: str
