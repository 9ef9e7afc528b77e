"""User record model."""

from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


class UserBase(BaseModel):
    """Base user attributes."""

    name: str
    email: str
    age: Optional[int] = None


class UserCreate(UserBase):
    """Schema for creating a user."""

    pass


class User(UserBase):
    """Stored user with its identifier."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid4()))
