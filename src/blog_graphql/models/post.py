"""Post record model."""

from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


class PostBase(BaseModel):
    """Base post attributes."""

    title: str
    body: str
    published: bool
    author: str  # User id


class PostCreate(PostBase):
    """Schema for creating a post."""

    pass


class Post(PostBase):
    """Stored post with its identifier."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid4()))
