"""Comment record model.

Comments have no identifier of their own; they are addressed only through
the user and post they reference.
"""

from pydantic import BaseModel, ConfigDict


class CommentCreate(BaseModel):
    """Schema for creating a comment."""

    user: str  # User id
    post: str  # Post id
    body: str


class Comment(CommentCreate):
    """Stored comment."""

    model_config = ConfigDict(frozen=True)
