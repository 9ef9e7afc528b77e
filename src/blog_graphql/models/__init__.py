"""Pydantic models for blog records."""

from .user import User, UserCreate
from .post import Post, PostCreate
from .comment import Comment, CommentCreate

__all__ = [
    "User",
    "UserCreate",
    "Post",
    "PostCreate",
    "Comment",
    "CommentCreate",
]
