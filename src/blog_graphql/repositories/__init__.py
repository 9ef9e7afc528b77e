"""Repository modules for store operations."""

from .user_repo import UserRepository
from .post_repo import PostRepository
from .comment_repo import CommentRepository

__all__ = [
    "UserRepository",
    "PostRepository",
    "CommentRepository",
]
