"""Comment repository for store operations."""

import logging
from typing import Optional

from ..errors import ReferenceNotFoundError
from ..models.comment import Comment, CommentCreate
from ..store import Store
from .search import contains

logger = logging.getLogger("comment_repo")


class CommentRepository:
    """Repository for Comment records."""

    def __init__(self, store: Store):
        self.store = store

    def search(self, query: Optional[str] = None) -> list[Comment]:
        """List comments, filtered by body when a query is given."""
        comments = self.store.comments.scan()
        if not query:
            return comments
        return [c for c in comments if contains(c.body, query)]

    def list_by_post(self, post_id: str) -> list[Comment]:
        """Comments on a post, in store order."""
        return [c for c in self.store.comments.scan() if c.post == post_id]

    def list_by_user(self, user_id: str) -> list[Comment]:
        """Comments written by a user, in store order."""
        return [c for c in self.store.comments.scan() if c.user == user_id]

    def create(self, data: CommentCreate) -> Comment:
        """Create a new comment.

        Raises:
            ReferenceNotFoundError: ``data.user`` or ``data.post`` is unknown.
        """
        missing = []
        if not any(u.id == data.user for u in self.store.users.scan()):
            missing.append("user")
        if not any(p.id == data.post for p in self.store.posts.scan()):
            missing.append("post")
        if missing:
            logger.warning(f"Rejected comment: unknown {', '.join(missing)}")
            raise ReferenceNotFoundError(missing)

        comment = self.store.comments.append(Comment(**data.model_dump()))
        logger.info(f"Created comment by user {comment.user} on post {comment.post}")
        return comment
