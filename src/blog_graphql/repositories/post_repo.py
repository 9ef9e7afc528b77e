"""Post repository for store operations."""

import logging
from typing import Optional

from ..errors import AuthorNotFoundError
from ..models.post import Post, PostCreate
from ..store import Store
from .search import contains

logger = logging.getLogger("post_repo")


class PostRepository:
    """Repository for Post records."""

    def __init__(self, store: Store):
        self.store = store

    def search(self, query: Optional[str] = None) -> list[Post]:
        """List posts, filtered by title or body when a query is given."""
        posts = self.store.posts.scan()
        if not query:
            return posts
        return [p for p in posts if contains(p.title, query) or contains(p.body, query)]

    def get_by_id(self, post_id: Optional[str]) -> Optional[Post]:
        """Get a post by ID."""
        if not post_id:
            return None
        return next((p for p in self.store.posts.scan() if p.id == post_id), None)

    def list_by_author(self, user_id: str) -> list[Post]:
        """Posts written by a user, in store order."""
        return [p for p in self.store.posts.scan() if p.author == user_id]

    def create(self, data: PostCreate) -> Post:
        """Create a new post.

        Raises:
            AuthorNotFoundError: ``data.author`` is not a known user.
        """
        if not any(u.id == data.author for u in self.store.users.scan()):
            logger.warning(f"Rejected post: author {data.author} not found")
            raise AuthorNotFoundError(data.author)

        post = self.store.posts.append(Post(**data.model_dump()))
        logger.info(f"Created post {post.id} by user {post.author}")
        return post
