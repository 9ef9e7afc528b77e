"""User repository for store operations."""

import logging
from typing import Optional

from ..errors import DuplicateEmailError
from ..models.user import User, UserCreate
from ..store import Store
from .search import contains

logger = logging.getLogger("user_repo")


class UserRepository:
    """Repository for User records."""

    def __init__(self, store: Store):
        self.store = store

    def search(self, query: Optional[str] = None) -> list[User]:
        """List users, filtered by name when a query is given."""
        users = self.store.users.scan()
        if not query:
            return users
        return [u for u in users if contains(u.name, query)]

    def get_by_id(self, user_id: Optional[str]) -> Optional[User]:
        """Get a user by ID."""
        if not user_id:
            return None
        return next((u for u in self.store.users.scan() if u.id == user_id), None)

    def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by exact email."""
        return next((u for u in self.store.users.scan() if u.email == email), None)

    def create(self, data: UserCreate) -> User:
        """Create a new user.

        Raises:
            DuplicateEmailError: another user already has ``data.email``.
        """
        if self.get_by_email(data.email) is not None:
            logger.warning(f"Rejected user: email {data.email} already taken")
            raise DuplicateEmailError(data.email)

        user = self.store.users.append(User(**data.model_dump()))
        logger.info(f"Created user {user.id}")
        return user
