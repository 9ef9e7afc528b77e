"""In-memory record store."""

from typing import Generic, Iterable, TypeVar

from .models import Comment, Post, User
from .seed import DEMO_COMMENTS, DEMO_POSTS, DEMO_USERS

T = TypeVar("T")


class Collection(Generic[T]):
    """Append-only ordered sequence of records."""

    def __init__(self, records: Iterable[T] = ()):
        self._records: list[T] = list(records)

    def append(self, record: T) -> T:
        """Add a record at the end and return it."""
        self._records.append(record)
        return record

    def scan(self) -> list[T]:
        """Return all records in insertion order.

        The returned list is a snapshot, so appending to it does not touch
        the collection.
        """
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)


class Store:
    """Holds the users, posts and comments collections of one process."""

    def __init__(
        self,
        users: Iterable[User] = (),
        posts: Iterable[Post] = (),
        comments: Iterable[Comment] = (),
    ):
        self.users: Collection[User] = Collection(users)
        self.posts: Collection[Post] = Collection(posts)
        self.comments: Collection[Comment] = Collection(comments)

    @classmethod
    def seeded(cls) -> "Store":
        """Create a store loaded with the demo records."""
        return cls(users=DEMO_USERS, posts=DEMO_POSTS, comments=DEMO_COMMENTS)

    def counts(self) -> dict[str, int]:
        """Number of records per collection."""
        return {
            "users": len(self.users),
            "posts": len(self.posts),
            "comments": len(self.comments),
        }
