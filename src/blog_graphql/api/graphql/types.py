"""GraphQL types."""

from typing import Optional

import strawberry

from ...models import Comment, Post, User
from ...repositories import CommentRepository, PostRepository, UserRepository
from .context import get_store


@strawberry.type(name="User")
class UserType:
    """User type with lazily resolved posts and comments."""
    id: strawberry.ID
    name: str
    email: str
    age: Optional[int] = None

    @classmethod
    def from_model(cls, user: User) -> "UserType":
        """Create from a stored user."""
        return cls(
            id=strawberry.ID(user.id),
            name=user.name,
            email=user.email,
            age=user.age,
        )

    @strawberry.field
    def posts(self, info: strawberry.Info) -> list["PostType"]:
        """Posts written by this user."""
        posts = PostRepository(get_store(info)).list_by_author(self.id)
        return [PostType.from_model(p) for p in posts]

    @strawberry.field
    def comments(self, info: strawberry.Info) -> list["CommentType"]:
        """Comments written by this user."""
        comments = CommentRepository(get_store(info)).list_by_user(self.id)
        return [CommentType.from_model(c) for c in comments]


@strawberry.type(name="Post")
class PostType:
    """Post type."""
    id: strawberry.ID
    title: str
    body: str
    published: bool
    author_id: strawberry.Private[str]

    @classmethod
    def from_model(cls, post: Post) -> "PostType":
        """Create from a stored post."""
        return cls(
            id=strawberry.ID(post.id),
            title=post.title,
            body=post.body,
            published=post.published,
            author_id=post.author,
        )

    @strawberry.field
    def author(self, info: strawberry.Info) -> UserType:
        """User who wrote the post."""
        user = UserRepository(get_store(info)).get_by_id(self.author_id)
        if not user:
            raise RuntimeError(f"Author {self.author_id} of post {self.id} not found")
        return UserType.from_model(user)

    @strawberry.field
    def comments(self, info: strawberry.Info) -> list["CommentType"]:
        """Comments on this post."""
        comments = CommentRepository(get_store(info)).list_by_post(self.id)
        return [CommentType.from_model(c) for c in comments]


@strawberry.type(name="Comment")
class CommentType:
    """Comment type."""
    body: str
    user_id: strawberry.Private[str]
    post_id: strawberry.Private[str]

    @classmethod
    def from_model(cls, comment: Comment) -> "CommentType":
        """Create from a stored comment."""
        return cls(body=comment.body, user_id=comment.user, post_id=comment.post)

    @strawberry.field
    def user(self, info: strawberry.Info) -> UserType:
        """User who wrote the comment."""
        user = UserRepository(get_store(info)).get_by_id(self.user_id)
        if not user:
            raise RuntimeError(f"User {self.user_id} of comment not found")
        return UserType.from_model(user)

    @strawberry.field
    def post(self, info: strawberry.Info) -> PostType:
        """Post the comment belongs to."""
        post = PostRepository(get_store(info)).get_by_id(self.post_id)
        if not post:
            raise RuntimeError(f"Post {self.post_id} of comment not found")
        return PostType.from_model(post)


@strawberry.input
class CreateUserInput:
    """Input for creating a user."""
    name: str
    email: str
    age: Optional[int] = None


@strawberry.input
class CreatePostInput:
    """Input for creating a post."""
    title: str
    body: str
    published: bool
    author: strawberry.ID


@strawberry.input
class CreateCommentInput:
    """Input for creating a comment."""
    user: strawberry.ID
    post: strawberry.ID
    body: str
