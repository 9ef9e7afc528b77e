"""GraphQL resolvers."""

from typing import Optional

import strawberry

from ...models import CommentCreate, PostCreate, UserCreate
from ...repositories import CommentRepository, PostRepository, UserRepository
from .context import get_store
from .types import (
    CommentType,
    PostType,
    UserType,
    CreateCommentInput,
    CreatePostInput,
    CreateUserInput,
)


@strawberry.type
class Query:
    """GraphQL queries."""

    @strawberry.field
    def users(self, info: strawberry.Info, query: Optional[str] = None) -> list[UserType]:
        """List users, optionally filtered by name.

        Example:
        ```graphql
        query {
            users(query: "app") {
                name
                posts { title comments { body } }
            }
        }
        ```
        """
        users = UserRepository(get_store(info)).search(query)
        return [UserType.from_model(u) for u in users]

    @strawberry.field
    def posts(self, info: strawberry.Info, query: Optional[str] = None) -> list[PostType]:
        """List posts, optionally filtered by title or body."""
        posts = PostRepository(get_store(info)).search(query)
        return [PostType.from_model(p) for p in posts]

    @strawberry.field
    def comments(self, info: strawberry.Info, query: Optional[str] = None) -> list[CommentType]:
        """List comments, optionally filtered by body."""
        comments = CommentRepository(get_store(info)).search(query)
        return [CommentType.from_model(c) for c in comments]

    @strawberry.field
    def me(self, info: strawberry.Info, id: Optional[str] = None) -> Optional[UserType]:
        """Get user by ID."""
        user = UserRepository(get_store(info)).get_by_id(id)
        if not user:
            return None
        return UserType.from_model(user)

    @strawberry.field
    def post(self, info: strawberry.Info, id: Optional[str] = None) -> Optional[PostType]:
        """Get post by ID."""
        post = PostRepository(get_store(info)).get_by_id(id)
        if not post:
            return None
        return PostType.from_model(post)


@strawberry.type
class Mutation:
    """GraphQL mutations."""

    @strawberry.mutation
    def create_user(self, info: strawberry.Info, data: CreateUserInput) -> UserType:
        """Create a new user.

        Example:
        ```graphql
        mutation {
            createUser(data: {name: "plum", email: "plum@p.com", age: 31}) {
                id
                name
            }
        }
        ```
        """
        user = UserRepository(get_store(info)).create(
            UserCreate(name=data.name, email=data.email, age=data.age)
        )
        return UserType.from_model(user)

    @strawberry.mutation
    def create_post(self, info: strawberry.Info, data: CreatePostInput) -> PostType:
        """Create a new post for an existing user."""
        post = PostRepository(get_store(info)).create(
            PostCreate(
                title=data.title,
                body=data.body,
                published=data.published,
                author=data.author,
            )
        )
        return PostType.from_model(post)

    @strawberry.mutation
    def create_comment(self, info: strawberry.Info, data: CreateCommentInput) -> CommentType:
        """Create a new comment on an existing post."""
        comment = CommentRepository(get_store(info)).create(
            CommentCreate(user=data.user, post=data.post, body=data.body)
        )
        return CommentType.from_model(comment)
