"""Tests for GraphQL mutations."""

import pytest

CREATE_USER = """
mutation CreateUser($data: CreateUserInput!) {
    createUser(data: $data) { id name email age }
}
"""

CREATE_POST = """
mutation CreatePost($data: CreatePostInput!) {
    createPost(data: $data) { id title author { name } comments { body } }
}
"""

CREATE_COMMENT = """
mutation CreateComment($data: CreateCommentInput!) {
    createComment(data: $data) { body user { id } post { id } }
}
"""


@pytest.mark.asyncio
async def test_create_user_round_trip(execute, store):
    """Test that a created user is listed with empty relations."""
    result = await execute(CREATE_USER, {"data": {"name": "x", "email": "x@x.com"}})

    assert result.errors is None
    created = result.data["createUser"]
    assert created["age"] is None

    result = await execute("{ users { id email posts { id } comments { body } } }")

    users = {u["email"]: u for u in result.data["users"]}
    assert users["x@x.com"] == {
        "id": created["id"],
        "email": "x@x.com",
        "posts": [],
        "comments": [],
    }
    assert len(store.users) == 4


@pytest.mark.asyncio
async def test_create_user_duplicate_email(execute, store):
    """Test that a taken email surfaces as a GraphQL error."""
    result = await execute(CREATE_USER, {"data": {"name": "a", "email": "kivi@k.com"}})

    assert result.data is None
    assert len(result.errors) == 1
    error = result.errors[0]
    assert error.path == ["createUser"]
    assert error.extensions["code"] == "DUPLICATE_EMAIL"
    assert len(store.users) == 3


@pytest.mark.asyncio
async def test_create_post(execute, store):
    """Test creating a post for a seeded user."""
    result = await execute(
        CREATE_POST,
        {"data": {"title": "plum", "body": "pit", "published": False, "author": "2"}},
    )

    assert result.errors is None
    assert result.data["createPost"]["author"] == {"name": "banana"}
    assert result.data["createPost"]["comments"] == []
    assert store.posts.scan()[-1].id == result.data["createPost"]["id"]


@pytest.mark.asyncio
async def test_create_post_unknown_author(execute, store):
    """Test that an unknown author surfaces as a GraphQL error."""
    result = await execute(
        CREATE_POST,
        {"data": {"title": "t", "body": "b", "published": True, "author": "77"}},
    )

    assert result.data is None
    assert result.errors[0].extensions == {"code": "AUTHOR_NOT_FOUND", "author": "77"}
    assert len(store.posts) == 3


@pytest.mark.asyncio
async def test_create_comment(execute, store):
    """Test commenting on a seeded post."""
    result = await execute(
        CREATE_COMMENT, {"data": {"user": "3", "post": "11", "body": "tasty"}}
    )

    assert result.errors is None
    assert result.data["createComment"] == {
        "body": "tasty",
        "user": {"id": "3"},
        "post": {"id": "11"},
    }

    result = await execute('{ post(id: "11") { comments { body } } }')
    assert [c["body"] for c in result.data["post"]["comments"]] == [
        "comment on post 1 by user 2",
        "tasty",
    ]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "user, post, missing",
    [
        ("404", "11", ["user"]),
        ("1", "404", ["post"]),
        ("404", "405", ["user", "post"]),
    ],
)
async def test_create_comment_unknown_reference(execute, store, user, post, missing):
    """Test that unresolved references surface as a GraphQL error."""
    result = await execute(
        CREATE_COMMENT, {"data": {"user": user, "post": post, "body": "x"}}
    )

    assert result.data is None
    assert result.errors[0].extensions == {
        "code": "REFERENCE_NOT_FOUND",
        "missing": missing,
    }
    assert len(store.comments) == 4
