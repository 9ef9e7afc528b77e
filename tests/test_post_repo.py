"""Tests for Post repository."""

import pytest

from blog_graphql.errors import AuthorNotFoundError
from blog_graphql.models import PostCreate
from blog_graphql.repositories import PostRepository


def test_search_matches_title_or_body(store):
    """Test searching posts by title and body."""
    repo = PostRepository(store)

    assert [p.id for p in repo.search("BANANA")] == ["12"]
    assert [p.id for p in repo.search("hcf")] == ["11", "12"]
    assert [p.id for p in repo.search("trdf")] == ["13"]
    assert repo.search("zzz") == []


def test_search_without_query_returns_all(store):
    """Test listing all posts."""
    assert [p.id for p in PostRepository(store).search(None)] == ["11", "12", "13"]


def test_list_by_author(store):
    """Test posts of a user in store order."""
    repo = PostRepository(store)

    assert [p.id for p in repo.list_by_author("1")] == ["11", "12"]
    assert repo.list_by_author("2") == []


def test_create_post(store):
    """Test creating a post."""
    repo = PostRepository(store)

    post = repo.create(
        PostCreate(title="plum", body="stone fruit", published=False, author="2")
    )

    assert post.author == "2"
    assert repo.get_by_id(post.id) == post
    assert [p.id for p in repo.list_by_author("2")] == [post.id]


def test_create_post_unknown_author(store):
    """Test that an unknown author is rejected without appending."""
    repo = PostRepository(store)

    with pytest.raises(AuthorNotFoundError) as exc_info:
        repo.create(PostCreate(title="t", body="b", published=True, author="99"))

    assert exc_info.value.extensions == {"code": "AUTHOR_NOT_FOUND", "author": "99"}
    assert len(store.posts) == 3
