"""Demo records loaded into the store at startup."""

from .models import Comment, Post, User

DEMO_USERS = (
    User(id="1", name="apple", email="apple@a.com", age=28),
    User(id="2", name="banana", email="banana@b.com"),
    User(id="3", name="kivi", email="kivi@k.com", age=28),
)

DEMO_POSTS = (
    Post(id="11", title="apple", body="xrexhcfjvghbjnk", published=True, author="1"),
    Post(id="12", title="banana", body="grrhcfjbhnk", published=True, author="1"),
    Post(id="13", title="kivi", body="trdfyguio", published=True, author="3"),
)

DEMO_COMMENTS = (
    Comment(user="2", post="11", body="comment on post 1 by user 2"),
    Comment(user="1", post="12", body="comment on post 2 by user 1"),
    Comment(user="3", post="12", body="comment on post 2 by user 3"),
    Comment(user="1", post="13", body="comment on post 3 by user 1"),
)
