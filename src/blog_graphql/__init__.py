"""Blog GraphQL - in-memory users, posts and comments over GraphQL."""

__version__ = "0.1.0"
