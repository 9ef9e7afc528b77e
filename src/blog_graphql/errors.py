"""Client-input errors raised by mutations.

Each error carries an ``extensions`` dict. graphql-core copies it onto the
GraphQL error it builds around the exception, so clients receive a
machine-readable ``code`` next to the message.
"""

from typing import Optional


class BlogError(Exception):
    """Base class for errors caused by bad client input."""

    code = "BAD_USER_INPUT"

    def __init__(self, message: str, extensions: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.extensions = {"code": self.code, **(extensions or {})}


class DuplicateEmailError(BlogError):
    """A user with the same email already exists."""

    code = "DUPLICATE_EMAIL"

    def __init__(self, email: str):
        super().__init__(f"Email {email} is already taken", {"email": email})
        self.email = email


class AuthorNotFoundError(BlogError):
    """The author of a new post does not exist."""

    code = "AUTHOR_NOT_FOUND"

    def __init__(self, author_id: str):
        super().__init__(f"User {author_id} does not exist", {"author": author_id})
        self.author_id = author_id


class ReferenceNotFoundError(BlogError):
    """The user or post referenced by a new comment does not exist."""

    code = "REFERENCE_NOT_FOUND"

    def __init__(self, missing: list[str]):
        super().__init__(
            f"Comment references unknown {' and '.join(missing)}",
            {"missing": list(missing)},
        )
        self.missing = list(missing)
