"""Domain errors raised by services and surfaced through the GraphQL layer.

Every error carries a stable ``code`` that the schema copies into the
``extensions`` of the GraphQL error. Messages are user-facing and are passed
through unchanged.

Sign-in mismatches and invalid profile tokens are not errors: they come back
as ``token: null`` and ``{id: null}`` result shapes.
"""


class BlogError(Exception):
    """Base exception for all blog API errors."""

    code = "BLOG_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(BlogError):
    """Input is missing a required field or has a malformed value."""

    code = "VALIDATION_ERROR"


class DuplicateEmailError(BlogError):
    """Sign-up attempted with an email that is already registered."""

    code = "DUPLICATE_EMAIL"

    def __init__(self, email: str):
        super().__init__(f"Email already registered: {email}")
        self.email = email


class NotFoundError(BlogError):
    """A referenced record does not exist."""

    code = "NOT_FOUND"

    def __init__(self, resource: str, resource_id: int):
        super().__init__(f"{resource} {resource_id} not found")
        self.resource = resource
        self.resource_id = resource_id


class AuthenticationError(BlogError):
    """A write required a valid token and did not get one."""

    code = "UNAUTHENTICATED"
