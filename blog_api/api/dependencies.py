"""Request context and access checks shared by the GraphQL resolvers."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session
from strawberry.fastapi import BaseContext

from blog_api.config import get_settings
from blog_api.database import get_db
from blog_api.errors import AuthenticationError
from blog_api.services.auth import get_user_from_token
from blog_api.services.blog_service import BlogService


class Context(BaseContext):
    """Per-request GraphQL context holding the database session."""

    def __init__(self, db: Session):
        super().__init__()
        self.db = db

    @property
    def blog_service(self) -> BlogService:
        return BlogService(self.db)


def get_context(db: Annotated[Session, Depends(get_db)]) -> Context:
    """Build the GraphQL context for a request."""
    return Context(db)


def check_write_access(db: Session, token: str | None) -> None:
    """Reject a content mutation without a valid token when writes are gated.

    Only the token's validity is checked, not whether its user owns the
    resource being changed.
    """
    if not get_settings().require_token_for_writes:
        return
    if token is None or get_user_from_token(db, token) is None:
        raise AuthenticationError("Invalid authentication credentials")
