"""SQLAlchemy models."""

from blog_api.models.comment import Comment
from blog_api.models.post import Post
from blog_api.models.user import User

__all__ = [
    "User",
    "Post",
    "Comment",
]
