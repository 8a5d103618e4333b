"""User model."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from blog_api.database import Base
from blog_api.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """User model for authentication and authorship."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    name = Column(String(255), nullable=True)
    # Unsalted SHA-1 hex digest, never the plaintext
    password = Column(String(255), nullable=False)

    # Relationships
    posts = relationship("Post", back_populates="author")
    comments = relationship("Comment", back_populates="author")
