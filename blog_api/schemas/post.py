"""Post and comment schemas."""

from pydantic import BaseModel, Field


class PostCreate(BaseModel):
    """Create a new post."""

    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)
    author_id: int


class PostUpdate(BaseModel):
    """Update a post."""

    title: str | None = Field(None, min_length=1, max_length=255)
    content: str | None = Field(None, min_length=1)


class CommentCreate(BaseModel):
    """Create a comment on a post."""

    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)
    author_id: int
    post_id: int


class CommentUpdate(BaseModel):
    """Update a comment."""

    title: str | None = Field(None, min_length=1, max_length=255)
    content: str | None = Field(None, min_length=1)
