"""Pydantic schemas for validating API input."""

from typing import TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from blog_api.errors import ValidationError
from blog_api.schemas.auth import UserLogin, UserRegister
from blog_api.schemas.post import CommentCreate, CommentUpdate, PostCreate, PostUpdate

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def validate_input(schema: type[SchemaT], **values) -> SchemaT:
    """Build ``schema`` from raw resolver arguments.

    Raises ValidationError naming the first offending field.
    """
    try:
        return schema(**values)
    except PydanticValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or schema.__name__
        raise ValidationError(f"Invalid {field}: {first['msg']}") from e


__all__ = [
    "validate_input",
    "UserRegister",
    "UserLogin",
    "PostCreate",
    "PostUpdate",
    "CommentCreate",
    "CommentUpdate",
]
