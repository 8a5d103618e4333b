"""Authentication schemas."""

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, EmailStr, Field, field_validator


class UserRegister(BaseModel):
    """User registration request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=1, max_length=128)
    name: str | None = Field(None, max_length=255)


class UserLogin(BaseModel):
    """User login request.

    No length limits: any input that cannot match a user gets a null token.
    """

    email: str
    password: str

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        """Normalize the address the same way EmailStr does at sign-up."""
        try:
            return validate_email(value, check_deliverability=False).normalized
        except EmailNotValidError:
            return value
