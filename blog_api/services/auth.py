"""Authentication service for JWT and password handling."""

import logging
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext
from passlib.utils import consteq
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from blog_api.config import get_settings
from blog_api.errors import DuplicateEmailError
from blog_api.models.user import User

logger = logging.getLogger(__name__)

settings = get_settings()

# Unsalted SHA-1 hex digests. Existing users rows hold this format.
# TODO: add bcrypt ahead of hex_sha1 and rehash on sign-in via needs_update().
pwd_context = CryptContext(schemes=["hex_sha1"], deprecated="auto")

# users.id is a 32-bit Integer column
MAX_USER_ID = 2**31 - 1


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its digest in constant time."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def create_access_token(user: User, expires_delta: timedelta | None = None) -> str:
    """Create a JWT carrying the user's id, name and email."""
    now = datetime.now(UTC)
    to_encode = {
        "sub": str(user.id),
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "iat": now,
    }
    if expires_delta is None and settings.jwt_expiration_minutes is not None:
        expires_delta = timedelta(minutes=settings.jwt_expiration_minutes)
    if expires_delta is not None:
        to_encode["exp"] = now + expires_delta
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict | None:
    """Decode and validate a JWT token.

    Returns None for any bad signature, malformed token or expired token.
    """
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        logger.debug(f"Rejected token: {e}")
        return None
    return payload


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email."""
    return db.query(User).filter(User.email == email).first()


def get_user_by_id(db: Session, user_id: int) -> User | None:
    """Get a user by id."""
    return db.query(User).filter(User.id == user_id).first()


def find_user_by_email_and_digest(db: Session, email: str, digest: str) -> User | None:
    """Get the user whose email and stored digest both match."""
    user = get_user_by_email(db, email)
    if not user:
        return None
    if not pwd_context.identify(digest) or not _digests_equal(user.password, digest):
        return None
    return user


def _digests_equal(left: str, right: str) -> bool:
    return consteq(left.lower(), right.lower())


def authenticate_user(db: Session, email: str, password: str) -> User | None:
    """Authenticate a user by email and password."""
    user = get_user_by_email(db, email)
    if not user:
        logger.info(f"Sign-in failed for {email}")
        return None
    if not verify_password(password, user.password):
        logger.info(f"Sign-in failed for {email}")
        return None
    return user


def get_user_from_token(db: Session, token: str) -> User | None:
    """Resolve a token to the current user record, or None."""
    payload = decode_access_token(token)
    if payload is None:
        return None

    # Tokens issued before "sub" was added carry only "id"
    user_id = payload.get("sub", payload.get("id"))
    if user_id is None or isinstance(user_id, bool):
        return None
    try:
        user_id = int(user_id)
    except (TypeError, ValueError):
        return None
    if not 1 <= user_id <= MAX_USER_ID:
        return None

    return get_user_by_id(db, user_id)


def create_user(db: Session, email: str, password: str, name: str | None = None) -> User:
    """Create a new user.

    Raises DuplicateEmailError if the email is already registered.
    """
    if get_user_by_email(db, email):
        raise DuplicateEmailError(email)

    user = User(email=email, password=get_password_hash(password), name=name)
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        # Lost a race with a concurrent sign-up for the same email
        db.rollback()
        if get_user_by_email(db, email):
            raise DuplicateEmailError(email) from e
        raise
    db.refresh(user)
    logger.info(f"Created user {user.id} ({email})")
    return user
