"""Authentication mutations."""

import strawberry

from blog_api.api.types import (
    AuthPayload,
    ProfileInput,
    ProfilePayload,
    User,
    UserCreateInput,
    UserSigninInput,
)
from blog_api.schemas import UserLogin, UserRegister, validate_input
from blog_api.services.auth import (
    authenticate_user,
    create_access_token,
    create_user,
    get_user_from_token,
)


@strawberry.type
class AuthMutation:
    @strawberry.mutation
    def signup_user(self, info: strawberry.Info, data: UserCreateInput) -> User:
        """Register a new user."""
        user_data = validate_input(
            UserRegister, email=data.email, password=data.password, name=data.name
        )
        return create_user(info.context.db, user_data.email, user_data.password, user_data.name)

    @strawberry.mutation
    def signin_user(self, info: strawberry.Info, data: UserSigninInput) -> AuthPayload:
        """Sign in with email and password.

        A mismatch returns null user and token without saying which part was wrong.
        """
        credentials = validate_input(UserLogin, email=data.email, password=data.password)
        user = authenticate_user(info.context.db, credentials.email, credentials.password)

        if not user:
            return AuthPayload(user=None, token=None)

        return AuthPayload(user=user, token=create_access_token(user))

    @strawberry.mutation
    def profile(self, info: strawberry.Info, data: ProfileInput) -> ProfilePayload:
        """Get the current user for a token, read fresh from the database."""
        user = get_user_from_token(info.context.db, data.token)

        if not user:
            return ProfilePayload()

        return ProfilePayload(id=user.id, name=user.name, email=user.email)
