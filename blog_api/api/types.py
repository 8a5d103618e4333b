"""GraphQL object and input types."""

from datetime import datetime

import strawberry


@strawberry.type
class User:
    """A registered user. The password digest is never exposed."""

    id: int
    name: str | None
    email: str


@strawberry.type
class Post:
    id: int
    title: str
    content: str
    author_id: int
    author: User
    comments: list["Comment"]
    created_at: datetime
    updated_at: datetime


@strawberry.type
class Comment:
    id: int
    title: str
    content: str
    author_id: int
    post_id: int
    author: User
    post: Post
    created_at: datetime
    updated_at: datetime


@strawberry.type
class AuthPayload:
    """Sign-in result. Both fields are null when the credentials do not match."""

    token: str | None = None
    user: User | None = None


@strawberry.type
class ProfilePayload:
    """Current user for a token. All fields are null when the token is not valid."""

    id: int | None = None
    name: str | None = None
    email: str | None = None


@strawberry.type
class PostsPayload:
    posts: list[Post]


@strawberry.type
class PostPayload:
    success: bool
    post: Post | None = None


@strawberry.input
class UserCreateInput:
    email: str
    password: str
    name: str | None = None


@strawberry.input
class UserSigninInput:
    email: str
    password: str


@strawberry.input
class ProfileInput:
    token: str


@strawberry.input
class PostCreateInput:
    title: str
    content: str
    author_id: int
    token: str | None = None


@strawberry.input
class PostUpdateInput:
    id: int
    title: str | None = None
    content: str | None = None
    token: str | None = None


@strawberry.input
class PostDeleteInput:
    id: int
    token: str | None = None
