"""Post queries and mutations."""

import strawberry

from blog_api.api.dependencies import check_write_access
from blog_api.api.types import (
    Post,
    PostCreateInput,
    PostDeleteInput,
    PostPayload,
    PostsPayload,
    PostUpdateInput,
)
from blog_api.schemas import PostCreate, PostUpdate, validate_input


@strawberry.type
class PostQuery:
    @strawberry.field
    def get_post(self, info: strawberry.Info, id: int) -> Post:
        """Get a post with its author and comments."""
        return info.context.blog_service.get_post(id)

    @strawberry.field
    def get_posts(self, info: strawberry.Info) -> PostsPayload:
        """Get all posts."""
        return PostsPayload(posts=info.context.blog_service.list_posts())


@strawberry.type
class PostMutation:
    @strawberry.mutation
    def create_post(self, info: strawberry.Info, data: PostCreateInput) -> PostPayload:
        """Create a post."""
        check_write_access(info.context.db, data.token)
        post_data = validate_input(
            PostCreate, title=data.title, content=data.content, author_id=data.author_id
        )
        post = info.context.blog_service.create_post(post_data)
        return PostPayload(success=True, post=post)

    @strawberry.mutation
    def update_post(self, info: strawberry.Info, data: PostUpdateInput) -> PostPayload:
        """Update a post's title and/or content."""
        check_write_access(info.context.db, data.token)
        post_data = validate_input(PostUpdate, title=data.title, content=data.content)
        post = info.context.blog_service.update_post(data.id, post_data)
        return PostPayload(success=True, post=post)

    @strawberry.mutation
    def delete_post(self, info: strawberry.Info, data: PostDeleteInput) -> PostPayload:
        """Delete a post and its comments."""
        check_write_access(info.context.db, data.token)
        info.context.blog_service.delete_post(data.id)
        return PostPayload(success=True)
