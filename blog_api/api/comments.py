"""Comment mutations."""

import strawberry

from blog_api.api.dependencies import check_write_access
from blog_api.api.types import Comment
from blog_api.schemas import CommentCreate, CommentUpdate, validate_input


@strawberry.type
class CommentMutation:
    @strawberry.mutation
    def create_comment(
        self,
        info: strawberry.Info,
        title: str,
        content: str,
        author_id: int,
        post_id: int,
        token: str | None = None,
    ) -> Comment:
        """Comment on a post."""
        check_write_access(info.context.db, token)
        comment_data = validate_input(
            CommentCreate, title=title, content=content, author_id=author_id, post_id=post_id
        )
        return info.context.blog_service.create_comment(comment_data)

    @strawberry.mutation
    def update_comment(
        self,
        info: strawberry.Info,
        id: int,
        title: str | None = None,
        content: str | None = None,
        token: str | None = None,
    ) -> Comment:
        """Update a comment's title and/or content."""
        check_write_access(info.context.db, token)
        comment_data = validate_input(CommentUpdate, title=title, content=content)
        return info.context.blog_service.update_comment(id, comment_data)

    @strawberry.mutation
    def delete_comment(
        self, info: strawberry.Info, id: int, token: str | None = None
    ) -> Comment:
        """Delete a comment and return what it held."""
        check_write_access(info.context.db, token)
        return info.context.blog_service.delete_comment(id)
