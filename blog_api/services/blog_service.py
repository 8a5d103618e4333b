"""Blog service for post and comment CRUD."""

import logging

from sqlalchemy.orm import Session, selectinload

from blog_api.errors import NotFoundError
from blog_api.models.comment import Comment
from blog_api.models.post import Post
from blog_api.models.user import User
from blog_api.schemas import CommentCreate, CommentUpdate, PostCreate, PostUpdate

logger = logging.getLogger(__name__)


class BlogService:
    """Service for post and comment operations.

    No ownership checks are made: any caller may update or delete any post
    or comment.
    """

    def __init__(self, db: Session):
        self.db = db

    # Posts

    def get_post(self, post_id: int) -> Post:
        """Get a post with its author and comments."""
        post = (
            self.db.query(Post)
            .options(
                selectinload(Post.author),
                selectinload(Post.comments).selectinload(Comment.author),
            )
            .filter(Post.id == post_id)
            .first()
        )
        if not post:
            raise NotFoundError("Post", post_id)
        return post

    def list_posts(self) -> list[Post]:
        """Get all posts, newest first."""
        return (
            self.db.query(Post)
            .options(selectinload(Post.author), selectinload(Post.comments))
            .order_by(Post.id.desc())
            .all()
        )

    def create_post(self, data: PostCreate) -> Post:
        """Create a post for an existing author."""
        self._require_user(data.author_id)

        post = Post(title=data.title, content=data.content, author_id=data.author_id)
        self.db.add(post)
        self.db.commit()
        self.db.refresh(post)

        logger.info(f"Created post {post.id} by user {post.author_id}")
        return post

    def update_post(self, post_id: int, data: PostUpdate) -> Post:
        """Update the title and/or content of a post."""
        post = self.get_post(post_id)

        for field, value in data.model_dump(exclude_unset=True, exclude_none=True).items():
            setattr(post, field, value)

        self.db.commit()
        self.db.refresh(post)

        logger.info(f"Updated post {post.id}")
        return post

    def delete_post(self, post_id: int) -> None:
        """Delete a post and its comments."""
        post = self.get_post(post_id)
        self.db.delete(post)
        self.db.commit()

        logger.info(f"Deleted post {post_id}")

    # Comments

    def get_comment(self, comment_id: int) -> Comment:
        """Get a comment."""
        comment = self.db.query(Comment).filter(Comment.id == comment_id).first()
        if not comment:
            raise NotFoundError("Comment", comment_id)
        return comment

    def create_comment(self, data: CommentCreate) -> Comment:
        """Create a comment on an existing post."""
        self._require_user(data.author_id)
        if not self.db.query(Post.id).filter(Post.id == data.post_id).first():
            raise NotFoundError("Post", data.post_id)

        comment = Comment(
            title=data.title,
            content=data.content,
            author_id=data.author_id,
            post_id=data.post_id,
        )
        self.db.add(comment)
        self.db.commit()
        self.db.refresh(comment)

        logger.info(f"Created comment {comment.id} on post {comment.post_id}")
        return comment

    def update_comment(self, comment_id: int, data: CommentUpdate) -> Comment:
        """Update the title and/or content of a comment."""
        comment = self.get_comment(comment_id)

        for field, value in data.model_dump(exclude_unset=True, exclude_none=True).items():
            setattr(comment, field, value)

        self.db.commit()
        self.db.refresh(comment)

        logger.info(f"Updated comment {comment.id}")
        return comment

    def delete_comment(self, comment_id: int) -> Comment:
        """Delete a comment.

        Returns the deleted instance; its column values stay loaded so callers
        can still echo them back.
        """
        comment = self.get_comment(comment_id)
        # Load relationships before the row is gone
        _ = comment.author, comment.post
        self.db.delete(comment)
        self.db.commit()

        logger.info(f"Deleted comment {comment_id}")
        return comment

    def _require_user(self, user_id: int) -> None:
        if not self.db.query(User.id).filter(User.id == user_id).first():
            raise NotFoundError("User", user_id)
