"""GraphQL schema and router."""

import logging

import strawberry
from graphql import GraphQLError
from strawberry.fastapi import GraphQLRouter
from strawberry.tools import merge_types
from strawberry.types import ExecutionContext

from blog_api.api.auth import AuthMutation
from blog_api.api.comments import CommentMutation
from blog_api.api.dependencies import get_context
from blog_api.api.posts import PostMutation, PostQuery
from blog_api.config import get_settings
from blog_api.errors import BlogError

logger = logging.getLogger(__name__)

settings = get_settings()

Query = merge_types("Query", (PostQuery,))
Mutation = merge_types("Mutation", (AuthMutation, PostMutation, CommentMutation))


class BlogSchema(strawberry.Schema):
    """Schema that tags domain errors with their code and logs every error."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        for error in errors:
            original = error.original_error
            if isinstance(original, BlogError):
                error.extensions = {**(error.extensions or {}), "code": original.code}
                logger.warning(f"{original.code}: {original.message}", extra={"path": error.path})
            elif original is None:
                logger.warning(f"GraphQL error: {error.message}")
            else:
                logger.error(f"Unhandled error: {error.message}", exc_info=original)


schema = BlogSchema(query=Query, mutation=Mutation)

graphql_router = GraphQLRouter(
    schema,
    context_getter=get_context,
    graphql_ide="graphiql" if settings.graphiql else None,
)
