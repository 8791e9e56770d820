"""Post use cases."""

from .create_post import CreatePostRequest, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostResponse, DeletePostUseCase
from .get_post import GetPostRequest, GetPostUseCase
from .list_posts import ListPostsRequest, ListPostsResponse, ListPostsUseCase
from .post_view import AuthorInfo, CommentInfo, PostInfo, PostViewBuilder
from .update_post import UpdatePostRequest, UpdatePostUseCase

__all__ = [
    "AuthorInfo",
    "CommentInfo",
    "CreatePostRequest",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostResponse",
    "DeletePostUseCase",
    "GetPostRequest",
    "GetPostUseCase",
    "ListPostsRequest",
    "ListPostsResponse",
    "ListPostsUseCase",
    "PostInfo",
    "PostViewBuilder",
    "UpdatePostRequest",
    "UpdatePostUseCase",
]
