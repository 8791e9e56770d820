"""Domain services."""

from .authorization_service import AuthorizationService, Decision
from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .password_service import PasswordService
from .post_service import PostService
from .user_service import UserService
from .vote_service import VoteService

__all__ = [
    "AuthorizationService",
    "CommentService",
    "Decision",
    "JWTService",
    "PasswordService",
    "PostService",
    "Service",
    "UserService",
    "VoteService",
]
