"""Domain layer DI providers."""

from dishka import Scope, provide

from forum.config import AuthSettings
from forum.domain.repository import (
    CommentRepository,
    PostRepository,
    UserRepository,
    VoteRepository,
)
from forum.domain.service import (
    AuthorizationService,
    CommentService,
    JWTService,
    PasswordService,
    PostService,
    UserService,
    VoteService,
)
from forum.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Stateless services (token, password, policy) live for the whole app.
    Services holding repositories are REQUEST-scoped to align with the
    repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide(scope=Scope.APP)
    def get_password_service(self, auth_settings: AuthSettings) -> PasswordService:
        """Provide password hashing service."""
        return PasswordService(auth_settings=auth_settings)

    @provide(scope=Scope.APP)
    def get_authorization_service(self) -> AuthorizationService:
        """Provide ownership policy."""
        return AuthorizationService()

    @provide
    def get_user_service(
        self, user_repository: UserRepository, password_service: PasswordService
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository, password_service=password_service
        )

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        vote_repository: VoteRepository,
        authorization_service: AuthorizationService,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository,
            comment_repository=comment_repository,
            vote_repository=vote_repository,
            authorization_service=authorization_service,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        vote_repository: VoteRepository,
        post_service: PostService,
        authorization_service: AuthorizationService,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            vote_repository=vote_repository,
            post_service=post_service,
            authorization_service=authorization_service,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        post_service: PostService,
        comment_service: CommentService,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            post_service=post_service,
            comment_service=comment_service,
        )
