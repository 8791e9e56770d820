"""Application layer DI providers."""

from dishka import Scope, provide

from forum.application.usecase.auth import (
    GetCurrentUserUseCase,
    LogInUseCase,
    RefreshTokenUseCase,
    SignUpUseCase,
    UpdateProfileUseCase,
)
from forum.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    UpdateCommentUseCase,
)
from forum.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    PostViewBuilder,
    UpdatePostUseCase,
)
from forum.application.usecase.vote import ToggleVoteUseCase
from forum.domain.service import (
    CommentService,
    JWTService,
    PostService,
    UserService,
    VoteService,
)
from forum.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_sign_up_use_case(self, user_service: UserService) -> SignUpUseCase:
        """Provide sign-up use case."""
        return SignUpUseCase(user_service=user_service)

    @provide
    def get_log_in_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> LogInUseCase:
        """Provide log-in use case."""
        return LogInUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide
    def get_refresh_token_use_case(self, jwt_service: JWTService) -> RefreshTokenUseCase:
        """Provide refresh token use case."""
        return RefreshTokenUseCase(jwt_service=jwt_service)

    @provide
    def get_current_user_use_case(
        self, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(user_service=user_service)

    @provide
    def get_update_profile_use_case(
        self, user_service: UserService
    ) -> UpdateProfileUseCase:
        """Provide update profile use case."""
        return UpdateProfileUseCase(user_service=user_service)

    # Read models
    @provide
    def get_post_view_builder(
        self,
        user_service: UserService,
        comment_service: CommentService,
        vote_service: VoteService,
    ) -> PostViewBuilder:
        """Provide post/comment read model builder."""
        return PostViewBuilder(
            user_service=user_service,
            comment_service=comment_service,
            vote_service=vote_service,
        )

    # Post use cases
    @provide
    def get_create_post_use_case(
        self, post_service: PostService, views: PostViewBuilder
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service, views=views)

    @provide
    def get_get_post_use_case(
        self, post_service: PostService, views: PostViewBuilder
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service, views=views)

    @provide
    def get_list_posts_use_case(
        self, post_service: PostService, views: PostViewBuilder
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service, views=views)

    @provide
    def get_update_post_use_case(
        self, post_service: PostService, views: PostViewBuilder
    ) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(post_service=post_service, views=views)

    @provide
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self, comment_service: CommentService, views: PostViewBuilder
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service, views=views)

    @provide
    def get_update_comment_use_case(
        self, comment_service: CommentService, views: PostViewBuilder
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_service=comment_service, views=views)

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Vote use cases
    @provide
    def get_toggle_vote_use_case(self, vote_service: VoteService) -> ToggleVoteUseCase:
        """Provide toggle vote use case."""
        return ToggleVoteUseCase(vote_service=vote_service)
