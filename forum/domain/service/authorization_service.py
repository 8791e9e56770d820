"""Ownership-based authorization policy."""

from dataclasses import dataclass
from typing import Optional

import logfire

from forum.domain.error import NotAuthorizedError
from forum.domain.model import Comment, Post
from forum.domain.value import Action, UserId

from .base import Service


@dataclass(frozen=True)
class Decision:
    """Outcome of an authorization check."""

    allowed: bool
    reason: Optional[str] = None

    @classmethod
    def allow(cls) -> "Decision":
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: str = "forbidden") -> "Decision":
        return cls(allowed=False, reason=reason)


class AuthorizationService(Service):
    """Decides whether a caller may mutate a post or comment.

    Ownership is the only axis: there are no roles. Post owners may
    additionally delete (but not edit) comments on their own posts.
    """

    def authorize(
        self,
        action: Action,
        caller: UserId,
        post: Post,
        comment: Optional[Comment] = None,
    ) -> Decision:
        """Evaluate the policy for one action.

        Args:
            action: The mutation being attempted
            caller: Authenticated user ID
            post: The post being mutated, or the comment's parent post
            comment: The comment for comment actions

        Returns:
            Allow, or Deny with a reason
        """
        if action in (Action.EDIT_POST, Action.DELETE_POST):
            if caller == post.author_id:
                return Decision.allow()
            return Decision.deny("not the post author")

        if comment is None:
            raise ValueError(f"{action.value} requires a comment")

        if action is Action.EDIT_COMMENT:
            if caller == comment.author_id:
                return Decision.allow()
            return Decision.deny("not the comment author")

        if action is Action.DELETE_COMMENT:
            if caller == comment.author_id or caller == post.author_id:
                return Decision.allow()
            return Decision.deny("not the comment or post author")

        raise ValueError(f"Unknown action: {action}")

    def ensure_authorized(
        self,
        action: Action,
        caller: UserId,
        post: Post,
        comment: Optional[Comment] = None,
    ) -> None:
        """Like ``authorize`` but raises on denial.

        Raises:
            NotAuthorizedError: If the policy denies the action
        """
        decision = self.authorize(action, caller, post, comment)
        if not decision.allowed:
            resource_id = comment.id if comment is not None else post.id
            logfire.warn(
                "Authorization denied",
                action=action.value,
                user_id=str(caller),
                resource_id=str(resource_id),
                reason=decision.reason,
            )
            raise NotAuthorizedError(action.value, str(resource_id), str(caller))
