"""Domain layer DI providers."""

from dishka import Scope, provide

from eventtalk.domain.repository import (
    CommentRepository,
    EventRepository,
    UserRepository,
)
from eventtalk.domain.service import CommentService
from eventtalk.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        user_repository: UserRepository,
        event_repository: EventRepository,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            user_repository=user_repository,
            event_repository=event_repository,
        )
