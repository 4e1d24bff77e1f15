"""Application layer DI providers."""

from dishka import Scope, provide

from agora.application.usecase.comment import (
    GetCommentsUseCase,
    GetRevisionHistoryUseCase,
)
from agora.domain.repository import ContentStore
from agora.domain.service import (
    AnonymizerIndex,
    CommentService,
    CommentTreeBuilder,
    PermissionService,
    RevisionChainResolver,
)
from agora.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self,
        comment_service: CommentService,
        tree_builder: CommentTreeBuilder,
        anonymizer_index: AnonymizerIndex,
        permission_service: PermissionService,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service,
            tree_builder=tree_builder,
            anonymizer_index=anonymizer_index,
            permission_service=permission_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_revision_history_use_case(
        self,
        comment_service: CommentService,
        revision_chain_resolver: RevisionChainResolver,
        content_store: ContentStore,
    ) -> GetRevisionHistoryUseCase:
        """Provide get revision history use case."""
        return GetRevisionHistoryUseCase(
            comment_service=comment_service,
            revision_chain_resolver=revision_chain_resolver,
            content_store=content_store,
        )
