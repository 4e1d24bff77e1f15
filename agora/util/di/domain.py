"""Domain layer DI providers."""

from dishka import Scope, provide

from agora.config import IpfsSettings
from agora.domain.repository import CommentIndex, ContentStore
from agora.domain.service import (
    AnonymizerIndex,
    CommentService,
    CommentTreeBuilder,
    PermissionService,
    RevisionChainResolver,
)
from agora.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped; the stateless transforms are cheap
    to build and keep nothing between requests.
    """

    scope = Scope.REQUEST

    @provide
    def get_comment_service(
        self,
        comment_index: CommentIndex,
        content_store: ContentStore,
        ipfs_settings: IpfsSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_index=comment_index,
            content_store=content_store,
            max_concurrency=ipfs_settings.max_concurrency,
        )

    @provide
    def get_comment_tree_builder(self) -> CommentTreeBuilder:
        """Provide comment tree builder."""
        return CommentTreeBuilder()

    @provide
    def get_anonymizer_index(self) -> AnonymizerIndex:
        """Provide anonymizer index."""
        return AnonymizerIndex()

    @provide
    def get_revision_chain_resolver(self) -> RevisionChainResolver:
        """Provide revision chain resolver."""
        return RevisionChainResolver()

    @provide
    def get_permission_service(self) -> PermissionService:
        """Provide permission service."""
        return PermissionService()
