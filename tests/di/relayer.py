"""Mock relayer providers for testing."""

from dishka import Scope, provide

from agora.adapter.relayer import MockCommentIndex
from agora.domain.repository import CommentIndex
from agora.util.di.infrastructure.relayer import RelayerProvider


class MockRelayerProvider(RelayerProvider):
    """Mock relayer provider using an in-memory comment index."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_comment_index(self) -> CommentIndex:
        """Provide in-memory comment index."""
        return MockCommentIndex()
