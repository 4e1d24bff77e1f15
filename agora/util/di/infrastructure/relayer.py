"""Relayer infrastructure providers."""

from collections.abc import AsyncIterator

import httpx
from dishka import Scope, provide

from agora.adapter.relayer import RelayerCommentIndex
from agora.config import RelayerSettings
from agora.domain.repository import CommentIndex
from agora.util.di.base import ProviderBase


class RelayerProvider(ProviderBase):
    """Relayer component base."""

    __mock_component__ = "relayer"


class ProdRelayerProvider(RelayerProvider):
    """Production relayer provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_comment_index(
        self, relayer_settings: RelayerSettings
    ) -> AsyncIterator[CommentIndex]:
        """Provide relayer-backed comment index.

        The HTTP client lives as long as the container and is closed with it.
        """
        async with httpx.AsyncClient(
            timeout=relayer_settings.timeout_seconds
        ) as http_client:
            yield RelayerCommentIndex(
                http_client=http_client,
                base_url=relayer_settings.base_url,
                page_size=relayer_settings.page_size,
            )
