"""IPFS infrastructure providers."""

from collections.abc import AsyncIterator

import httpx
from dishka import Scope, provide

from agora.adapter.ipfs import IpfsContentStore
from agora.config import IpfsSettings
from agora.domain.repository import ContentStore
from agora.util.di.base import ProviderBase


class IpfsProvider(ProviderBase):
    """IPFS component base."""

    __mock_component__ = "ipfs"


class ProdIpfsProvider(IpfsProvider):
    """Production IPFS provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_content_store(
        self, ipfs_settings: IpfsSettings
    ) -> AsyncIterator[ContentStore]:
        """Provide gateway-backed content store.

        Connection pool sized to the fetch concurrency of a tree build.
        """
        limits = httpx.Limits(max_connections=ipfs_settings.max_concurrency)
        async with httpx.AsyncClient(
            timeout=ipfs_settings.timeout_seconds, limits=limits
        ) as http_client:
            yield IpfsContentStore(
                http_client=http_client, gateway_url=ipfs_settings.gateway_url
            )
