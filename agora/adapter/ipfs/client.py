"""IPFS content store client.

Comment payloads are JSON documents ``{"version", "body", "createdAt"}``
served by a gateway at ``GET /ipfs/{cid}``.
"""

import httpx
import logfire

from agora.domain.error import ContentResolutionError
from agora.domain.model import CommentContent
from agora.domain.repository import ContentStore
from agora.domain.value import ContentId


class IpfsContentStore(ContentStore):
    """Content store backed by an IPFS HTTP gateway."""

    def __init__(self, http_client: httpx.AsyncClient, gateway_url: str) -> None:
        """Initialize gateway client.

        Args:
            http_client: Shared HTTP client (timeouts are configured on it)
            gateway_url: Gateway base URL
        """
        self.http_client = http_client
        self.gateway_url = gateway_url.rstrip("/")

    async def fetch_content(self, cid: ContentId) -> CommentContent:
        """Fetch and parse one payload.

        Raises:
            ContentResolutionError: On any failure for this identifier
        """
        if not cid:
            raise ContentResolutionError(cid, "empty content identifier")

        url = f"{self.gateway_url}/ipfs/{cid}"
        try:
            response = await self.http_client.get(url)
        except httpx.InvalidURL as e:
            # CIDs come from the index unchecked
            raise ContentResolutionError(cid, f"invalid content identifier: {e}") from e
        except httpx.HTTPError as e:
            raise ContentResolutionError(cid, f"gateway unreachable: {e}") from e

        if response.is_error:
            raise ContentResolutionError(cid, f"HTTP {response.status_code}")

        try:
            content = CommentContent.model_validate(response.json())
        except ValueError as e:
            raise ContentResolutionError(cid, f"malformed payload: {e}") from e

        logfire.debug("Content resolved", cid=cid, body_length=len(content.body))
        return content


class MockContentStore(ContentStore):
    """In-memory content store for tests and local runs."""

    def __init__(self) -> None:
        self._contents: dict[ContentId, CommentContent] = {}
        self._failing: set[ContentId] = set()
        self.calls: list[ContentId] = []

    def put(self, cid: ContentId, content: CommentContent) -> None:
        """Store a payload under an identifier."""
        self._contents[cid] = content

    def fail(self, cid: ContentId) -> None:
        """Make every fetch of an identifier fail."""
        self._failing.add(cid)

    async def fetch_content(self, cid: ContentId) -> CommentContent:
        """Return the stored payload."""
        self.calls.append(cid)
        if cid in self._failing:
            raise ContentResolutionError(cid, "mock failure")
        if cid not in self._contents:
            raise ContentResolutionError(cid, "not found")
        return self._contents[cid]
