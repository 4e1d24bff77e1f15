"""Relayer comment index client.

The relayer exposes the on-chain comment records of a discussion at
``GET /comments/{group_id}/{topic_id}?limit=&offset=``.
"""

import httpx
import logfire
from pydantic import ValidationError

from agora.adapter.error import ProviderError
from agora.domain.error import AccessFailureError, ScopeNotFoundError
from agora.domain.model import CommentRecord
from agora.domain.repository import CommentIndex
from agora.domain.value import GroupId, TopicId

# Largest page the relayer serves, whatever limit is asked for
MAX_PAGE_SIZE = 100


class RelayerCommentIndex(CommentIndex):
    """Comment index backed by the relayer HTTP API."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        base_url: str,
        page_size: int = 100,
    ) -> None:
        """Initialize relayer client.

        Args:
            http_client: Shared HTTP client (timeouts are configured on it)
            base_url: Relayer base URL
            page_size: Records requested per page, clamped to MAX_PAGE_SIZE
        """
        self.http_client = http_client
        self.base_url = base_url.rstrip("/")
        # A page shorter than requested ends paging, so never ask for more
        # than the relayer will return
        self.page_size = max(1, min(page_size, MAX_PAGE_SIZE))

    async def fetch_comments(
        self, group_id: GroupId, topic_id: TopicId
    ) -> list[CommentRecord]:
        """Fetch every comment of a discussion, following pages.

        Raises:
            ScopeNotFoundError: If the relayer answers 404
            AccessFailureError: On any other failure
        """
        with logfire.span(
            "relayer.fetch_comments", group_id=group_id, topic_id=topic_id
        ):
            records: list[CommentRecord] = []
            seen: set[int] = set()
            offset = 0
            while True:
                page = await self._fetch_page(group_id, topic_id, offset)
                records.extend(page)
                offset += len(page)

                if len(page) < self.page_size:
                    break
                # A relayer ignoring offset would otherwise repeat the first page
                page_ids = {record.id for record in page}
                if page_ids <= seen:
                    records = records[: -len(page)]
                    break
                seen |= page_ids

            logfire.info(
                "Relayer comments fetched",
                group_id=group_id,
                topic_id=topic_id,
                count=len(records),
            )
            return records

    async def _fetch_page(
        self, group_id: GroupId, topic_id: TopicId, offset: int
    ) -> list[CommentRecord]:
        """Fetch one page of records."""
        url = f"{self.base_url}/comments/{group_id}/{topic_id}"
        try:
            response = await self.http_client.get(
                url, params={"limit": self.page_size, "offset": offset}
            )
        except httpx.HTTPError as e:
            logfire.error("Relayer unreachable", url=url, error=str(e))
            raise AccessFailureError(f"Comment index unreachable: {e}") from e

        if response.status_code == 404:
            raise ScopeNotFoundError(group_id, topic_id)
        if response.is_error:
            logfire.error(
                "Relayer returned an error",
                url=url,
                status_code=response.status_code,
            )
            raise AccessFailureError(
                f"Comment index returned HTTP {response.status_code}"
            )

        try:
            return self._parse_page(response)
        except (ValueError, ProviderError) as e:
            logfire.error("Malformed relayer response", url=url, error=str(e))
            raise AccessFailureError(f"Malformed comment index response: {e}") from e

    @staticmethod
    def _parse_page(response: httpx.Response) -> list[CommentRecord]:
        """Parse ``{"comments": [...], "total": n}``.

        ``total`` is the size of this page only, so it is ignored.

        Raises:
            ProviderError: If the body has the wrong shape
            ValueError: If the body is not JSON or a record is invalid
        """
        payload = response.json()
        if not isinstance(payload, dict):
            raise ProviderError("relayer", "expected a JSON object")

        items = payload.get("comments") or []
        if not isinstance(items, list):
            raise ProviderError("relayer", "expected 'comments' to be a list")

        try:
            return [CommentRecord.model_validate(item) for item in items]
        except ValidationError as e:
            raise ProviderError("relayer", f"invalid comment record: {e}") from e


class MockCommentIndex(CommentIndex):
    """In-memory comment index for tests and local runs."""

    def __init__(self) -> None:
        self._scopes: dict[tuple[GroupId, TopicId], list[CommentRecord]] = {}
        self.unavailable = False
        self.calls: list[tuple[GroupId, TopicId]] = []

    def add_records(
        self, group_id: GroupId, topic_id: TopicId, records: list[CommentRecord]
    ) -> None:
        """Append records to a discussion, creating it if needed."""
        self._scopes.setdefault((group_id, topic_id), []).extend(records)

    async def fetch_comments(
        self, group_id: GroupId, topic_id: TopicId
    ) -> list[CommentRecord]:
        """Return the stored records of a discussion."""
        self.calls.append((group_id, topic_id))
        if self.unavailable:
            raise AccessFailureError("Mock comment index unavailable")
        if (group_id, topic_id) not in self._scopes:
            raise ScopeNotFoundError(group_id, topic_id)
        return list(self._scopes[(group_id, topic_id)])
