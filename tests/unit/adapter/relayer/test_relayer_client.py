"""Unit tests for RelayerCommentIndex."""

import httpx
import pytest

from agora.adapter.relayer import RelayerCommentIndex
from agora.domain.error import AccessFailureError, ScopeNotFoundError
from agora.domain.value import GroupId, TopicId


def wire_comment(comment_id: int, parent_id: int = 0) -> dict:
    return {
        "id": comment_id,
        "parentId": parent_id,
        "author": "",
        "nullifier": f"0xnull{comment_id}",
        "contentCid": f"bafy{comment_id}",
        "revisionCids": [],
        "deleted": False,
        "deletedBy": 0,
        "createdAt": 1_700_000_000 + comment_id,
        "updatedAt": 1_700_000_000 + comment_id,
    }


def paged_relayer(comments: list[dict]):
    """Handler serving comments the way the relayer does.

    The limit is capped at 100 and ``total`` is the length of the page.
    """
    offsets = []

    def handler(request: httpx.Request) -> httpx.Response:
        offset = int(request.url.params["offset"])
        limit = min(int(request.url.params["limit"]), 100)
        offsets.append(offset)
        page = comments[offset : offset + limit]
        return httpx.Response(200, json={"comments": page, "total": len(page)})

    return handler, offsets


def make_index(handler, page_size: int = 100) -> RelayerCommentIndex:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return RelayerCommentIndex(
        http_client=http_client, base_url="http://relayer.test/", page_size=page_size
    )


class TestFetchComments:
    """Tests for fetch_comments method."""

    @pytest.mark.asyncio
    async def test_single_page(self):
        """A short page should be returned without further requests."""
        # Arrange
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(
                200,
                json={"comments": [wire_comment(1), wire_comment(2, 1)], "total": 2},
            )

        index = make_index(handler)

        # Act
        records = await index.fetch_comments(GroupId(3), TopicId(4))

        # Assert
        assert [record.id for record in records] == [1, 2]
        assert records[1].parent_id == 1
        assert len(requests) == 1
        assert requests[0].url.path == "/comments/3/4"
        assert requests[0].url.params["limit"] == "100"
        assert requests[0].url.params["offset"] == "0"

    @pytest.mark.asyncio
    async def test_follows_pages_until_short_page(self):
        """Full pages should be followed using the offset."""
        handler, offsets = paged_relayer([wire_comment(i) for i in range(1, 6)])
        index = make_index(handler, page_size=2)

        records = await index.fetch_comments(GroupId(1), TopicId(1))

        assert [record.id for record in records] == [1, 2, 3, 4, 5]
        assert offsets == [0, 2, 4]

    @pytest.mark.asyncio
    async def test_page_total_does_not_end_paging(self):
        """The relayer's total counts one page, not the whole discussion."""
        handler, offsets = paged_relayer([wire_comment(i) for i in range(1, 251)])
        index = make_index(handler)

        records = await index.fetch_comments(GroupId(1), TopicId(1))

        assert len(records) == 250
        assert [record.id for record in records] == list(range(1, 251))
        assert offsets == [0, 100, 200]

    @pytest.mark.asyncio
    async def test_exact_multiple_of_page_size(self):
        """A trailing empty page should end paging without losing records."""
        handler, offsets = paged_relayer([wire_comment(i) for i in range(1, 201)])
        index = make_index(handler)

        records = await index.fetch_comments(GroupId(1), TopicId(1))

        assert len(records) == 200
        assert offsets == [0, 100, 200]

    @pytest.mark.asyncio
    async def test_page_size_clamped_to_relayer_cap(self):
        """Asking for more than the relayer serves must not truncate."""
        handler, offsets = paged_relayer([wire_comment(i) for i in range(1, 151)])
        index = make_index(handler, page_size=500)

        records = await index.fetch_comments(GroupId(1), TopicId(1))

        assert index.page_size == 100
        assert len(records) == 150
        assert offsets == [0, 100]

    @pytest.mark.asyncio
    async def test_stops_when_offset_is_ignored(self):
        """A relayer repeating the same page should not loop forever."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200, json={"comments": [wire_comment(1), wire_comment(2)]}
            )

        index = make_index(handler, page_size=2)

        records = await index.fetch_comments(GroupId(1), TopicId(1))

        assert [record.id for record in records] == [1, 2]

    @pytest.mark.asyncio
    async def test_not_found_is_scope_not_found(self):
        """A 404 means the discussion has no backing resource."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"error": "not found"})

        index = make_index(handler)

        with pytest.raises(ScopeNotFoundError):
            await index.fetch_comments(GroupId(1), TopicId(1))

    @pytest.mark.asyncio
    async def test_server_error_is_access_failure(self):
        """Other HTTP errors are retryable access failures."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503)

        index = make_index(handler)

        with pytest.raises(AccessFailureError):
            await index.fetch_comments(GroupId(1), TopicId(1))

    @pytest.mark.asyncio
    async def test_connection_error_is_access_failure(self):
        """Transport errors are access failures."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        index = make_index(handler)

        with pytest.raises(AccessFailureError):
            await index.fetch_comments(GroupId(1), TopicId(1))

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [
            b"not json",
            b"[1, 2]",
            b'{"comments": {"id": 1}}',
            b'{"comments": [{"id": 1}]}',
        ],
    )
    async def test_malformed_body_is_access_failure(self, body):
        """Responses of the wrong shape are access failures."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=body)

        index = make_index(handler)

        with pytest.raises(AccessFailureError):
            await index.fetch_comments(GroupId(1), TopicId(1))

    @pytest.mark.asyncio
    async def test_missing_comments_key_is_empty(self):
        """An object without comments is an empty discussion."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"total": 0})

        index = make_index(handler)

        assert await index.fetch_comments(GroupId(1), TopicId(1)) == []
