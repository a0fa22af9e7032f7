"""
Tests for the GraphQL collection fetcher, with a stub HTTP client.
"""

import logging

import pytest

from core.errors import EmptyResponseError, TransportError, UpstreamError
from core.infra.http import HttpResponse
from core.models import RawCollection
from plugins.nft_collections.fetcher import COLLECTIONS_QUERY, CollectionFetcher

ENDPOINT = "https://example.org/api/key/subgraphs/mainnet"


class StubHttp:
    """Records POSTs and answers with a canned response."""

    def __init__(self, status=200, payload=None):
        self.response = HttpResponse(status=status, payload=payload)
        self.calls = []
        self.closed = False

    async def post_json(self, url, data, **kwargs):
        self.calls.append((url, data, kwargs))
        return self.response

    async def close(self):
        self.closed = True


def _collections(n):
    return [
        {"id": f"0x{i:04x}", "name": f"C{i}", "symbol": f"S{i}", "standard": "ERC721"}
        for i in range(n)
    ]


@pytest.mark.asyncio
async def test_request_shape():
    http = StubHttp(payload={"data": {"collections": []}})
    fetcher = CollectionFetcher(http=http)

    await fetcher.fetch_page(ENDPOINT, "0x00ff")

    [(url, body, kwargs)] = http.calls
    assert url == ENDPOINT
    assert body == {"query": COLLECTIONS_QUERY, "variables": {"lastId": "0x00ff"}}
    assert kwargs["headers"]["Content-Type"] == "application/json"
    assert kwargs["headers"]["Accept"] == "application/json"


def test_query_asks_for_ordered_filtered_page():
    assert "first: 1000" in COLLECTIONS_QUERY
    assert "orderBy: id" in COLLECTIONS_QUERY
    assert "orderDirection: asc" in COLLECTIONS_QUERY
    assert "id_gt: $lastId" in COLLECTIONS_QUERY
    for field in ("id", "name", "symbol", "standard"):
        assert field in COLLECTIONS_QUERY


@pytest.mark.asyncio
async def test_returns_parsed_records():
    http = StubHttp(payload={"data": {"collections": _collections(3) + [{"id": "0xnull", "name": None}]}})
    page = await CollectionFetcher(http=http).fetch_page(ENDPOINT, "")

    assert [r.id for r in page] == ["0x0000", "0x0001", "0x0002", "0xnull"]
    assert all(isinstance(r, RawCollection) for r in page)
    assert page[-1].name is None and page[-1].symbol is None


@pytest.mark.asyncio
async def test_empty_collections_is_a_valid_page():
    http = StubHttp(payload={"data": {"collections": []}})
    assert await CollectionFetcher(http=http).fetch_page(ENDPOINT, "0xffff") == []


@pytest.mark.asyncio
async def test_graphql_errors_logged_and_raised(caplog):
    http = StubHttp(payload={"errors": [{"message": "bad query"}, {"message": "indexer down"}]})

    with caplog.at_level(logging.ERROR):
        with pytest.raises(UpstreamError) as exc_info:
            await CollectionFetcher(http=http).fetch_page(ENDPOINT, "")

    assert str(exc_info.value) == "GraphQL errors occurred"
    assert exc_info.value.messages == ["bad query", "indexer down"]
    assert "bad query" in caplog.text
    assert "indexer down" in caplog.text


@pytest.mark.asyncio
async def test_graphql_errors_take_precedence_over_status():
    http = StubHttp(status=400, payload={"errors": [{"message": "syntax"}]})
    with pytest.raises(UpstreamError):
        await CollectionFetcher(http=http).fetch_page(ENDPOINT, "")


@pytest.mark.asyncio
async def test_empty_errors_list_is_ignored():
    http = StubHttp(payload={"data": {"collections": _collections(1)}, "errors": []})
    assert len(await CollectionFetcher(http=http).fetch_page(ENDPOINT, "")) == 1


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [None, "<html>Bad Gateway</html>", {}])
async def test_non_success_status(payload):
    http = StubHttp(status=502, payload=payload)
    with pytest.raises(TransportError) as exc_info:
        await CollectionFetcher(http=http).fetch_page(ENDPOINT, "")
    assert exc_info.value.status == 502


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"data": None},
        {"data": {}},
        {"data": {"collections": None}},
        {"data": {"collectionz": [{"id": "0x1"}]}},
        {"data": {"collections": {"id": "0x1"}}},
        {"data": [1]},
    ],
)
async def test_missing_data(payload):
    http = StubHttp(payload=payload)
    with pytest.raises(EmptyResponseError, match="No data found"):
        await CollectionFetcher(http=http).fetch_page(ENDPOINT, "")


@pytest.mark.asyncio
async def test_injected_client_left_open():
    http = StubHttp(payload={"data": {"collections": []}})
    async with CollectionFetcher(http=http) as fetcher:
        await fetcher.fetch_page(ENDPOINT, "")
    assert http.closed is False


@pytest.mark.asyncio
async def test_owned_client_opened_and_closed():
    fetcher = CollectionFetcher(timeout=5)
    async with fetcher:
        session = fetcher._http._own_session
        assert session is not None and not session.closed
    assert session.closed
    assert fetcher._http._own_session is None
