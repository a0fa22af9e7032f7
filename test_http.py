"""
Tests for the aiohttp wrapper helpers that need no network.
"""

import pytest

from core.infra.http import HttpClient, HttpResponse


@pytest.mark.parametrize("status,ok", [(200, True), (204, True), (301, False), (400, False), (500, False)])
def test_response_ok(status, ok):
    assert HttpResponse(status=status, payload=None).ok is ok


def test_per_request_headers_override_defaults():
    client = HttpClient(default_headers={"Accept": "application/json", "X-A": "1"})
    merged = client._merge_headers({"X-A": "2"})
    assert merged == {"Accept": "application/json", "X-A": "2"}


@pytest.mark.asyncio
async def test_close_without_session_is_noop():
    client = HttpClient()
    await client.close()


@pytest.mark.asyncio
async def test_context_manager_owns_session():
    async with HttpClient(timeout=5) as client:
        session = client._own_session
        assert session is not None and not session.closed
    assert session.closed
