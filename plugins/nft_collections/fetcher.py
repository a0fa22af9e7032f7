"""nft_collections.fetcher – async *Fetcher* for the NFT collections subgraph.

One call to :meth:`CollectionFetcher.fetch_page` is one GraphQL POST
returning at most :data:`~core.orchestrator.PAGE_SIZE` collections whose id
sorts after the cursor. Pagination itself lives in
:func:`core.orchestrator.collect_tags`.

No retries: every failure goes straight back to
the orchestrator, which aborts the run.
"""
from __future__ import annotations

import logging
from contextlib import AsyncExitStack
from typing import Any, Dict, List, Optional

from core.errors import EmptyResponseError, TransportError, UpstreamError
from core.infra.http import HttpClient
from core.interfaces import Fetcher
from core.models import PageResult, RawCollection
from core.orchestrator import PAGE_SIZE

logger = logging.getLogger(__name__)

__all__ = ["CollectionFetcher", "COLLECTIONS_QUERY"]


# --------------------------------------------------------------------------- #
COLLECTIONS_QUERY = f"""
query GetCollections($lastId: String) {{
  collections(
    first: {PAGE_SIZE}
    orderBy: id
    orderDirection: asc
    where: {{ id_gt: $lastId }}
  ) {{
    id
    name
    symbol
    standard
  }}
}}
"""

HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


# --------------------------------------------------------------------------- #
class CollectionFetcher(Fetcher):
    """Pulls one page of collections per call."""

    name = "CollectionFetcher"

    # ------------------------------------------------------------------- #
    def __init__(self, *, timeout: float = 30.0, http: Optional[HttpClient] = None) -> None:
        self._owns_http = http is None
        self._http = http or HttpClient(timeout=timeout, default_headers=HEADERS)
        self._stack = AsyncExitStack()

    # ------------------------------------------------------------------- #
    async def __aenter__(self) -> "CollectionFetcher":
        if self._owns_http:
            await self._stack.enter_async_context(self._http)
        return self

    async def __aexit__(self, *_) -> None:
        await self._stack.aclose()

    # ------------------------------------------------------------------- #
    async def fetch_page(self, endpoint: str, cursor: str) -> PageResult:
        body = {"query": COLLECTIONS_QUERY, "variables": {"lastId": cursor}}
        logger.debug("%s – requesting page after %r", self.name, cursor)

        resp = await self._http.post_json(endpoint, body, headers=HEADERS)
        envelope: Dict[str, Any] = resp.payload if isinstance(resp.payload, dict) else {}

        errors = envelope.get("errors") or []
        if errors:
            messages = [self._error_message(err) for err in errors]
            for msg in messages:
                logger.error("GraphQL error: %s", msg)
            raise UpstreamError(messages)

        if not resp.ok:
            raise TransportError(resp.status)

        data = envelope.get("data")
        collections = data.get("collections") if isinstance(data, dict) else None
        if not isinstance(collections, list):
            raise EmptyResponseError()

        return self._parse_collections(collections)

    # ------------------------------------------------------------------- #
    @staticmethod
    def _error_message(err: Any) -> str:
        if isinstance(err, dict):
            return str(err.get("message", err))
        return str(err)

    @staticmethod
    def _parse_collections(collections: List[Any]) -> List[RawCollection]:
        return [RawCollection.model_validate(c) for c in collections]
