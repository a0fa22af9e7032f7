"""nft_collections.service – public entry point of the plugin.

``return_tags`` is stateless: each call builds its own fetcher and parser,
so concurrent calls for different networks share nothing.
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import List, Mapping, Optional

from core.infra.http import HttpClient
from core.models import ContractTag
from core.orchestrator import collect_tags

from .fetcher import CollectionFetcher
from .parser import ContractTagParser

logger = logging.getLogger(__name__)

__all__ = ["SUPPORTED_NETWORKS", "return_tags"]


# Network id -> subgraph URL template; ``[api-key]`` receives the credential.
SUPPORTED_NETWORKS: Mapping[str, str] = MappingProxyType({
    "1": "https://gateway.thegraph.com/api/[api-key]/subgraphs/id/"
         "9u2RuTnfFpJqqdSNsMmYzK2jzATKHpYu3AxuvQhVyxoF",
})


async def return_tags(
    network_id: str,
    credential: str,
    *,
    endpoints: Optional[Mapping[str, str]] = None,
    http: Optional[HttpClient] = None,
    timeout: float = 30.0,
) -> List[ContractTag]:
    """Return a :class:`~core.models.ContractTag` for every valid collection.

    ``endpoints`` replaces :data:`SUPPORTED_NETWORKS` (e.g. from ``config.yaml``
    or in tests); ``http`` lets the caller supply its own client.
    """
    endpoints = SUPPORTED_NETWORKS if endpoints is None else endpoints
    logger.info("Collecting NFT collection tags for network %s", network_id)

    async with CollectionFetcher(timeout=timeout, http=http) as fetcher:
        return await collect_tags(
            network_id,
            credential,
            fetcher=fetcher,
            parser=ContractTagParser(),
            endpoints=endpoints,
        )
