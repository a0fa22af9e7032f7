"""
Orchestrator driving the Fetch→Transform pagination loop.

Upstream contract this loop relies on
-------------------------------------
* records come back in strictly ascending, duplicate-free ``id`` order;
* the server honours ``id > cursor`` filtering, so the last id of a page is
  a valid cursor for the next one;
* a page shorter than :data:`PAGE_SIZE` is the last page. A full page always
  triggers one more request, even if that one comes back empty.

If the source ever breaks one of these, records get skipped or duplicated
silently; nothing here can detect it.
"""

from __future__ import annotations

import logging
from typing import List, Mapping

from .endpoints import resolve_endpoint
from .errors import FetchFailedError, classify
from .interfaces import Fetcher, Transform
from .models import ContractTag

logger = logging.getLogger(__name__)

PAGE_SIZE = 1000  # fixed by the upstream query
FIRST_PAGE_CURSOR = ""


async def collect_tags(
    network_id: str,
    credential: str,
    *,
    fetcher: Fetcher,
    parser: Transform,
    endpoints: Mapping[str, str],
) -> List[ContractTag]:
    """Fetch every page for *network_id* and return all tags at once.

    Raises :class:`~core.errors.ConfigurationError` before any request when
    the network id is unsupported. Any later failure aborts the whole run
    and surfaces as :class:`~core.errors.FetchFailedError`; tags gathered
    from earlier pages are discarded.
    """
    endpoint = resolve_endpoint(network_id, credential, endpoints)

    tags: List[ContractTag] = []
    cursor = FIRST_PAGE_CURSOR
    seen = 0
    done = False

    try:
        while not done:
            page = await fetcher.fetch_page(endpoint, cursor)
            tags.extend(parser.transform(network_id, page))

            seen += len(page)
            logger.info("%s – %d records fetched so far", fetcher.name, seen)

            done = len(page) < PAGE_SIZE
            if not done:
                cursor = page[-1].id
    except Exception as exc:  # noqa: BLE001
        reason = classify(exc)
        logger.error("%s – run aborted after %d records: %s", fetcher.name, seen, reason)
        raise FetchFailedError(reason) from exc

    logger.info("%s – done, %d tags from %d records", fetcher.name, len(tags), seen)
    return tags
