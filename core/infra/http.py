"""
http.py – Async HTTP client built on *aiohttp* with per-instance default
          headers and no retry policy: every failure reaches the caller.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import aiohttp

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpResponse:
    """Status and decoded JSON body (``None`` when the body is not JSON)."""
    status: int
    payload: Any

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class HttpClient:
    """
    Thin wrapper over *aiohttp.ClientSession* adding:

    * global & per-request headers (keeps content negotiation in one place)
    * a total timeout per request
    * async context-manager support

    Unlike ``raise_for_status`` style helpers, :meth:`post_json` hands back
    the status together with the body, because GraphQL servers report
    errors in the body of both 2xx and 4xx responses.
    """

    def __init__(
        self,
        *,
        session: Optional[aiohttp.ClientSession] = None,
        timeout: float = 30.0,
        default_headers: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._external_session = session
        self._timeout = timeout
        self._own_session: Optional[aiohttp.ClientSession] = None
        self._default_headers: Dict[str, str] = dict(default_headers or {})

    # ---------------------------------------------- #
    # Async context-manager
    async def __aenter__(self) -> "HttpClient":  # noqa: D401
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:  # noqa: D401
        await self.close()

    # ---------------------------------------------- #
    # Session management
    async def _ensure_session(self) -> aiohttp.ClientSession:
        if self._external_session:
            return self._external_session
        if self._own_session is None or self._own_session.closed:
            timeout = aiohttp.ClientTimeout(total=self._timeout)
            self._own_session = aiohttp.ClientSession(timeout=timeout)
        return self._own_session

    async def close(self) -> None:
        if self._own_session and not self._own_session.closed:
            await self._own_session.close()
            self._own_session = None

    # ---------------------------------------------- #
    # Internal helpers
    def _merge_headers(self, extra: Mapping[str, str] | None) -> Dict[str, str]:
        merged: Dict[str, str] = {**self._default_headers}
        if extra:
            merged.update(extra)
        return merged

    # ---------------------------------------------- #
    # Public helpers
    async def post_json(self, url: str, data: Any, **kwargs) -> HttpResponse:
        """POST *data* as a JSON body; never raises on HTTP status."""
        session = await self._ensure_session()
        kwargs["headers"] = self._merge_headers(kwargs.pop("headers", None))

        async with session.post(url, json=data, **kwargs) as resp:
            try:
                payload = await resp.json(content_type=None)
            except (json.JSONDecodeError, aiohttp.ContentTypeError) as e:
                logger.debug("POST – status %d, body is not JSON: %s", resp.status, e)
                payload = None
            return HttpResponse(status=resp.status, payload=payload)

