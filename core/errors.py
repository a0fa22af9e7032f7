"""
Error taxonomy for the contract tag platform.

Every failure a run can surface derives from :class:`ContractTagError`, so
callers can catch the whole family at once and still branch on the variant.
"""

from __future__ import annotations

import asyncio
from typing import Iterable, List, Optional, Sequence

import aiohttp
from pydantic import ValidationError


class ContractTagError(Exception):
    """Base class for every error raised by the platform."""


class ConfigurationError(ContractTagError):
    """Unsupported or malformed network identifier."""

    def __init__(self, network_id: str, supported: Iterable[str]) -> None:
        self.network_id = network_id
        self.supported: List[str] = sorted(supported)
        super().__init__(
            f"Unsupported network id {network_id!r}. "
            f"Supported network ids: {', '.join(self.supported)}"
        )


class TransportError(ContractTagError):
    """The upstream answered with a non-success HTTP status."""

    def __init__(self, status: int) -> None:
        self.status = status
        super().__init__(f"HTTP error! status: {status}")


class UpstreamError(ContractTagError):
    """The data source reported application-level (GraphQL) errors."""

    def __init__(self, messages: Sequence[str]) -> None:
        self.messages = list(messages)
        super().__init__("GraphQL errors occurred")


class EmptyResponseError(ContractTagError):
    """Well-formed response without the expected payload."""

    def __init__(self) -> None:
        super().__init__("No data found")


class UnknownError(ContractTagError):
    """A failure that is not one of the recognized shapes.

    The original exception is kept on ``cause`` for diagnostics.
    """

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__("An unknown error occurred")


class FetchFailedError(ContractTagError):
    """Wraps whatever aborted a pagination run with added context.

    An :class:`UnknownError` keeps its generic message as is; every other
    reason is prefixed with ``"Failed fetching data: "``.
    """

    def __init__(self, reason: ContractTagError | Exception) -> None:
        self.reason = reason
        if isinstance(reason, UnknownError):
            super().__init__(str(reason))
        else:
            super().__init__(f"Failed fetching data: {reason}")


# Failures that carry a meaningful message of their own.
RECOGNIZED_ERRORS = (
    ContractTagError,
    aiohttp.ClientError,
    asyncio.TimeoutError,
    ValidationError,
)


def classify(exc: Exception) -> Exception:
    """Return *exc* when it is a recognized failure, else an :class:`UnknownError`."""
    if isinstance(exc, RECOGNIZED_ERRORS):
        return exc
    return UnknownError(exc)


def root_cause(exc: BaseException) -> Optional[BaseException]:
    """Unwrap :class:`FetchFailedError` / :class:`UnknownError` down to the raw cause."""
    while isinstance(exc, (FetchFailedError, UnknownError)):
        exc = exc.reason if isinstance(exc, FetchFailedError) else exc.cause
    return exc
