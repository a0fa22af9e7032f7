"""
Core interfaces for the contract tag platform.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Sequence

from .models import ContractTag, PageResult, RawCollection


class Fetcher(ABC):
    """Abstract base class for paginated data fetchers.

    A fetcher knows how to pull exactly one page of raw records from an
    endpoint, starting after a cursor. It never paginates on its own: the
    orchestrator drives the cursor.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for this fetcher."""
        pass

    @abstractmethod
    async def fetch_page(self, endpoint: str, cursor: str) -> PageResult:
        """Fetch the records whose id sorts strictly after *cursor*."""
        pass

    async def __aenter__(self) -> "Fetcher":
        return self

    async def __aexit__(self, *_) -> None:
        pass


class Transform(ABC):
    """Abstract base class for raw record -> tag transforms.

    Implementations must be pure: the same records in the same order
    always give the same tags in the same order.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for this transform."""
        pass

    @abstractmethod
    def transform(self, network_id: str, records: Sequence[RawCollection]) -> List[ContractTag]:
        """Drop invalid records and map the rest to tags."""
        pass
