"""
Core data models for the contract tag platform.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class RawCollection(BaseModel):
    """One NFT collection as returned by the upstream GraphQL source."""
    model_config = ConfigDict(extra="ignore")

    id: str
    name: Optional[str] = None
    symbol: Optional[str] = None
    standard: Optional[str] = None


# One page of upstream records, never longer than the page size.
PageResult = List[RawCollection]


class ContractTag(BaseModel):
    """Standardized description of one on-chain contract.

    Immutable once built. ``model_dump(by_alias=True)`` gives the registry
    keys (``"Contract Address"``, ``"Public Name Tag"`` ...).
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    contract_address: str = Field(alias="Contract Address", min_length=1)
    public_name_tag: str = Field(alias="Public Name Tag", min_length=1)
    project_name: str = Field(alias="Project Name", min_length=1)
    website_link: str = Field(alias="UI/Website Link", min_length=1)
    public_note: str = Field(alias="Public Note", min_length=1)


class Rejection(BaseModel):
    """A raw record dropped during validation, with the reason why."""
    record: RawCollection
    reason: str
