"""nft_collections.parser – RawCollection → ContractTag transform.

Two phases per page:

* **validation** drops records that would produce a broken or unsafe tag
  (missing name/symbol/standard, or anything that looks like markup);
* **mapping** turns each surviving record into a :class:`~core.models.ContractTag`.

Rejected records never show up in the output; they are only reported
through the log.
"""
from __future__ import annotations

import logging
import re
from typing import List, Optional, Sequence, Tuple

from core.interfaces import Transform
from core.models import ContractTag, RawCollection, Rejection

logger = logging.getLogger(__name__)

__all__ = ["ContractTagParser", "truncate_display"]


# --------------------------------------------------------------------------- #
PROJECT_NAME = "The Graph"
EXPLORER_URL = "https://etherscan.io/address"

MAX_DISPLAY_LEN = 35
ELLIPSIS = "..."
NAME_SUFFIX = " NFT Collection"

# Generic <...> match: catches HTML tags, and with them some markdown-ish
# or angle-bracket text. Both are treated as markup.
MARKUP_RE = re.compile(r"<[^>]*>")


# --------------------------------------------------------------------------- #
def truncate_display(text: str, limit: int = MAX_DISPLAY_LEN) -> str:
    """Cut *text* to *limit* characters, the ellipsis included."""
    if len(text) <= limit:
        return text
    return text[: limit - len(ELLIPSIS)] + ELLIPSIS


def _rejection_reason(rec: RawCollection) -> Optional[str]:
    if rec.name is None:
        return "missing name"
    if rec.symbol is None:
        return "missing symbol"
    if not rec.standard:
        return "missing standard"
    for field in ("name", "symbol", "standard"):
        if MARKUP_RE.search(getattr(rec, field)):
            return f"markup in {field}"
    return None


# --------------------------------------------------------------------------- #
class ContractTagParser(Transform):
    name = "ContractTagParser"

    # -------------------------------------------------------------- #
    def validate(self, records: Sequence[RawCollection]) -> Tuple[List[RawCollection], List[Rejection]]:
        """Split *records* into accepted ones and rejections, order kept."""
        accepted: List[RawCollection] = []
        rejected: List[Rejection] = []
        for rec in records:
            reason = _rejection_reason(rec)
            if reason is None:
                accepted.append(rec)
            else:
                rejected.append(Rejection(record=rec, reason=reason))
        return accepted, rejected

    # -------------------------------------------------------------- #
    def transform(self, network_id: str, records: Sequence[RawCollection]) -> List[ContractTag]:
        accepted, rejected = self.validate(records)

        if rejected:
            logger.warning("%s – rejected %d of %d records", self.name, len(rejected), len(records))
            for r in rejected:
                logger.debug("Rejected %s: %s", r.record.id, r.reason)

        return [self._to_tag(network_id, rec) for rec in accepted]

    # -------------------------------------------------------------- #
    @staticmethod
    def _to_tag(network_id: str, rec: RawCollection) -> ContractTag:
        display = truncate_display(f"{rec.name} ({rec.symbol})")
        return ContractTag(
            contract_address=f"eip155:{network_id}:{rec.id}",
            public_name_tag=display + NAME_SUFFIX,
            project_name=PROJECT_NAME,
            website_link=f"{EXPLORER_URL}/{rec.id}",
            public_note=(
                f"The contract for the {rec.name} ({rec.symbol}) NFT collection, "
                f"following the {rec.standard} token standard."
            ),
        )

    # -------------------------------------------------------------- #
    def __repr__(self) -> str:  # pragma: no cover
        return f"<{self.name}>"
