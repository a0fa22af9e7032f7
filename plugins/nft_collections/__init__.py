"""NFT collections plugin – fetcher, parser, entry point.

* :class:`CollectionFetcher` – pulls one GraphQL page of collections per call
* :class:`ContractTagParser` – validates raw collections and maps them to tags
* :func:`return_tags`        – runs the whole paginated fetch for one network
"""

from .fetcher import CollectionFetcher     # noqa: F401
from .parser import ContractTagParser      # noqa: F401
from .service import SUPPORTED_NETWORKS, return_tags  # noqa: F401
