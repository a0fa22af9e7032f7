"""
Endpoint resolution – network id + credential -> fully-qualified URL.
"""

from __future__ import annotations

import re
from typing import Mapping
from urllib.parse import quote

from .errors import ConfigurationError

API_KEY_PLACEHOLDER = "[api-key]"

NETWORK_ID_RE = re.compile(r"[0-9]+")


def resolve_endpoint(network_id: str, credential: str, endpoints: Mapping[str, str]) -> str:
    """Return the endpoint URL for *network_id* with *credential* filled in.

    ``endpoints`` maps numeric network ids (as strings) to URL templates that
    contain :data:`API_KEY_PLACEHOLDER`. The credential is percent-encoded.
    """
    if not NETWORK_ID_RE.fullmatch(network_id) or network_id not in endpoints:
        raise ConfigurationError(network_id, [k for k in endpoints if NETWORK_ID_RE.fullmatch(k)])
    return endpoints[network_id].replace(API_KEY_PLACEHOLDER, quote(credential, safe=""))
