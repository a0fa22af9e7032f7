"""
Configuration loading – ``config.yaml`` plus ``.env``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "networks": None,
    "http": {"timeout": 30.0},
    "logging": {"level": "INFO"},
}


def load_config(path: str = "config.yaml") -> Dict[str, Any]:
    """Load configuration from YAML, falling back to :data:`DEFAULTS`.

    Sections present in the file replace the defaults key by key; a missing
    file only logs a warning.
    """
    cfg: Dict[str, Any] = {k: (dict(v) if isinstance(v, dict) else v) for k, v in DEFAULTS.items()}

    p = Path(path)
    if not p.exists():
        logger.warning(f"Config file not found: {path} – using defaults")
        return cfg

    with p.open() as f:
        data = yaml.safe_load(f) or {}

    for key, value in data.items():
        if value is None:
            continue
        if isinstance(cfg.get(key), dict) and isinstance(value, dict):
            cfg[key].update(value)
        else:
            cfg[key] = value
    return cfg


def network_table(cfg: Mapping[str, Any]) -> Optional[Dict[str, str]]:
    """Return the ``networks`` section with string keys, or ``None`` if unset."""
    networks = cfg.get("networks")
    if not networks:
        return None
    return {str(k): str(v) for k, v in networks.items()}
