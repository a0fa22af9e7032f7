"""
Main entry point – fetch all NFT collection tags for one network and print
them as a JSON array.

Usage: python main.py [network_id]
"""

import asyncio
import json
import logging
import os
import sys
from typing import Optional

from dotenv import load_dotenv

# Add project root to PYTHONPATH so imports work when running this script directly
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from core.config import load_config, network_table
from core.errors import ContractTagError, root_cause
from plugins.nft_collections import return_tags


async def main(network_id: Optional[str] = None) -> int:
    """Run one collection and return the process exit code."""
    load_dotenv()

    cfg = load_config(os.getenv("TAGS_CONFIG", "config.yaml"))

    # Setup logging – to stderr, stdout carries the JSON output
    logging.basicConfig(
        level=str(cfg["logging"].get("level", "INFO")).upper(),
        format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        stream=sys.stderr,
    )
    logger = logging.getLogger(__name__)

    network_id = network_id or os.getenv("NETWORK_ID", "1")
    credential = os.getenv("GRAPH_API_KEY")
    if not credential:
        logger.error("GRAPH_API_KEY is not set. Exiting.")
        return 1

    try:
        tags = await return_tags(
            network_id,
            credential,
            endpoints=network_table(cfg),
            timeout=float(cfg["http"].get("timeout", 30.0)),
        )
    except ContractTagError as e:
        logger.error("%s", e)
        logger.debug("Root cause: %r", root_cause(e))
        return 1

    json.dump([t.model_dump(by_alias=True) for t in tags], sys.stdout, indent=2)
    sys.stdout.write("\n")
    logger.info("Wrote %d tags for network %s", len(tags), network_id)
    return 0


def run() -> None:
    """Entry point that can be called from other scripts."""
    sys.exit(asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else None)))


if __name__ == "__main__":
    run()
