"""MongoDB adapter: owns the lifecycle of the asynchronous client.
"""

from typing import Any, Dict, Optional
import logging
from pymongo import AsyncMongoClient

logger = logging.getLogger("cookbook.mongo")


def _redact(uri: str) -> str:
    """Hide credentials in a connection string before logging it."""
    scheme, sep, rest = uri.partition("://")
    if not sep or "@" not in rest:
        return uri
    return f"{scheme}://***@{rest.split('@', 1)[1]}"


# ------------------ Connection ------------------
async def connect(uri: str, timeout_ms: Optional[int] = None) -> AsyncMongoClient:
    """Create a client and ping the server.

    Errors from the driver propagate; callers decide whether to retry.
    """
    options: Dict[str, Any] = {"tz_aware": True}
    if timeout_ms is not None:
        options["timeoutMS"] = timeout_ms
    client = AsyncMongoClient(uri, **options)
    try:
        await client.admin.command("ping")
    except Exception:
        await close(client)
        raise
    logger.info("Connected to MongoDB %s", _redact(uri))
    return client


async def close(client: Optional[AsyncMongoClient]) -> None:
    """Close a MongoDB client."""
    if client is None:
        return
    try:
        await client.close()
        logger.info("MongoDB client closed")
    except Exception:
        logger.exception("Error closing MongoDB client")
