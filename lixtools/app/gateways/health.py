"""Health check gateway."""
import logging
from datetime import datetime, timezone
from quart import jsonify

logger = logging.getLogger("lixtools-api")


async def health_check(tools_registered: int):
    """Health check endpoint."""
    return jsonify({
        "status": "healthy" if tools_registered else "degraded",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "tools": tools_registered
    })
