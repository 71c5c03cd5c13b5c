import asyncio
import sys
from pathlib import Path

from loguru import logger

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from lixtools.commons.httpClient import ToolResponse

logger.remove()
logger.add(sys.stderr, level="WARNING")


class FakeClient:
    """Stands in for ToolsClient: answers posts from a table keyed by body url/id."""

    def __init__(self, routes=None, default=None):
        self.routes = dict(routes or {})
        self.default = default if default is not None else ToolResponse(200, "OK", '{"content": "ok"}')
        self.calls = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def post(self, endpoint, body):
        self.calls.append((endpoint, dict(body)))
        key = body.get("url") or body.get("id")
        planned = self.routes.get(key, self.default)
        if isinstance(planned, list):
            planned = planned.pop(0)
        delay, response = planned if isinstance(planned, tuple) else (0, planned)

        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(delay)
        finally:
            self.in_flight -= 1

        if isinstance(response, Exception):
            raise response
        return response


def ok(text, status=200):
    return ToolResponse(status, "OK", text)


def failed(status, reason):
    return ToolResponse(status, reason, "")


