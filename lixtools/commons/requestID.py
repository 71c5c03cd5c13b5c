import uuid
from quart import g, request
from loguru import logger
from lixtools.pipeline.config import X_REQ_ID_SLICE_SIZE


def reqID():
    return str(uuid.uuid4())[:X_REQ_ID_SLICE_SIZE]


def register_request_id_hooks(app):
    @app.before_request
    async def assign_request_id():
        g.request_id = request.headers.get("X-Request-ID") or reqID()
        logger.debug(f"Request {g.request_id} started: {request.method} {request.path}")

    @app.after_request
    async def attach_request_id(response):
        request_id = getattr(g, "request_id", None) or reqID()
        response.headers["X-Request-ID"] = request_id
        logger.debug(f"Request {request_id} finished: {response.status_code}")
        return response
