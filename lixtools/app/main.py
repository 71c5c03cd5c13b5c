import logging
import asyncio

from quart import Quart, g, jsonify
from quart_cors import cors
from lixtools.pipeline.main import get_tool_manager
from lixtools.pipeline.toolManager import ToolManager
from lixtools.commons.requestID import register_request_id_hooks
from lixtools.app.gateways import health, tools, preferences
from lixtools.pipeline.config import SERVER_HOST, SERVER_PORT
logger = logging.getLogger("lixtools-api")


class lixTools:

    def __init__(self, manager: ToolManager = None):
        self.app = Quart(__name__)
        self.manager = manager or get_tool_manager()

        self._setup_cors()
        self._setup_middleware()
        self._register_routes()
        self._register_error_handlers()
        self._register_lifecycle_hooks()

    def _setup_cors(self):
        cors(self.app)

    def _setup_middleware(self):
        register_request_id_hooks(self.app)

    def _register_routes(self):
        async def health_check_wrapper():
            return await health.health_check(len(self.manager.names))

        async def list_tools_wrapper():
            return await tools.list_tools(self.manager)

        async def invoke_tool_wrapper(name):
            return await tools.invoke_tool(self.manager, name)

        async def tool_message_wrapper(name):
            return await tools.tool_message(self.manager, name)

        self.app.route('/api/health', methods=['GET'])(health_check_wrapper)
        self.app.route('/api/tools', methods=['GET'])(list_tools_wrapper)
        self.app.route('/api/tools/<name>', methods=['POST'], endpoint='invoke_tool')(invoke_tool_wrapper)
        self.app.route('/api/tools/<name>/message', methods=['POST'], endpoint='tool_message')(tool_message_wrapper)
        self.app.route('/api/preferences/language', methods=['GET'])(preferences.get_language)
        self.app.route('/api/preferences/language', methods=['PUT'])(preferences.set_language)

    def _register_error_handlers(self):
        @self.app.errorhandler(404)
        async def not_found(error):
            return jsonify({"error": "Not found"}), 404

        @self.app.errorhandler(500)
        async def internal_error(error):
            request_id = getattr(g, "request_id", "")
            logger.error(f"[{request_id}] Internal error: {error}", exc_info=True)
            return jsonify({
                "error": "Internal server error",
                "request_id": request_id
            }), 500

    def _register_lifecycle_hooks(self):
        @self.app.before_serving
        async def startup():
            logger.info(f"[APP] lixTools ready with tools: {', '.join(self.manager.names)}")

        @self.app.after_serving
        async def shutdown():
            logger.info("[APP] Shutting down lixTools...")

    def run(self, host: str = SERVER_HOST, port: int = SERVER_PORT, workers: int = 1):
        import hypercorn.asyncio
        from hypercorn.config import Config

        config = Config()
        config.bind = [f"{host}:{port}"]
        config.workers = workers

        logger.info("[APP] Starting lixTools...")
        logger.info(f"[APP] Listening on http://{host}:{port}")

        asyncio.run(hypercorn.asyncio.serve(self.app, config))


def create_app(manager: ToolManager = None) -> lixTools:
    return lixTools(manager)
