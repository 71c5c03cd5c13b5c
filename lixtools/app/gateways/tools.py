"""Tool listing and invocation gateway."""
import logging
from quart import g, request, jsonify
from lixtools.app.utils import request_arguments
from lixtools.commons.errors import ToolArgumentError, UnknownToolError
from lixtools.pipeline.config import ERROR_MESSAGE_TRUNCATE

logger = logging.getLogger("lixtools-api")


async def list_tools(manager):
    tools = []
    for definition in manager.definitions():
        spec = definition.to_openai()
        spec["display_name"] = definition.display_name
        tools.append(spec)
    return jsonify({"tools": tools})


async def invoke_tool(manager, name: str):
    request_id = getattr(g, "request_id", "")
    data = await request.get_json(silent=True)
    arguments = request_arguments(data)

    try:
        logger.info(f"[{request_id}] Invoking tool {name}")
        result = await manager.invoke(name, arguments)
        return jsonify({"tool": name, "result": result, "request_id": request_id})
    except UnknownToolError as e:
        logger.warning(f"[{request_id}] {e}")
        return jsonify({"error": str(e), "request_id": request_id}), 404
    except ToolArgumentError as e:
        logger.warning(f"[{request_id}] Bad arguments for {name}: {e}")
        return jsonify({"error": str(e), "request_id": request_id}), 400
    except Exception as e:
        logger.error(f"[{request_id}] Tool {name} error: {str(e)[:ERROR_MESSAGE_TRUNCATE]}", exc_info=True)
        return jsonify({"error": str(e), "request_id": request_id}), 500


async def tool_message(manager, name: str):
    data = await request.get_json(silent=True)
    arguments = request_arguments(data) if data is not None else None

    try:
        message = manager.format_message(name, arguments)
    except UnknownToolError as e:
        return jsonify({"error": str(e)}), 404
    return jsonify({"tool": name, "message": message})
