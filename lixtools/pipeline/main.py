from typing import Optional
from loguru import logger
from lixtools.pipeline.toolManager import ToolManager
from lixtools.pipeline.tools import register_builtin_tools


def initialize_tool_manager() -> ToolManager:
    global _tool_manager
    _tool_manager = ToolManager()
    register_builtin_tools(_tool_manager)
    logger.info(f"[ToolManager] Global tool manager initialized with {len(_tool_manager.names)} tools")
    return _tool_manager


def get_tool_manager() -> ToolManager:
    global _tool_manager
    if _tool_manager is None:
        initialize_tool_manager()
    return _tool_manager


_tool_manager: Optional[ToolManager] = None
