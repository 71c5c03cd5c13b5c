import asyncio
import copy
import threading
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional

from loguru import logger

from lixtools.commons.errors import UnknownToolError
from lixtools.pipeline.config import ERROR_MESSAGE_TRUNCATE


def _freeze(value):
    if isinstance(value, dict):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    return value


def _thaw(value):
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [_thaw(item) for item in value]
    return value


@dataclass(frozen=True)
class ToolDefinition:
    name: str
    display_name: str
    description: str
    parameters: Mapping[str, Any]
    action: Callable[..., Any] = field(repr=False)
    format_message: Callable[[Optional[dict]], str] = field(repr=False)

    @property
    def property_names(self) -> List[str]:
        return list(self.parameters.get("properties", {}).keys())

    def to_openai(self) -> dict:
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": _thaw(self.parameters),
            },
        }


class ToolManager:
    """Registry of function tools, keyed by name. Definitions are never replaced once registered."""

    def __init__(self):
        self._tools: Dict[str, ToolDefinition] = {}
        self._lock = threading.Lock()

    def register_function_tool(
        self,
        name: str,
        display_name: str,
        description: str,
        parameters: dict,
        action: Callable[..., Any],
        format_message: Callable[[Optional[dict]], str],
    ) -> ToolDefinition:
        if not name:
            raise ValueError("Tool name is required")
        if not callable(action) or not callable(format_message):
            raise TypeError(f"Tool '{name}' needs callable action and format_message")

        definition = ToolDefinition(
            name=name,
            display_name=display_name,
            description=description,
            parameters=_freeze(copy.deepcopy(parameters)),
            action=action,
            format_message=format_message,
        )
        with self._lock:
            if name in self._tools:
                raise ValueError(f"Tool '{name}' is already registered")
            self._tools[name] = definition
        logger.info(f"[ToolManager] Registered tool {name}")
        return definition

    def get(self, name: str) -> ToolDefinition:
        try:
            return self._tools[name]
        except KeyError:
            raise UnknownToolError(name, self._tools.keys()) from None

    def __contains__(self, name) -> bool:
        return name in self._tools

    @property
    def names(self) -> List[str]:
        return list(self._tools.keys())

    def definitions(self) -> List[ToolDefinition]:
        return list(self._tools.values())

    def tool_specs(self) -> List[dict]:
        return [definition.to_openai() for definition in self._tools.values()]

    def format_message(self, name: str, args: Optional[dict] = None) -> str:
        definition = self.get(name)
        try:
            return definition.format_message(args)
        except Exception as e:
            logger.warning(f"[ToolManager] Progress message for {name} failed: {e}")
            return f"Running {definition.display_name}..."

    async def invoke(self, name: str, args: Optional[dict] = None) -> Any:
        definition = self.get(name)
        args = args if isinstance(args, dict) else {}
        declared = set(definition.property_names)
        kwargs = {key: value for key, value in args.items() if key in declared}
        dropped = set(args) - declared
        if dropped:
            logger.debug(f"[ToolManager] Ignoring undeclared arguments for {name}: {sorted(dropped)}")

        logger.info(f"[ToolManager] Invoking {name}")
        try:
            result = definition.action(**kwargs)
            if asyncio.iscoroutine(result):
                result = await result
        except Exception as e:
            logger.error(f"[ToolManager] {name} failed: {type(e).__name__}: {str(e)[:ERROR_MESSAGE_TRUNCATE]}")
            raise
        return result
