import asyncio

import pytest

from lixtools.commons.errors import ToolArgumentError, UnknownToolError
from lixtools.commons.preferences import PreferenceStore
from lixtools.pipeline.toolManager import ToolManager
from lixtools.pipeline.tools import register_builtin_tools

BUILTIN_NAMES = ["GetUserEnvironment", "GetYouTubeVideoScript", "VisitLinks", "VisitLinksHtml"]


@pytest.fixture
def manager():
    manager = ToolManager()
    register_builtin_tools(manager)
    return manager


def test_builtin_tools_registered(manager):
    assert manager.names == BUILTIN_NAMES
    assert manager.get("VisitLinksHtml").display_name == "Visit Web Links (HTML)"


def test_registration_is_once_per_name(manager):
    with pytest.raises(ValueError, match="already registered"):
        register_builtin_tools(manager)
    assert manager.names == BUILTIN_NAMES


def test_definitions_are_immutable(manager):
    definition = manager.get("VisitLinks")
    with pytest.raises(AttributeError):
        definition.name = "Other"
    with pytest.raises(TypeError):
        definition.parameters["required"] = []
    with pytest.raises(TypeError):
        definition.parameters["properties"]["links"]["minItems"] = 0


def test_registration_copies_the_schema():
    schema = {"type": "object", "properties": {"q": {"type": "string"}}, "required": ["q"]}
    manager = ToolManager()
    definition = manager.register_function_tool("Echo", "Echo", "Echo", schema, lambda q=None: q, lambda args=None: "Echoing...")
    schema["properties"]["q"]["type"] = "number"
    assert definition.parameters["properties"]["q"]["type"] == "string"


def test_tool_specs_shape(manager):
    specs = {spec["function"]["name"]: spec for spec in manager.tool_specs()}
    visit = specs["VisitLinks"]
    assert visit["type"] == "function"
    links = visit["function"]["parameters"]["properties"]["links"]
    assert links == {
        "type": "array",
        "items": {"type": "string", "format": "uri"},
        "description": "An array of web links (URLs) to visit.",
        "minItems": 1,
    }
    assert visit["function"]["parameters"]["required"] == ["links"]
    assert specs["GetUserEnvironment"]["function"]["parameters"]["properties"] == {}
    assert specs["GetYouTubeVideoScript"]["function"]["parameters"]["required"] == ["url"]


def test_format_messages(manager):
    assert manager.format_message("GetUserEnvironment") == "Getting user environment..."
    assert manager.format_message("GetYouTubeVideoScript", {"url": "https://youtu.be/dQw4w9WgXcQ"}) == \
        "Getting video script for dQw4w9WgXcQ..."
    assert manager.format_message("VisitLinks", {"links": ["a", "b"]}) == "Visiting 2 links..."
    assert manager.format_message("VisitLinksHtml", None) == "Preparing to visit links to get HTML..."


def test_format_message_failure_degrades_to_generic():
    manager = ToolManager()

    def broken(args=None):
        raise RuntimeError("bad shape")

    manager.register_function_tool("Broken", "Broken Tool", "", {"type": "object", "properties": {}}, lambda: None, broken)
    assert manager.format_message("Broken", {"x": 1}) == "Running Broken Tool..."


def test_unknown_tool():
    manager = ToolManager()
    with pytest.raises(UnknownToolError) as excinfo:
        manager.get("Nope")
    assert "Nope" in str(excinfo.value)
    with pytest.raises(UnknownToolError):
        asyncio.run(manager.invoke("Nope", {}))


def test_invoke_passes_only_declared_arguments():
    manager = ToolManager()
    seen = {}

    async def action(q=None, **extra):
        seen.update(q=q, extra=extra)
        return {"echo": q}

    schema = {"type": "object", "properties": {"q": {"type": "string"}}, "required": ["q"]}
    manager.register_function_tool("Echo", "Echo", "Echo", schema, action, lambda args=None: "Echoing...")
    result = asyncio.run(manager.invoke("Echo", {"q": "hi", "client": object()}))
    assert result == {"echo": "hi"}
    assert seen == {"q": "hi", "extra": {}}


def test_invoke_supports_sync_actions(manager, monkeypatch, tmp_path):
    store = PreferenceStore(str(tmp_path / "prefs.json"))
    store.set_item("language", "de-DE")
    monkeypatch.setattr("lixtools.functionCalls.getUserEnvironment.get_preference_store", lambda: store)
    result = asyncio.run(manager.invoke("GetUserEnvironment", {}))
    assert result["locale"] == "de-DE"
    assert set(result) == {"locale", "localDate", "localTime", "timeZone"}


def test_invoke_propagates_precondition_failures(manager):
    with pytest.raises(ToolArgumentError):
        asyncio.run(manager.invoke("VisitLinks", {"links": []}))
    with pytest.raises(ToolArgumentError):
        asyncio.run(manager.invoke("GetYouTubeVideoScript", {}))
