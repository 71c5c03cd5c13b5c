import asyncio
import json

import pytest

from conftest import FakeClient, ok, failed
from lixtools.commons.errors import ToolArgumentError
from lixtools.functionCalls.visitLinks import (
    visit_links,
    visit_links_html,
    format_visit_links_message,
    format_visit_links_html_message,
)
from lixtools.functionCalls.getYoutubeDetails import get_youtube_video_script


def test_visit_links_scenario():
    client = FakeClient({"https://a.example": ok(json.dumps({"content": "Example Domain"}))})
    results = asyncio.run(visit_links(["https://a.example", "not a url"], client=client))
    assert results == {
        "https://a.example": {"content": "Example Domain"},
        "not a url": {"error": "Invalid URL provided."},
    }
    assert client.calls == [("/api/visit-links", {"url": "https://a.example"})]


def test_visit_links_html_uses_html_endpoint():
    client = FakeClient({
        "https://a.example": ok("<html>A</html>"),
        "https://b.example": failed(403, "Forbidden"),
    })
    results = asyncio.run(visit_links_html(["https://a.example", "https://b.example"], client=client))
    assert results == {
        "https://a.example": {"html": "<html>A</html>"},
        "https://b.example": {"error": "Failed to fetch content for https://b.example: Forbidden"},
    }
    assert sorted(call[0] for call in client.calls) == ["/api/search/visit", "/api/search/visit"]
    assert all(call[1]["html"] is True for call in client.calls)


def test_visit_links_preconditions():
    client = FakeClient()
    with pytest.raises(ToolArgumentError):
        asyncio.run(visit_links(None, client=client))
    with pytest.raises(ToolArgumentError):
        asyncio.run(visit_links_html([], client=client))
    assert client.calls == []


def test_visit_links_messages():
    assert format_visit_links_message({"links": ["https://a.example"]}) == "Visiting 1 link..."
    assert format_visit_links_message({"links": ["https://a.example", "https://b.example"]}) == "Visiting 2 links..."
    assert format_visit_links_message({"links": []}) == "Preparing to visit links..."
    assert format_visit_links_message(None) == "Preparing to visit links..."
    assert format_visit_links_message({"links": "https://a.example"}) == "Preparing to visit links..."
    assert format_visit_links_html_message({"links": ["x"]}) == "Visiting 1 link to get HTML..."
    assert format_visit_links_html_message({"links": ["x", "y", "z"]}) == "Visiting 3 links to get HTML..."
    assert format_visit_links_html_message({}) == "Preparing to visit links to get HTML..."


def test_video_script_request_body():
    envelope = json.dumps({"transcript": "We're no strangers to love", "html": ""})
    client = FakeClient({"dQw4w9WgXcQ": ok(envelope)})
    result = asyncio.run(get_youtube_video_script("https://youtu.be/dQw4w9WgXcQ", client=client))
    assert client.calls == [("/api/search/transcript", {"id": "dQw4w9WgXcQ", "lang": "", "json": True})]
    assert result == {"transcript": "We're no strangers to love"}


def test_video_script_accepts_bare_id():
    client = FakeClient({"dQw4w9WgXcQ": ok(json.dumps({"transcript": "t"}))})
    result = asyncio.run(get_youtube_video_script("dQw4w9WgXcQ", client=client))
    assert result == {"transcript": "t"}


def test_video_script_degrades_on_unreadable_envelope():
    client = FakeClient({"dQw4w9WgXcQ": ok("raw transcript")})
    result = asyncio.run(get_youtube_video_script("https://www.youtube.com/watch?v=dQw4w9WgXcQ", client=client))
    assert result == {"transcript": "raw transcript"}


def test_video_script_transport_failure_is_data():
    client = FakeClient({"dQw4w9WgXcQ": failed(500, "Internal Server Error")})
    url = "https://youtu.be/dQw4w9WgXcQ"
    result = asyncio.run(get_youtube_video_script(url, client=client))
    assert result == {"error": f"Failed to fetch YouTube video transcript for {url}: Internal Server Error"}


def test_video_script_preconditions():
    client = FakeClient()
    with pytest.raises(ToolArgumentError, match="URL is required"):
        asyncio.run(get_youtube_video_script(None, client=client))
    with pytest.raises(ToolArgumentError, match="URL is required"):
        asyncio.run(get_youtube_video_script("", client=client))
    with pytest.raises(ToolArgumentError, match="Invalid URL"):
        asyncio.run(get_youtube_video_script("not a video", client=client))
    assert client.calls == []
